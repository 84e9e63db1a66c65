"""Strokes gained core package."""

from .benchmarks import TABLES, interpolate  # noqa: F401
from .calculator import (  # noqa: F401
    calculate_average_strokes_gained,
    calculate_hole_strokes_gained,
    calculate_round_strokes_gained,
)
from .insights import identify_strongest_area, identify_weakest_area  # noqa: F401
from .lies import ApproachResult, Lie, classify_approach_result  # noqa: F401
from .schemas import (  # noqa: F401
    AreaInsight,
    HoleEntryData,
    SGCategory,
    StrokesGainedResult,
)
