"""PGA Tour benchmark curves and interpolation for strokes gained.

Each table maps a distance to the expected number of strokes to hole out,
based on PGA Tour ShotLink data and Mark Broadie's research. Approach tables
are keyed by yards to the pin, putting tables by feet.
"""

from __future__ import annotations

from math import isnan
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple, Union

BenchmarkTable = Tuple[Tuple[float, float], ...]
TableLike = Union[Mapping[float, float], Iterable[Tuple[float, float]]]

# Expected strokes from the tee by hole length (yards).
TEE_SHOT_BENCHMARKS: BenchmarkTable = (
    (100, 2.92),
    (125, 2.99),
    (150, 3.08),
    (175, 3.18),
    (200, 3.32),
    (225, 3.45),
    (250, 3.58),
    (275, 3.71),
    (300, 3.84),
    (325, 3.97),
    (350, 4.08),
    (375, 4.17),
    (400, 4.28),
    (425, 4.41),
    (450, 4.54),
    (475, 4.69),
    (500, 4.79),
    (525, 4.96),
    (550, 5.09),
    (575, 5.24),
    (600, 5.39),
)

FAIRWAY_BENCHMARKS: BenchmarkTable = (
    (25, 2.40),
    (50, 2.60),
    (75, 2.72),
    (100, 2.87),
    (125, 2.95),
    (150, 3.00),
    (175, 3.08),
    (200, 3.19),
    (225, 3.32),
    (250, 3.48),
    (275, 3.65),
    (300, 3.81),
)

ROUGH_BENCHMARKS: BenchmarkTable = (
    (25, 2.53),
    (50, 2.73),
    (75, 2.86),
    (100, 2.98),
    (125, 3.08),
    (150, 3.17),
    (175, 3.28),
    (200, 3.42),
    (225, 3.58),
    (250, 3.75),
    (275, 3.92),
    (300, 4.08),
)

BUNKER_BENCHMARKS: BenchmarkTable = (
    (10, 2.43),
    (20, 2.53),
    (30, 2.68),
    (40, 2.83),
    (50, 2.97),
    (75, 3.15),
    (100, 3.32),
    (125, 3.52),
    (150, 3.72),
)

RECOVERY_BENCHMARKS: BenchmarkTable = (
    (25, 2.77),
    (50, 2.96),
    (75, 3.12),
    (100, 3.24),
    (125, 3.38),
    (150, 3.51),
    (175, 3.66),
    (200, 3.82),
)

# Expected putts by first-putt length (feet).
PUTTING_BENCHMARKS: BenchmarkTable = (
    (1, 1.001),
    (2, 1.009),
    (3, 1.044),
    (4, 1.115),
    (5, 1.211),
    (6, 1.299),
    (7, 1.373),
    (8, 1.438),
    (9, 1.495),
    (10, 1.546),
    (12, 1.635),
    (14, 1.710),
    (16, 1.774),
    (18, 1.829),
    (20, 1.877),
    (25, 1.970),
    (30, 2.040),
    (35, 2.095),
    (40, 2.140),
    (45, 2.179),
    (50, 2.213),
    (60, 2.267),
    (70, 2.310),
    (80, 2.346),
    (90, 2.376),
)

# Expected strokes once on the green (feet), used as the end of an approach.
ON_GREEN_BENCHMARKS: BenchmarkTable = (
    (5, 1.26),
    (10, 1.55),
    (15, 1.72),
    (20, 1.88),
    (25, 1.97),
    (30, 2.04),
    (40, 2.14),
    (50, 2.22),
    (60, 2.27),
)

TABLES: Mapping[str, BenchmarkTable] = MappingProxyType(
    {
        "tee": TEE_SHOT_BENCHMARKS,
        "fairway": FAIRWAY_BENCHMARKS,
        "rough": ROUGH_BENCHMARKS,
        "bunker": BUNKER_BENCHMARKS,
        "recovery": RECOVERY_BENCHMARKS,
        "putting": PUTTING_BENCHMARKS,
        "on_green": ON_GREEN_BENCHMARKS,
    }
)


def _points(table: TableLike) -> list[Tuple[float, float]]:
    if isinstance(table, Mapping):
        pairs = table.items()
    else:
        pairs = table
    return sorted((float(d), float(v)) for d, v in pairs)


def interpolate(table: TableLike, distance: float) -> float:
    """Piecewise-linear lookup with clamping at both ends of the table.

    Out-of-range distances (including negative or absurd values from bad
    data) are clamped rather than rejected. Only an empty table raises.
    """

    points = _points(table)
    if not points:
        raise ValueError("benchmark table must not be empty")

    query = float(distance)

    # NaN compares false everywhere; treat it like a below-range query.
    if isnan(query) or query <= points[0][0]:
        return points[0][1]

    if query >= points[-1][0]:
        return points[-1][1]

    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        if query == x1:
            return y1
        if x1 < query < x2:
            fraction = (query - x1) / (x2 - x1)
            return y1 + fraction * (y2 - y1)
        if query == x2:
            return y2

    return points[-1][1]  # pragma: no cover - unreachable for sorted, non-NaN input


def _validate_table(name: str, table: BenchmarkTable) -> None:
    """Ensure shipped tables are non-empty with strictly increasing keys."""

    if not table:
        raise ValueError(f"benchmark table {name!r} is empty")
    last_distance = None
    for distance, _ in table:
        if distance <= 0:
            raise ValueError(f"benchmark table {name!r} has a non-positive key")
        if last_distance is not None and distance <= last_distance:
            raise ValueError(
                f"benchmark table {name!r} distances must be strictly increasing"
            )
        last_distance = distance


for _name, _table in TABLES.items():
    _validate_table(_name, _table)


def expected_from_tee(hole_yards: float) -> float:
    return interpolate(TEE_SHOT_BENCHMARKS, hole_yards)


def expected_from_fairway(yards_to_pin: float) -> float:
    return interpolate(FAIRWAY_BENCHMARKS, yards_to_pin)


def expected_from_rough(yards_to_pin: float) -> float:
    return interpolate(ROUGH_BENCHMARKS, yards_to_pin)


def expected_from_bunker(yards_to_pin: float) -> float:
    return interpolate(BUNKER_BENCHMARKS, yards_to_pin)


def expected_from_recovery(yards_to_pin: float) -> float:
    return interpolate(RECOVERY_BENCHMARKS, yards_to_pin)


def expected_putts(feet_to_hole: float) -> float:
    return interpolate(PUTTING_BENCHMARKS, feet_to_hole)


def expected_on_green(feet_to_hole: float) -> float:
    return interpolate(ON_GREEN_BENCHMARKS, feet_to_hole)


__all__ = [
    "BUNKER_BENCHMARKS",
    "BenchmarkTable",
    "FAIRWAY_BENCHMARKS",
    "ON_GREEN_BENCHMARKS",
    "PUTTING_BENCHMARKS",
    "RECOVERY_BENCHMARKS",
    "ROUGH_BENCHMARKS",
    "TABLES",
    "TEE_SHOT_BENCHMARKS",
    "expected_from_bunker",
    "expected_from_fairway",
    "expected_from_recovery",
    "expected_from_rough",
    "expected_from_tee",
    "expected_on_green",
    "expected_putts",
    "interpolate",
]
