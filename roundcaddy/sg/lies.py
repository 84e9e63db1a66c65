"""Lie classification for recorded approach outcomes."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .benchmarks import (
    expected_from_bunker,
    expected_from_fairway,
    expected_from_recovery,
    expected_from_rough,
    expected_from_tee,
    expected_on_green,
)


class ApproachResult(str, Enum):
    GREEN = "green"
    FRINGE = "fringe"
    GREENSIDE_ROUGH = "greenside_rough"
    BUNKER = "bunker"
    SHORT = "short"
    LONG = "long"
    LEFT = "left"
    RIGHT = "right"


class Lie(str, Enum):
    TEE = "tee"
    FAIRWAY = "fairway"
    ROUGH = "rough"
    BUNKER = "bunker"
    RECOVERY = "recovery"
    GREEN = "green"
    HOLE = "hole"


# Single source of truth for where an approach result leaves the ball.
APPROACH_RESULT_LIES: Mapping[ApproachResult, Lie] = MappingProxyType(
    {
        ApproachResult.GREEN: Lie.GREEN,
        ApproachResult.FRINGE: Lie.GREEN,
        ApproachResult.GREENSIDE_ROUGH: Lie.ROUGH,
        ApproachResult.BUNKER: Lie.BUNKER,
        ApproachResult.SHORT: Lie.RECOVERY,
        ApproachResult.LONG: Lie.RECOVERY,
        ApproachResult.LEFT: Lie.RECOVERY,
        ApproachResult.RIGHT: Lie.RECOVERY,
    }
)

DEFAULT_MISSED_GREEN_LIE = Lie.RECOVERY


def coerce_approach_result(value: Any) -> Optional[ApproachResult]:
    """Map free-form input onto :class:`ApproachResult`, ``None`` if unknown."""

    if value is None or isinstance(value, ApproachResult):
        return value
    if not isinstance(value, str):
        return None
    normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return ApproachResult(normalized)
    except ValueError:
        return None


def classify_approach_result(
    result: ApproachResult | str | None, *, gir: bool = False
) -> Lie:
    """Return the lie an approach left the ball on.

    Missing or unrecognised results fall back to the around-green recovery
    lie, except on a green-in-regulation hole where the ball is on the green.
    """

    approach = coerce_approach_result(result)
    if approach is None:
        return Lie.GREEN if gir else DEFAULT_MISSED_GREEN_LIE
    return APPROACH_RESULT_LIES.get(approach, DEFAULT_MISSED_GREEN_LIE)


def expected_for_lie(lie: Lie, distance: float) -> float:
    """Expected strokes to hole out from ``lie`` at ``distance``.

    Green distances are feet, every other lie is yards. A holed ball needs
    no more strokes.
    """

    if lie is Lie.HOLE:
        return 0.0
    if lie is Lie.GREEN:
        return expected_on_green(distance)
    if lie is Lie.TEE:
        return expected_from_tee(distance)
    if lie is Lie.FAIRWAY:
        return expected_from_fairway(distance)
    if lie is Lie.ROUGH:
        return expected_from_rough(distance)
    if lie is Lie.BUNKER:
        return expected_from_bunker(distance)
    return expected_from_recovery(distance)


__all__ = [
    "APPROACH_RESULT_LIES",
    "ApproachResult",
    "DEFAULT_MISSED_GREEN_LIE",
    "Lie",
    "classify_approach_result",
    "coerce_approach_result",
    "expected_for_lie",
]
