"""Strokes gained calculator.

Implements the Strokes Gained methodology (Mark Broadie, PGA Tour ShotLink):

    SG = Expected Strokes (start) - Expected Strokes (end) - strokes taken

chained across tee -> approach landing -> green -> hole-out. A positive value
means the player gained strokes on the benchmark, negative means lost.

Missing approach or first-putt distances never fail the calculation: any
category that needs the missing value contributes zero, unless the caller
asks for the estimates the scoring apps use instead.
"""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Iterable, Optional, Sequence

from roundcaddy.config import get_settings
from roundcaddy.telemetry.events import record_sg_compute

from .benchmarks import (
    expected_from_fairway,
    expected_from_rough,
    expected_from_tee,
    expected_on_green,
    expected_putts,
)
from .lies import Lie, classify_approach_result, expected_for_lie
from .schemas import HoleEntryData, StrokesGainedResult

logger = logging.getLogger(__name__)

AVERAGE_DRIVE_YARDS = 250
MIN_ESTIMATED_APPROACH_YARDS = 50
PAR5_ESTIMATED_APPROACH_YARDS = 150


def estimate_approach_distance(par: int, hole_yardage: float) -> float:
    """Rough approach length when the player did not record one."""

    if par == 3:
        return float(hole_yardage)
    if par == 4:
        return float(
            max(hole_yardage - AVERAGE_DRIVE_YARDS, MIN_ESTIMATED_APPROACH_YARDS)
        )
    return float(PAR5_ESTIMATED_APPROACH_YARDS)


def estimate_first_putt_distance(gir: bool, score: int, par: int, putts: int) -> float:
    """Rough first-putt length (feet) when the player did not record one."""

    if gir:
        return 25.0
    if score == par and putts == 1:
        return 3.0
    return 15.0


def _approach_start(hole: HoleEntryData, approach_distance: float) -> float:
    """Expected strokes from where the tee shot finished."""

    if hole.par == 3 or hole.fairway_hit is True:
        return expected_from_fairway(approach_distance)
    if hole.fairway_hit is False:
        return expected_from_rough(approach_distance)
    fairway = expected_from_fairway(approach_distance)
    rough = expected_from_rough(approach_distance)
    return (fairway + rough) / 2


def _strokes_before_green_segment(par: int) -> int:
    return 2 if par >= 4 else 1


def calculate_hole_strokes_gained(
    hole: HoleEntryData,
    hole_yardage: Optional[float] = None,
    *,
    estimate_missing: bool = False,
) -> StrokesGainedResult:
    """Decompose one hole into off-tee, approach, around-green and putting SG."""

    yardage = (
        float(hole_yardage)
        if hole_yardage is not None
        else float(get_settings().default_hole_yardage)
    )

    approach_distance = hole.approach_distance
    first_putt = hole.first_putt_distance
    if estimate_missing:
        if approach_distance is None:
            approach_distance = estimate_approach_distance(hole.par, yardage)
        if first_putt is None:
            first_putt = estimate_first_putt_distance(
                hole.gir, hole.score, hole.par, hole.putts
            )

    lie = classify_approach_result(hole.approach_result, gir=hole.gir)
    holed_off_green = hole.putts == 0

    approach_start: Optional[float] = None
    if approach_distance is not None:
        approach_start = _approach_start(hole, approach_distance)

    # Expected strokes where the approach finished.
    approach_end: Optional[float] = None
    if lie is Lie.GREEN:
        if holed_off_green:
            approach_end = 0.0
        elif first_putt is not None:
            approach_end = expected_for_lie(Lie.GREEN, first_putt)
    elif approach_distance is not None:
        approach_end = expected_for_lie(lie, approach_distance)

    sg_off_tee = 0.0
    if hole.par >= 4 and approach_start is not None:
        sg_off_tee = expected_from_tee(yardage) - approach_start - 1

    sg_approach = 0.0
    if approach_start is not None and approach_end is not None:
        sg_approach = approach_start - approach_end - 1

    sg_around_green = 0.0
    if lie is not Lie.GREEN and approach_end is not None:
        shots_around_green = (
            hole.score
            - hole.putts
            - hole.penalties
            - _strokes_before_green_segment(hole.par)
        )
        if shots_around_green > 0:
            green_start: Optional[float] = None
            if holed_off_green:
                green_start = 0.0
            elif first_putt is not None:
                green_start = expected_on_green(first_putt)
            if green_start is not None:
                sg_around_green = approach_end - green_start - shots_around_green

    sg_putting = 0.0
    if hole.putts > 0 and first_putt is not None:
        sg_putting = expected_putts(first_putt) - hole.putts

    return StrokesGainedResult(
        sg_off_tee=sg_off_tee,
        sg_approach=sg_approach,
        sg_around_green=sg_around_green,
        sg_putting=sg_putting,
    )


def _sum_results(results: Iterable[StrokesGainedResult]) -> StrokesGainedResult:
    off_tee = approach = around_green = putting = 0.0
    for result in results:
        off_tee += result.sg_off_tee
        approach += result.sg_approach
        around_green += result.sg_around_green
        putting += result.sg_putting
    return StrokesGainedResult(
        sg_off_tee=off_tee,
        sg_approach=approach,
        sg_around_green=around_green,
        sg_putting=putting,
    )


def calculate_round_strokes_gained(
    holes: Sequence[HoleEntryData],
    hole_yardages: Optional[Sequence[Optional[float]]] = None,
    *,
    estimate_missing: bool = False,
) -> StrokesGainedResult:
    """Sum every category across the round's holes.

    ``hole_yardages`` is matched by index; holes past its end, or with a
    ``None`` entry, use the default yardage.
    """

    start = perf_counter()
    yardages = list(hole_yardages or [])
    per_hole = []
    for index, hole in enumerate(holes):
        yardage = yardages[index] if index < len(yardages) else None
        per_hole.append(
            calculate_hole_strokes_gained(
                hole, yardage, estimate_missing=estimate_missing
            )
        )

    result = _sum_results(per_hole)
    elapsed_ms = (perf_counter() - start) * 1000
    logger.debug(
        "round strokes gained over %d holes: %.3f", len(per_hole), result.sg_total
    )
    record_sg_compute("round", len(per_hole), elapsed_ms)
    return result


def calculate_average_strokes_gained(
    rounds: Sequence[StrokesGainedResult],
) -> StrokesGainedResult:
    """Per-round average of each category across ``rounds``."""

    if not rounds:
        return StrokesGainedResult()

    summed = _sum_results(rounds)
    count = len(rounds)
    return StrokesGainedResult(
        sg_off_tee=summed.sg_off_tee / count,
        sg_approach=summed.sg_approach / count,
        sg_around_green=summed.sg_around_green / count,
        sg_putting=summed.sg_putting / count,
    )


__all__ = [
    "calculate_average_strokes_gained",
    "calculate_hole_strokes_gained",
    "calculate_round_strokes_gained",
    "estimate_approach_distance",
    "estimate_first_putt_distance",
]
