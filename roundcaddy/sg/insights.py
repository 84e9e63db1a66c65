"""Coaching insights derived from a strokes-gained breakdown."""

from __future__ import annotations

from .schemas import AreaInsight, SGCategory, StrokesGainedResult

RECOMMENDATIONS = {
    SGCategory.OFF_TEE: "Focus on driving accuracy and distance control",
    SGCategory.APPROACH: "Work on iron play and distance control with approaches",
    SGCategory.AROUND_GREEN: "Practice chipping, pitching, and bunker play",
    SGCategory.PUTTING: "Focus on speed control and short putts",
}

STRENGTH_NOTES = {
    SGCategory.OFF_TEE: "Your driving sets up your scoring; keep attacking off the tee",
    SGCategory.APPROACH: "Your iron play is a weapon; keep firing at greens",
    SGCategory.AROUND_GREEN: "Your short game saves strokes; trust it when you miss",
    SGCategory.PUTTING: "Your putting is gaining strokes; keep your routine",
}


def identify_weakest_area(sg: StrokesGainedResult) -> AreaInsight:
    # min() keeps the first category in enumeration order on ties.
    area = min(SGCategory, key=sg.value_for)
    return AreaInsight(
        area=area,
        label=area.label,
        value=sg.value_for(area),
        recommendation=RECOMMENDATIONS[area],
    )


def identify_strongest_area(sg: StrokesGainedResult) -> AreaInsight:
    area = max(SGCategory, key=sg.value_for)
    return AreaInsight(
        area=area,
        label=area.label,
        value=sg.value_for(area),
        recommendation=STRENGTH_NOTES[area],
    )


__all__ = [
    "RECOMMENDATIONS",
    "STRENGTH_NOTES",
    "identify_strongest_area",
    "identify_weakest_area",
]
