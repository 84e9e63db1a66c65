"""Display helpers shared by the API and client renderers."""

from __future__ import annotations

from math import floor


def _round_half_up(value: float) -> int:
    return int(floor(value + 0.5))


def format_sg(value: float) -> str:
    """Signed two-decimal strokes-gained label, e.g. ``+0.25`` or ``-1.10``."""

    value = value + 0.0  # folds -0.0 into 0.0
    prefix = "+" if value >= 0 else ""
    return f"{prefix}{value:.2f}"


def format_distance(yards: int) -> str:
    if yards < 0:
        return "--"
    return str(yards)


def format_accuracy(accuracy_m: float) -> str:
    radius = _round_half_up(accuracy_m)
    if accuracy_m < 10:
        return f"±{radius}m (GPS)"
    if accuracy_m < 50:
        return f"±{radius}m (WiFi)"
    return f"±{radius}m (approx)"


def calculate_score_to_par(score: int, par: int) -> str:
    diff = score - par
    if diff == 0:
        return "E"
    return f"+{diff}" if diff > 0 else str(diff)


__all__ = [
    "calculate_score_to_par",
    "format_accuracy",
    "format_distance",
    "format_sg",
]
