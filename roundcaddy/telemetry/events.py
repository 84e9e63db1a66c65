"""Telemetry helpers for GPS tracking and strokes-gained computation."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping, MutableMapping, Optional

TelemetryEmitter = Callable[[str, Mapping[str, object]], None]

_emitter: Optional[TelemetryEmitter] = None
_logger = logging.getLogger("roundcaddy.telemetry.events")


def set_telemetry_emitter(candidate: TelemetryEmitter | None) -> None:
    """Register a telemetry emitter; ``None`` disables emission."""

    global _emitter
    _emitter = candidate if callable(candidate) else None


def _safe_emit(event: str, payload: MutableMapping[str, object]) -> None:
    if not _emitter:
        _logger.debug("telemetry emitter not configured for event %s", event)
        return
    try:
        _emitter(event, dict(payload))
    except Exception:
        _logger.exception("failed to emit telemetry event %s", event)


def record_gps_status(
    status: str, *, previous: str | None = None, error: str | None = None
) -> None:
    payload: Dict[str, object] = {"status": status, "ts": _now_ms()}
    if previous:
        payload["previous"] = previous
    if error:
        payload["error"] = error
    _safe_emit("gps.status", payload)


def record_shot_marked(
    hole_number: int,
    shot_number: int,
    *,
    club: str | None = None,
    distance_yards: int | None = None,
) -> None:
    payload: Dict[str, object] = {
        "hole": int(hole_number),
        "shot": int(shot_number),
        "ts": _now_ms(),
    }
    if club:
        payload["club"] = club
    if distance_yards is not None:
        payload["distanceYards"] = int(distance_yards)
    _safe_emit("gps.shot.marked", payload)


def record_sg_compute(scope: str, holes: int, duration_ms: float) -> None:
    payload: Dict[str, object] = {
        "scope": scope,
        "holes": int(max(0, holes)),
        "durationMs": int(max(0, round(duration_ms))),
        "ts": _now_ms(),
    }
    _safe_emit("sg.compute", payload)


def _now_ms() -> int:
    from time import time

    return int(time() * 1000)


__all__ = [
    "TelemetryEmitter",
    "record_gps_status",
    "record_sg_compute",
    "record_shot_marked",
    "set_telemetry_emitter",
]
