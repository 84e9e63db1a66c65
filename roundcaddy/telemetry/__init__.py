"""Telemetry helpers for tracking and strokes-gained instrumentation."""

from .events import (
    record_gps_status,
    record_sg_compute,
    record_shot_marked,
    set_telemetry_emitter,
)

__all__ = [
    "record_gps_status",
    "record_sg_compute",
    "record_shot_marked",
    "set_telemetry_emitter",
]
