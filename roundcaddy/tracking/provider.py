"""Location provider boundary for GPS tracking.

A provider delivers fixes through callbacks. One-shot requests and
continuous watches both hand back a :class:`Subscription`; cancelling it is
synchronous, so the provider must not invoke its callbacks afterwards.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Protocol

from .schemas import GPSPosition

logger = logging.getLogger(__name__)

PositionCallback = Callable[[GPSPosition], None]
ErrorCallback = Callable[["LocationError"], None]


class LocationErrorCause(str, Enum):
    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


_DEFAULT_MESSAGES = {
    LocationErrorCause.PERMISSION_DENIED: (
        "Location permission denied. Please enable location access in your "
        "device settings."
    ),
    LocationErrorCause.POSITION_UNAVAILABLE: (
        "Location information unavailable. Check your device's location settings."
    ),
    LocationErrorCause.TIMEOUT: "Location request timed out. Please try again.",
    LocationErrorCause.UNKNOWN: "An unknown error occurred while getting location.",
}

GEOLOCATION_UNAVAILABLE_MESSAGE = "Geolocation is not available on this device"


class LocationError(Exception):
    """Failure reported by a location provider."""

    def __init__(
        self,
        cause: LocationErrorCause = LocationErrorCause.UNKNOWN,
        message: Optional[str] = None,
    ) -> None:
        self.cause = LocationErrorCause(cause)
        self.message = message or _DEFAULT_MESSAGES[self.cause]
        super().__init__(self.message)

    @property
    def is_permission_denied(self) -> bool:
        if self.cause is LocationErrorCause.PERMISSION_DENIED:
            return True
        lowered = self.message.lower()
        return "denied" in lowered or "permission" in lowered


class Subscription:
    """Handle for a pending request or a continuous watch."""

    def __init__(self, on_cancel: Optional[Callable[[], None]] = None) -> None:
        self._on_cancel = on_cancel
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        if self._on_cancel is not None:
            self._on_cancel()


class LocationProvider(Protocol):
    def is_available(self) -> bool: ...

    def request_position(
        self, on_success: PositionCallback, on_error: ErrorCallback
    ) -> Subscription: ...

    def watch_position(
        self, on_position: PositionCallback, on_error: ErrorCallback
    ) -> Subscription: ...


class ManualLocationProvider:
    """In-process provider that a host pushes fixes and failures into.

    Pending one-shot requests resolve on the next :meth:`push` or
    :meth:`fail`; active watches receive every fix and failure.
    """

    def __init__(self, *, available: bool = True) -> None:
        self.available = available
        self._next_id = 1
        self._requests: Dict[int, tuple[PositionCallback, ErrorCallback]] = {}
        self._watchers: Dict[int, tuple[PositionCallback, ErrorCallback]] = {}

    def is_available(self) -> bool:
        return self.available

    @property
    def pending_requests(self) -> int:
        return len(self._requests)

    @property
    def watcher_count(self) -> int:
        return len(self._watchers)

    def request_position(
        self, on_success: PositionCallback, on_error: ErrorCallback
    ) -> Subscription:
        key = self._allocate()
        self._requests[key] = (on_success, on_error)
        return Subscription(lambda: self._requests.pop(key, None))

    def watch_position(
        self, on_position: PositionCallback, on_error: ErrorCallback
    ) -> Subscription:
        key = self._allocate()
        self._watchers[key] = (on_position, on_error)
        return Subscription(lambda: self._watchers.pop(key, None))

    def push(self, position: GPSPosition) -> None:
        watching = list(self._watchers)
        for on_success, _ in self._drain_requests():
            on_success(position)
        for key in watching:
            callbacks = self._watchers.get(key)
            if callbacks is None:
                # Cancelled by an earlier callback in this delivery.
                continue
            callbacks[0](position)

    def fail(self, error: LocationError) -> None:
        logger.warning("location provider failure: %s", error.message)
        watching = list(self._watchers)
        for _, on_error in self._drain_requests():
            on_error(error)
        for key in watching:
            callbacks = self._watchers.get(key)
            if callbacks is None:
                continue
            callbacks[1](error)

    def _drain_requests(self) -> list[tuple[PositionCallback, ErrorCallback]]:
        pending = list(self._requests.values())
        self._requests.clear()
        return pending

    def _allocate(self) -> int:
        key = self._next_id
        self._next_id += 1
        return key


__all__ = [
    "ErrorCallback",
    "GEOLOCATION_UNAVAILABLE_MESSAGE",
    "LocationError",
    "LocationErrorCause",
    "LocationProvider",
    "ManualLocationProvider",
    "PositionCallback",
    "Subscription",
]
