"""Live GPS tracking session.

State machine over a location provider::

    idle -> requesting -> tracking
              |              |
              +-> denied / unavailable / error
    stop(): any state -> idle

Position updates arrive on a single delivery path (the provider's
callbacks), so the session does no locking of its own. Consumers read
:meth:`GPSTrackingSession.snapshot` or subscribe to a queue of snapshots.
"""

from __future__ import annotations

import logging
from queue import Full, Queue
from typing import Callable, List, Optional

from roundcaddy.config import get_settings
from roundcaddy.geo.distance import calculate_distances_to_green
from roundcaddy.geo.models import DistanceToGreen, GreenLocation
from roundcaddy.telemetry.events import record_gps_status

from .provider import (
    GEOLOCATION_UNAVAILABLE_MESSAGE,
    LocationError,
    LocationProvider,
    Subscription,
)
from .schemas import AccuracyLevel, GPSPosition, GPSStatus, TrackingSnapshot

logger = logging.getLogger(__name__)

_QUEUE_MAXSIZE = 100
_ACTIVE_STATES = {GPSStatus.REQUESTING, GPSStatus.TRACKING}


def classify_accuracy(
    radius_m: Optional[float],
    *,
    high_cutoff_m: Optional[float] = None,
    medium_cutoff_m: Optional[float] = None,
) -> AccuracyLevel:
    """Bucket an accuracy radius; a smaller radius never rates worse."""

    if radius_m is None:
        return AccuracyLevel.UNKNOWN
    settings = get_settings()
    high = settings.gps_high_accuracy_m if high_cutoff_m is None else high_cutoff_m
    medium = (
        settings.gps_medium_accuracy_m if medium_cutoff_m is None else medium_cutoff_m
    )
    if radius_m <= high:
        return AccuracyLevel.HIGH
    if radius_m <= medium:
        return AccuracyLevel.MEDIUM
    return AccuracyLevel.LOW


class GPSTrackingSession:
    def __init__(
        self,
        provider: LocationProvider,
        *,
        green_location: Optional[GreenLocation] = None,
        on_position: Optional[Callable[[GPSPosition], None]] = None,
        on_error: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._provider = provider
        self._green_location = green_location
        self._on_position = on_position
        self._on_error = on_error

        self._status = GPSStatus.IDLE
        self._position: Optional[GPSPosition] = None
        self._error: Optional[str] = None
        self._distance_to_green: Optional[DistanceToGreen] = None

        self._request: Optional[Subscription] = None
        self._watch: Optional[Subscription] = None
        # Bumped on every start/stop; callbacks from older generations are stale.
        self._generation = 0
        self._subscribers: List[Queue[TrackingSnapshot]] = []

    # State
    @property
    def status(self) -> GPSStatus:
        return self._status

    @property
    def position(self) -> Optional[GPSPosition]:
        return self._position

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def accuracy(self) -> AccuracyLevel:
        if self._position is None:
            return AccuracyLevel.UNKNOWN
        return classify_accuracy(self._position.accuracy)

    @property
    def is_tracking(self) -> bool:
        return self._status is GPSStatus.TRACKING

    @property
    def is_available(self) -> bool:
        return self._provider.is_available()

    @property
    def green_location(self) -> Optional[GreenLocation]:
        return self._green_location

    @property
    def distance_to_green(self) -> Optional[DistanceToGreen]:
        return self._distance_to_green

    def snapshot(self) -> TrackingSnapshot:
        return TrackingSnapshot(
            status=self._status,
            position=self._position,
            error=self._error,
            accuracy=self.accuracy,
            distance_to_green=self._distance_to_green,
        )

    def set_green_location(self, green: Optional[GreenLocation]) -> None:
        """Switch the target green, e.g. when moving to the next hole."""

        self._green_location = green
        self._recompute_distances()
        self._publish()

    # Lifecycle
    def start(self) -> None:
        if self._status in _ACTIVE_STATES:
            logger.debug("start ignored, session already %s", self._status.value)
            return

        # A failed session may still hold its watch; restart from scratch.
        self._cancel_subscriptions()
        if not self._provider.is_available():
            self._error = GEOLOCATION_UNAVAILABLE_MESSAGE
            self._set_status(GPSStatus.UNAVAILABLE)
            return

        generation = self._generation
        self._error = None
        self._set_status(GPSStatus.REQUESTING)
        self._request = self._provider.request_position(
            lambda position: self._handle_initial_fix(generation, position),
            lambda error: self._handle_initial_error(generation, error),
        )

    def stop(self) -> None:
        """Cancel all provider subscriptions and return to idle.

        Idempotent. Once this returns no further update is applied.
        """

        self._cancel_subscriptions()
        if self._status is not GPSStatus.IDLE:
            self._set_status(GPSStatus.IDLE)

    # Consumer channel
    def subscribe(self) -> Queue[TrackingSnapshot]:
        queue: Queue[TrackingSnapshot] = Queue(maxsize=_QUEUE_MAXSIZE)
        self._subscribers.append(queue)
        return queue

    def unsubscribe(self, queue: Queue[TrackingSnapshot]) -> None:
        if queue in self._subscribers:
            self._subscribers.remove(queue)

    # Provider callbacks
    def _handle_initial_fix(self, generation: int, position: GPSPosition) -> None:
        if generation != self._generation or self._status is not GPSStatus.REQUESTING:
            logger.debug("dropping stale initial fix")
            return
        self._request = None
        self._apply_position(position)
        self._set_status(GPSStatus.TRACKING)
        self._watch = self._provider.watch_position(
            lambda update: self._handle_update(generation, update),
            lambda error: self._handle_update_error(generation, error),
        )
        # Consumers run last; they may call stop() or start() from here.
        self._notify_position(position)

    def _handle_initial_error(self, generation: int, error: LocationError) -> None:
        if generation != self._generation:
            return
        self._request = None
        self._fail(error)

    def _handle_update(self, generation: int, position: GPSPosition) -> None:
        if generation != self._generation:
            logger.debug("dropping stale position update")
            return
        self._apply_position(position)
        if self._status is not GPSStatus.TRACKING:
            self._set_status(GPSStatus.TRACKING)
        else:
            self._publish()
        self._notify_position(position)

    def _handle_update_error(self, generation: int, error: LocationError) -> None:
        if generation != self._generation:
            return
        # The watch stays registered so stop() can still cancel it.
        self._fail(error)

    # Internals
    def _cancel_subscriptions(self) -> None:
        self._generation += 1
        for subscription in (self._request, self._watch):
            if subscription is not None:
                subscription.cancel()
        self._request = None
        self._watch = None

    def _apply_position(self, position: GPSPosition) -> None:
        self._position = position
        self._error = None
        self._recompute_distances()

    def _fail(self, error: LocationError) -> None:
        self._error = error.message
        status = GPSStatus.DENIED if error.is_permission_denied else GPSStatus.ERROR
        logger.warning("gps tracking failed (%s): %s", status.value, error.message)
        self._set_status(status)
        self._notify_error(error.message)

    def _notify_position(self, position: GPSPosition) -> None:
        if self._on_position is None:
            return
        try:
            self._on_position(position)
        except Exception:
            logger.exception("on_position callback failed")

    def _notify_error(self, message: str) -> None:
        if self._on_error is None:
            return
        try:
            self._on_error(message)
        except Exception:
            logger.exception("on_error callback failed")

    def _recompute_distances(self) -> None:
        if self._position is None or self._green_location is None:
            self._distance_to_green = None
            return
        self._distance_to_green = calculate_distances_to_green(
            self._position.point, self._green_location
        )

    def _set_status(self, status: GPSStatus) -> None:
        previous = self._status
        self._status = status
        logger.debug("gps status %s -> %s", previous.value, status.value)
        record_gps_status(status.value, previous=previous.value, error=self._error)
        self._publish()

    def _publish(self) -> None:
        if not self._subscribers:
            return
        snapshot = self.snapshot()
        for queue in list(self._subscribers):
            try:
                queue.put_nowait(snapshot)
            except Full:
                continue


__all__ = ["GPSTrackingSession", "classify_accuracy"]
