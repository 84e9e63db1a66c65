from roundcaddy.tracking.provider import (
    LocationError,
    LocationErrorCause,
    ManualLocationProvider,
    Subscription,
)
from roundcaddy.tracking.schemas import GPSPosition


def _fix(lat: float = 33.5, accuracy: float = 5.0) -> GPSPosition:
    return GPSPosition(latitude=lat, longitude=-82.0, accuracy=accuracy)


def test_subscription_cancel_is_idempotent() -> None:
    calls = []
    sub = Subscription(lambda: calls.append(1))
    sub.cancel()
    sub.cancel()
    assert calls == [1]
    assert not sub.active


def test_request_resolves_once() -> None:
    provider = ManualLocationProvider()
    received = []
    provider.request_position(received.append, lambda error: None)
    assert provider.pending_requests == 1

    provider.push(_fix(1.0))
    provider.push(_fix(2.0))
    assert [p.latitude for p in received] == [1.0]
    assert provider.pending_requests == 0


def test_watch_receives_until_cancelled() -> None:
    provider = ManualLocationProvider()
    received = []
    sub = provider.watch_position(received.append, lambda error: None)
    provider.push(_fix(1.0))
    sub.cancel()
    provider.push(_fix(2.0))
    assert [p.latitude for p in received] == [1.0]
    assert provider.watcher_count == 0


def test_watch_opened_during_request_skips_that_fix() -> None:
    provider = ManualLocationProvider()
    watched = []

    def on_first(position: GPSPosition) -> None:
        provider.watch_position(watched.append, lambda error: None)

    provider.request_position(on_first, lambda error: None)
    provider.push(_fix(1.0))
    provider.push(_fix(2.0))
    assert [p.latitude for p in watched] == [2.0]


def test_fail_reaches_requests_and_watchers() -> None:
    provider = ManualLocationProvider()
    errors = []
    provider.request_position(lambda position: None, errors.append)
    provider.watch_position(lambda position: None, errors.append)
    provider.fail(LocationError(LocationErrorCause.TIMEOUT))
    assert len(errors) == 2
    assert errors[0].message == "Location request timed out. Please try again."


def test_permission_denied_detection() -> None:
    assert LocationError(LocationErrorCause.PERMISSION_DENIED).is_permission_denied
    assert LocationError(message="User denied Geolocation").is_permission_denied
    assert not LocationError(LocationErrorCause.TIMEOUT).is_permission_denied


def test_position_aliases() -> None:
    position = GPSPosition.model_validate(
        {"lat": 1.0, "lng": 2.0, "accuracy": 3.0, "altitudeAccuracy": 4.0}
    )
    assert position.point.lat == 1.0
    assert position.point.lon == 2.0
    assert position.altitude_accuracy == 4.0
