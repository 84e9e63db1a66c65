import pytest

from roundcaddy.tracking.provider import ManualLocationProvider
from roundcaddy.tracking.schemas import GPSPosition
from roundcaddy.tracking.session import GPSTrackingSession
from roundcaddy.tracking.shots import ShotTracker


def _fix(lat: float) -> GPSPosition:
    return GPSPosition(latitude=lat, longitude=-82.0, accuracy=4.0)


@pytest.fixture
def provider() -> ManualLocationProvider:
    return ManualLocationProvider()


@pytest.fixture
def tracker(provider: ManualLocationProvider) -> ShotTracker:
    session = GPSTrackingSession(provider)
    session.start()
    provider.push(_fix(33.5))
    return ShotTracker(session)


def test_mark_before_position_returns_none() -> None:
    tracker = ShotTracker(GPSTrackingSession(ManualLocationProvider()))
    assert tracker.mark_shot("Driver") is None
    assert tracker.shots == ()


def test_first_shot_has_no_distance(tracker: ShotTracker) -> None:
    shot = tracker.mark_shot("Driver")
    assert shot is not None
    assert shot.hole_number == 1
    assert shot.shot_number == 1
    assert shot.club == "Driver"
    assert shot.distance is None
    assert tracker.last_shot_distance is None


def test_distance_from_previous_shot(provider, tracker: ShotTracker) -> None:
    tracker.mark_shot("Driver")
    provider.push(_fix(33.502))
    second = tracker.mark_shot("7 Iron")

    assert second is not None
    assert second.shot_number == 2
    assert second.distance == 243
    assert tracker.last_shot_distance == 243


def test_numbering_restarts_per_hole(provider, tracker: ShotTracker) -> None:
    tracker.mark_shot()
    provider.push(_fix(33.501))
    tracker.mark_shot()
    tracker.set_hole(2)
    provider.push(_fix(33.503))
    first_on_two = tracker.mark_shot()

    assert first_on_two is not None
    assert first_on_two.hole_number == 2
    assert first_on_two.shot_number == 1
    # Measured from the last shot on hole 1.
    assert first_on_two.distance == 243
    assert len(tracker.shots_for_hole(1)) == 2
    assert len(tracker.shots_for_hole(2)) == 1


def test_shot_ids_are_unique(tracker: ShotTracker) -> None:
    ids = {tracker.mark_shot().id for _ in range(5)}  # type: ignore[union-attr]
    assert len(ids) == 5


def test_clear_and_hand_off(tracker: ShotTracker) -> None:
    tracker.mark_shot()
    tracker.mark_shot()
    handed = tracker.hand_off()
    assert len(handed) == 2
    assert tracker.shots == ()

    tracker.mark_shot()
    tracker.clear_shots()
    assert tracker.shots == ()


def test_mark_emits_telemetry(tracker: ShotTracker, telemetry_events) -> None:
    tracker.mark_shot("PW")
    name, payload = telemetry_events[-1]
    assert name == "gps.shot.marked"
    assert payload["hole"] == 1
    assert payload["club"] == "PW"


def test_invalid_hole_number_rejected(tracker: ShotTracker) -> None:
    with pytest.raises(ValueError):
        tracker.set_hole(0)
