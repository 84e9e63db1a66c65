import pytest

from roundcaddy.config import reset_settings_cache
from roundcaddy.geo.distance import (
    calculate_bearing,
    calculate_distances_to_green,
    calculate_shot_distance,
    compass_direction,
    distance_between,
    haversine_distance,
    is_on_course,
)
from roundcaddy.geo.models import DistanceUnit, GeoPoint, GreenLocation

TEE = GeoPoint(lat=33.5031, lon=-82.0200)


def _north_of(point: GeoPoint, degrees_lat: float) -> GeoPoint:
    return GeoPoint(lat=point.lat + degrees_lat, lon=point.lon)


def test_zero_distance_to_self() -> None:
    assert distance_between(TEE, TEE) == 0
    assert haversine_distance(10.0, 20.0, 10.0, 20.0, "meters") == 0


def test_distance_in_yards_and_meters() -> None:
    target = _north_of(TEE, 0.001)
    assert distance_between(TEE, target) == 122
    assert distance_between(TEE, target, DistanceUnit.METERS) == 111


def test_distance_is_symmetric_and_integral() -> None:
    target = GeoPoint(lat=33.5050, lon=-82.0181)
    forward = distance_between(TEE, target)
    assert isinstance(forward, int)
    assert forward == distance_between(target, TEE)


def test_antipodal_points_do_not_fail() -> None:
    assert haversine_distance(0.0, 0.0, 0.0, 180.0) > 0


def test_distances_to_green_front_center_back() -> None:
    green = GreenLocation(
        front=_north_of(TEE, 0.0010),
        center=_north_of(TEE, 0.0012),
        back=_north_of(TEE, 0.0014),
    )
    distances = calculate_distances_to_green(TEE, green)
    assert distances.front == 122
    assert distances.front < distances.center < distances.back


def test_on_green_center_reads_zero() -> None:
    green = GreenLocation(
        front=_north_of(TEE, -0.0001), center=TEE, back=_north_of(TEE, 0.0001)
    )
    assert calculate_distances_to_green(TEE, green).center == 0


@pytest.mark.parametrize(
    "end, expected",
    [
        (GeoPoint(lat=1.0, lon=0.0), 0.0),
        (GeoPoint(lat=0.0, lon=1.0), 90.0),
        (GeoPoint(lat=-1.0, lon=0.0), 180.0),
        (GeoPoint(lat=0.0, lon=-1.0), 270.0),
    ],
)
def test_bearing_cardinals(end: GeoPoint, expected: float) -> None:
    start = GeoPoint(lat=0.0, lon=0.0)
    assert calculate_bearing(start, end) == pytest.approx(expected)


@pytest.mark.parametrize(
    "bearing, direction",
    [(0, "N"), (20, "N"), (44, "NE"), (100, "E"), (180, "S"), (315, "NW"), (350, "N")],
)
def test_compass_direction(bearing: float, direction: str) -> None:
    assert compass_direction(bearing) == direction


def test_is_on_course(monkeypatch: pytest.MonkeyPatch) -> None:
    near = _north_of(TEE, 0.005)
    far = _north_of(TEE, 0.01)
    assert is_on_course(near, TEE)
    assert not is_on_course(far, TEE)
    assert not is_on_course(near, TEE, max_distance_yards=500)

    monkeypatch.setenv("ROUNDCADDY_ON_COURSE_MAX_YARDS", "2000")
    reset_settings_cache()
    assert is_on_course(far, TEE)


def test_geopoint_accepts_long_names() -> None:
    point = GeoPoint.model_validate({"latitude": 1.5, "longitude": 2.5})
    assert (point.lat, point.lon) == (1.5, 2.5)
    assert GeoPoint.model_validate({"lat": 1.0, "lng": 2.0}).lon == 2.0


def test_shot_distance_is_yards() -> None:
    target = _north_of(TEE, 0.002)
    assert calculate_shot_distance(TEE, target) == 243
    assert calculate_shot_distance(TEE, target) == distance_between(TEE, target)
