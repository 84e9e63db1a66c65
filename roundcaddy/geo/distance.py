"""Great-circle distance helpers for on-course GPS."""

from __future__ import annotations

from math import atan2, cos, degrees, radians, sin, sqrt
from typing import Optional

from roundcaddy.config import get_settings

from .models import DistanceToGreen, DistanceUnit, GeoPoint, GreenLocation

EARTH_RADIUS_M = 6_371_000.0
EARTH_RADIUS_YD = 6_967_410.0

_RADIUS_BY_UNIT = {
    DistanceUnit.YARDS: EARTH_RADIUS_YD,
    DistanceUnit.METERS: EARTH_RADIUS_M,
}

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def haversine_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: DistanceUnit | str = DistanceUnit.YARDS,
) -> int:
    """Haversine distance rounded to the nearest whole ``unit``.

    The rounding is lossy; callers needing sub-unit precision should not
    use this helper.
    """

    radius = _RADIUS_BY_UNIT[DistanceUnit(unit)]

    lat1_rad = radians(lat1)
    lat2_rad = radians(lat2)
    dlat = radians(lat2 - lat1)
    dlon = radians(lon2 - lon1)

    a = sin(dlat / 2) ** 2 + cos(lat1_rad) * cos(lat2_rad) * sin(dlon / 2) ** 2
    a = min(a, 1.0)
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return round(radius * c)


def distance_between(
    start: GeoPoint, end: GeoPoint, unit: DistanceUnit | str = DistanceUnit.YARDS
) -> int:
    return haversine_distance(start.lat, start.lon, end.lat, end.lon, unit)


def calculate_shot_distance(start: GeoPoint, end: GeoPoint) -> int:
    """Yards between two marked shot positions."""

    return distance_between(start, end, DistanceUnit.YARDS)


def calculate_distances_to_green(
    point: GeoPoint, green: GreenLocation
) -> DistanceToGreen:
    return DistanceToGreen(
        front=distance_between(point, green.front),
        center=distance_between(point, green.center),
        back=distance_between(point, green.back),
    )


def calculate_bearing(start: GeoPoint, end: GeoPoint) -> float:
    """Initial bearing from ``start`` to ``end`` in degrees, 0..360."""

    lat1 = radians(start.lat)
    lat2 = radians(end.lat)
    dlon = radians(end.lon - start.lon)

    y = sin(dlon) * cos(lat2)
    x = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(dlon)
    return (degrees(atan2(y, x)) + 360) % 360


def compass_direction(bearing: float) -> str:
    index = round(bearing / 45) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def is_on_course(
    point: GeoPoint,
    course_center: GeoPoint,
    max_distance_yards: Optional[int] = None,
) -> bool:
    limit = (
        max_distance_yards
        if max_distance_yards is not None
        else get_settings().on_course_max_yards
    )
    return distance_between(point, course_center) <= limit


__all__ = [
    "COMPASS_POINTS",
    "EARTH_RADIUS_M",
    "EARTH_RADIUS_YD",
    "calculate_bearing",
    "calculate_distances_to_green",
    "calculate_shot_distance",
    "compass_direction",
    "distance_between",
    "haversine_distance",
    "is_on_course",
]
