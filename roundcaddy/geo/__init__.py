"""Geographic helpers: coordinates, green distances, bearings."""

from .distance import (  # noqa: F401
    calculate_bearing,
    calculate_distances_to_green,
    calculate_shot_distance,
    compass_direction,
    distance_between,
    haversine_distance,
    is_on_course,
)
from .models import DistanceToGreen, DistanceUnit, GeoPoint, GreenLocation  # noqa: F401
