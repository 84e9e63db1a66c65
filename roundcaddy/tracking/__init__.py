"""Live GPS tracking: provider boundary, session state and shot marking."""

from .provider import (  # noqa: F401
    GEOLOCATION_UNAVAILABLE_MESSAGE,
    LocationError,
    LocationErrorCause,
    LocationProvider,
    ManualLocationProvider,
    Subscription,
)
from .schemas import (  # noqa: F401
    AccuracyLevel,
    GPSPosition,
    GPSStatus,
    Shot,
    TrackingSnapshot,
)
from .session import GPSTrackingSession, classify_accuracy  # noqa: F401
from .shots import ShotTracker  # noqa: F401
