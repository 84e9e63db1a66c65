"""Pydantic models for live GPS tracking."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from roundcaddy.geo.models import DistanceToGreen, GeoPoint


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GPSStatus(str, Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    TRACKING = "tracking"
    DENIED = "denied"
    UNAVAILABLE = "unavailable"
    ERROR = "error"


class AccuracyLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


class GPSPosition(BaseModel):
    """A single fix from the location provider."""

    latitude: float = Field(validation_alias=AliasChoices("latitude", "lat"))
    longitude: float = Field(
        validation_alias=AliasChoices("longitude", "lon", "lng")
    )
    # Accuracy radius in meters.
    accuracy: float = Field(ge=0)
    timestamp: datetime = Field(default_factory=_utcnow)
    altitude: Optional[float] = None
    altitude_accuracy: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("altitude_accuracy", "altitudeAccuracy"),
    )
    heading: Optional[float] = None
    speed: Optional[float] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(lat=self.latitude, lon=self.longitude)


class Shot(BaseModel):
    id: str
    hole_number: int = Field(ge=1)
    shot_number: int = Field(ge=1)
    position: GPSPosition
    club: Optional[str] = None
    # Yards from the previous shot, None for the first shot.
    distance: Optional[int] = None
    timestamp: datetime = Field(default_factory=_utcnow)

    model_config = ConfigDict(frozen=True)


class TrackingSnapshot(BaseModel):
    """Read-only view of a tracking session for UI and sync consumers."""

    status: GPSStatus
    position: Optional[GPSPosition] = None
    error: Optional[str] = None
    accuracy: AccuracyLevel = AccuracyLevel.UNKNOWN
    distance_to_green: Optional[DistanceToGreen] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_tracking(self) -> bool:
        return self.status is GPSStatus.TRACKING


__all__ = [
    "AccuracyLevel",
    "GPSPosition",
    "GPSStatus",
    "Shot",
    "TrackingSnapshot",
]
