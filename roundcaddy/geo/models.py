"""Coordinate and green-distance models."""

from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DistanceUnit(str, Enum):
    YARDS = "yards"
    METERS = "meters"


class GeoPoint(BaseModel):
    """Lat/lon pair; ranges are not validated here."""

    lat: float = Field(validation_alias=AliasChoices("lat", "latitude"))
    lon: float = Field(validation_alias=AliasChoices("lon", "lng", "longitude"))

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class GreenLocation(BaseModel):
    """Front/center/back of the green for the hole being played."""

    front: GeoPoint
    center: GeoPoint
    back: GeoPoint

    model_config = ConfigDict(frozen=True)


class DistanceToGreen(BaseModel):
    # Whole yards, as shown on the rangefinder.
    front: int
    center: int
    back: int

    model_config = ConfigDict(frozen=True)


__all__ = ["DistanceToGreen", "DistanceUnit", "GeoPoint", "GreenLocation"]
