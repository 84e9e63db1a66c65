from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from roundcaddy.geo.distance import (
    calculate_bearing,
    calculate_distances_to_green,
    calculate_shot_distance,
    compass_direction,
)
from roundcaddy.geo.models import DistanceToGreen, GeoPoint, GreenLocation
from roundcaddy.security import require_api_key

router = APIRouter(dependencies=[Depends(require_api_key)])


class GreenDistanceRequest(BaseModel):
    position: GeoPoint
    green: GreenLocation


class ShotDistanceRequest(BaseModel):
    # "from" is a Python keyword, so the field is named start.
    start: GeoPoint = Field(validation_alias=AliasChoices("from", "start"))
    end: GeoPoint = Field(validation_alias=AliasChoices("to", "end"))

    model_config = ConfigDict(populate_by_name=True)


class ShotDistanceResponse(BaseModel):
    yards: int
    bearing: float
    direction: str


@router.post("/api/geo/distances", response_model=DistanceToGreen)
def post_green_distances(payload: GreenDistanceRequest) -> DistanceToGreen:
    return calculate_distances_to_green(payload.position, payload.green)


@router.post("/api/geo/shot-distance", response_model=ShotDistanceResponse)
def post_shot_distance(payload: ShotDistanceRequest) -> ShotDistanceResponse:
    bearing = calculate_bearing(payload.start, payload.end)
    return ShotDistanceResponse(
        yards=calculate_shot_distance(payload.start, payload.end),
        bearing=round(bearing, 1),
        direction=compass_direction(bearing),
    )


__all__ = ["router", "post_green_distances", "post_shot_distance"]
