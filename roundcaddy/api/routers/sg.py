from __future__ import annotations

from time import perf_counter
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PositiveFloat

from roundcaddy.security import require_api_key
from roundcaddy.sg.calculator import (
    calculate_average_strokes_gained,
    calculate_hole_strokes_gained,
    calculate_round_strokes_gained,
)
from roundcaddy.sg.insights import identify_strongest_area, identify_weakest_area
from roundcaddy.sg.schemas import AreaInsight, HoleEntryData, StrokesGainedResult
from roundcaddy.telemetry.events import record_sg_compute

router = APIRouter(dependencies=[Depends(require_api_key)])


class HoleSGRequest(BaseModel):
    hole: HoleEntryData
    hole_yardage: Optional[float] = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("hole_yardage", "holeYardage"),
    )
    estimate_missing: bool = Field(
        default=False,
        validation_alias=AliasChoices("estimate_missing", "estimateMissing"),
    )

    model_config = ConfigDict(populate_by_name=True)


class RoundSGRequest(BaseModel):
    holes: List[HoleEntryData]
    hole_yardages: Optional[List[Optional[PositiveFloat]]] = Field(
        default=None,
        validation_alias=AliasChoices("hole_yardages", "holeYardages"),
    )
    estimate_missing: bool = Field(
        default=False,
        validation_alias=AliasChoices("estimate_missing", "estimateMissing"),
    )

    model_config = ConfigDict(populate_by_name=True)


class AverageSGRequest(BaseModel):
    rounds: List[StrokesGainedResult]


class InsightsResponse(BaseModel):
    weakest: AreaInsight
    strongest: AreaInsight


@router.post("/api/sg/hole", response_model=StrokesGainedResult)
def post_hole_sg(payload: HoleSGRequest) -> StrokesGainedResult:
    start = perf_counter()
    result = calculate_hole_strokes_gained(
        payload.hole,
        payload.hole_yardage,
        estimate_missing=payload.estimate_missing,
    )
    record_sg_compute("hole", 1, (perf_counter() - start) * 1000)
    return result


@router.post("/api/sg/round", response_model=StrokesGainedResult)
def post_round_sg(payload: RoundSGRequest) -> StrokesGainedResult:
    return calculate_round_strokes_gained(
        payload.holes,
        payload.hole_yardages,
        estimate_missing=payload.estimate_missing,
    )


@router.post("/api/sg/average", response_model=StrokesGainedResult)
def post_average_sg(payload: AverageSGRequest) -> StrokesGainedResult:
    return calculate_average_strokes_gained(payload.rounds)


@router.post("/api/sg/insights", response_model=InsightsResponse)
def post_sg_insights(payload: StrokesGainedResult) -> InsightsResponse:
    return InsightsResponse(
        weakest=identify_weakest_area(payload),
        strongest=identify_strongest_area(payload),
    )


__all__ = [
    "router",
    "post_average_sg",
    "post_hole_sg",
    "post_round_sg",
    "post_sg_insights",
]
