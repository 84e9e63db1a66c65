"""Pydantic models for hole entries and strokes-gained results."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
)

from .lies import ApproachResult, coerce_approach_result


class SGCategory(str, Enum):
    OFF_TEE = "off_tee"
    APPROACH = "approach"
    AROUND_GREEN = "around_green"
    PUTTING = "putting"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    SGCategory.OFF_TEE: "Off the Tee",
    SGCategory.APPROACH: "Approach",
    SGCategory.AROUND_GREEN: "Around the Green",
    SGCategory.PUTTING: "Putting",
}


class HoleEntryData(BaseModel):
    """One played hole as captured by the scoring flow."""

    hole_number: int = Field(
        default=1,
        ge=1,
        validation_alias=AliasChoices("hole_number", "holeNumber"),
    )
    par: int = Field(ge=3, le=5)
    score: int = Field(ge=1)
    putts: int = Field(default=0, ge=0)
    # None on par 3s, where there is no fairway to hit.
    fairway_hit: Optional[bool] = Field(
        default=None, validation_alias=AliasChoices("fairway_hit", "fairwayHit")
    )
    gir: bool = False
    penalties: int = Field(default=0, ge=0)
    tee_club: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("tee_club", "teeClub")
    )
    approach_distance: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("approach_distance", "approachDistance"),
    )
    approach_club: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("approach_club", "approachClub")
    )
    approach_result: Optional[ApproachResult] = Field(
        default=None,
        validation_alias=AliasChoices("approach_result", "approachResult"),
    )
    first_putt_distance: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("first_putt_distance", "firstPuttDistance"),
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("approach_result", mode="before")
    @classmethod
    def _coerce_result(cls, value: Any) -> Optional[ApproachResult]:
        return coerce_approach_result(value)


class StrokesGainedResult(BaseModel):
    """Four category deltas; the total is always their sum."""

    sg_off_tee: float = 0.0
    sg_approach: float = 0.0
    sg_around_green: float = 0.0
    sg_putting: float = 0.0

    model_config = ConfigDict(frozen=True, extra="ignore")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def sg_total(self) -> float:
        return (
            self.sg_off_tee + self.sg_approach + self.sg_around_green + self.sg_putting
        )

    def value_for(self, category: SGCategory) -> float:
        return getattr(self, f"sg_{category.value}")

    def by_category(self) -> dict[SGCategory, float]:
        return {category: self.value_for(category) for category in SGCategory}


class AreaInsight(BaseModel):
    area: SGCategory
    label: str
    value: float
    recommendation: str


__all__ = [
    "AreaInsight",
    "CATEGORY_LABELS",
    "HoleEntryData",
    "SGCategory",
    "StrokesGainedResult",
]
