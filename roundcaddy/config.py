"""Configuration helpers for RoundCaddy constants."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class _Settings(BaseSettings):
    # Used when a hole's yardage is not supplied by course data.
    default_hole_yardage: int = Field(
        default=400, gt=0, alias="ROUNDCADDY_DEFAULT_HOLE_YARDAGE"
    )
    gps_high_accuracy_m: float = Field(
        default=10.0, gt=0, alias="ROUNDCADDY_GPS_HIGH_ACCURACY_M"
    )
    gps_medium_accuracy_m: float = Field(
        default=50.0, gt=0, alias="ROUNDCADDY_GPS_MEDIUM_ACCURACY_M"
    )
    on_course_max_yards: int = Field(
        default=1000, gt=0, alias="ROUNDCADDY_ON_COURSE_MAX_YARDS"
    )
    require_api_key: bool = Field(default=False, alias="REQUIRE_API_KEY")
    api_key: str | None = Field(default=None, alias="API_KEY")
    cors_allow_origins: str = Field(
        default="http://localhost,http://127.0.0.1", alias="CORS_ALLOW_ORIGINS"
    )

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )

    @model_validator(mode="after")
    def _check_accuracy_cutoffs(self) -> "_Settings":
        if self.gps_high_accuracy_m > self.gps_medium_accuracy_m:
            raise ValueError(
                "gps_high_accuracy_m must not exceed gps_medium_accuracy_m"
            )
        return self

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached application settings."""

    return _Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


__all__ = ["_Settings", "get_settings", "reset_settings_cache"]
