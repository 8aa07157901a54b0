from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taxapp.core.tax_years import DEFAULT_TAX_YEAR, SUPPORTED_YEARS

DEFAULT_GEOLOCATION_URL = "https://get.geojs.io/v1/ip/geo.json"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value not in (None, "") else default


class Settings(BaseModel):
    tax_year: int = Field(default_factory=lambda: _env_int("TAX_YEAR", DEFAULT_TAX_YEAR))
    geolocation_url: str = Field(
        default_factory=lambda: os.getenv("GEOLOCATION_URL", DEFAULT_GEOLOCATION_URL)
    )
    http_timeout: float = Field(default_factory=lambda: float(os.getenv("HTTP_TIMEOUT", "10")))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    telemetry_log_dir: str | None = Field(default_factory=lambda: os.getenv("TELEMETRY_LOG_DIR") or None)
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("tax_year")
    @classmethod
    def _validate_tax_year(cls, value: int) -> int:
        if value not in SUPPORTED_YEARS:
            raise ValueError(f"TAX_YEAR must be one of {list(SUPPORTED_YEARS)}, got {value}")
        return value

    @field_validator("http_timeout")
    @classmethod
    def _validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("HTTP_TIMEOUT must be positive")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        upper = (value or "INFO").upper()
        if upper not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {upper}")
        return upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
