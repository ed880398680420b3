"""Pydantic v2 configuration schema with strict validation."""

import re

from pydantic import BaseModel, Field, field_validator

GRIDPOINT_PATTERN = re.compile(r"^[A-Z]{3}/\d+,\d+$")


class ResortConfig(BaseModel):
    model_config = {"extra": "forbid"}

    id: str
    name: str
    gridpoint: str | None  # None: no api.weather.gov coverage

    @field_validator("gridpoint")
    @classmethod
    def _check_gridpoint(cls, v: str | None) -> str | None:
        if v is not None and not GRIDPOINT_PATTERN.match(v):
            raise ValueError(f"gridpoint must look like 'SEW/164,66', got {v!r}")
        return v


class WeatherApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.weather.gov"
    user_agent: str = "Snow-Report (skireport)"
    timeout: float = Field(default=10.0, gt=0.0)
    max_retries: int = Field(default=0, ge=0, le=5)
    retry_base_delay: float = Field(default=1.0, ge=0.0)


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/skireport.db"
    track_resorts: bool = True


class SkillConfig(BaseModel):
    model_config = {"extra": "forbid"}

    weather_api: WeatherApiConfig = WeatherApiConfig()
    storage: StorageConfig = StorageConfig()
    resorts: list[ResortConfig] = []
