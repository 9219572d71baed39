"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    early_exit_ratio: float = Field(default=0.85, gt=0.0, le=1.0)
    fallback_piece_weight_g: float = Field(default=100.0, gt=0.0)
    weekly_gap_warning_kcal: float = Field(default=500.0, ge=0.0)
    daily_gap_warning_kcal: float = Field(default=300.0, ge=0.0)
    single_day_gap_warning_kcal: float = Field(default=200.0, ge=0.0)
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="PANTRY_PLANNER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
