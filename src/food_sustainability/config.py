"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    risk_window_days: int = Field(default=2, ge=1)
    min_match_score: int = Field(default=50, ge=0, le=100)
    meal_plan_limit: int = Field(default=5, ge=1)
    weekly_meal_count: int = Field(default=7, ge=1, le=7)
    recommendation_limit: int = Field(default=3, ge=1)
    improvement_cap: float = Field(default=30, ge=0, le=100)
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FOOD_SUSTAINABILITY_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
