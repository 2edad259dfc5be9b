"""
Configuration management for the TeamForge service.

This module centralizes environment-driven configuration using Pydantic's
`BaseSettings`. The API, the roster service and the allocation engine defaults
all read from the shared `settings` instance.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field, PositiveInt, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    # General application settings
    API_TITLE: str = "TeamForge API"
    API_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = Field("development", pattern=r"^(development|staging|production)$")
    ALLOWED_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Logging
    LOG_LEVEL: str = Field("INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_JSON: bool = False

    # Team builder bounds
    DEFAULT_TEAM_SIZE: PositiveInt = 5
    MIN_TEAM_SIZE: PositiveInt = 3
    MAX_TEAM_SIZE: PositiveInt = 10
    DEFAULT_TEAM_COUNT: PositiveInt = 1
    MAX_TEAM_COUNT: PositiveInt = 5
    SKILLS_PER_SEAT_TARGET: PositiveInt = 3

    # Optimizer weights and reasoning thresholds
    SKILL_MATCH_WEIGHT: float = Field(0.4, ge=0.0, le=1.0)
    ROLE_GAP_WEIGHT: float = Field(0.4, ge=0.0, le=1.0)
    SENIORITY_WEIGHT: float = Field(0.2, ge=0.0, le=1.0)
    REASONING_SKILL_THRESHOLD: float = Field(0.7, ge=0.0, le=1.0)
    REASONING_GAP_THRESHOLD: float = Field(0.8, ge=0.0, le=1.0)
    REASONING_SENIORITY_THRESHOLD: float = Field(0.7, ge=0.0, le=1.0)

    # Roster
    SEED_DEMO_DATA: bool = True

    # Monitoring / tracing
    ENABLE_TRACING: bool = False
    OTEL_CONSOLE_EXPORT: bool = False

    @field_validator("ALLOWED_ORIGINS", mode="before")
    def _split_origins(cls, value: str | List[str]) -> List[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("LOG_LEVEL", mode="before")
    def _upper_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _check_bounds(self) -> "Settings":
        if self.MIN_TEAM_SIZE > self.MAX_TEAM_SIZE:
            raise ValueError("MIN_TEAM_SIZE must not exceed MAX_TEAM_SIZE")
        if not self.MIN_TEAM_SIZE <= self.DEFAULT_TEAM_SIZE <= self.MAX_TEAM_SIZE:
            raise ValueError("DEFAULT_TEAM_SIZE must lie within MIN_TEAM_SIZE..MAX_TEAM_SIZE")
        if self.DEFAULT_TEAM_COUNT > self.MAX_TEAM_COUNT:
            raise ValueError("DEFAULT_TEAM_COUNT must not exceed MAX_TEAM_COUNT")
        return self


@lru_cache()
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()


# Singleton-style settings instance for modules that prefer direct access.
settings = get_settings()
