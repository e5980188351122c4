from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class Settings(BaseSettings):
    log_level: str = "INFO"
    environment: str = "dev"
    # Farm-local timezone; decides what "today" is when no reference date is given
    timezone: str = "UTC"
    # The tracker card lists at most this many upcoming milestones
    upcoming_milestone_limit: int = 3
    # CORS
    cors_allow_origins: str = "*"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("timezone")
    @classmethod
    def ensure_known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("upcoming_milestone_limit")
    @classmethod
    def ensure_positive_limit(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("upcoming_milestone_limit must be positive")
        return value

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
