"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_TREND_PERIODS = (7, 30, 90)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    trend_periods: str = "7,30,90"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_trend_periods(raw: str | None) -> tuple[int, ...]:
    """Parse allowed trend periods (in days) from env."""
    if raw is None:
        return DEFAULT_TREND_PERIODS
    periods: set[int] = set()
    for chunk in raw.split(","):
        value = chunk.strip()
        if value.isdecimal() and int(value) > 0:
            periods.add(int(value))
    return tuple(sorted(periods)) or DEFAULT_TREND_PERIODS
