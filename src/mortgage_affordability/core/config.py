# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "mortgage-affordability"
    DEBUG: bool = False
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Level for the application's loggers (DEBUG, INFO, WARNING, ...).",
    )

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:5173"]

    # -- Market data --
    MARKET_DATA_FILE: Path | None = Field(
        default=None,
        description="YAML file with the regional market profile. "
        "When unset, the built-in Winnipeg profile is used.",
    )


settings = Settings()
