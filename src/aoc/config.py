"""aoc-toolkit configuration using pydantic-settings.

Only the ambient concerns (logging) are configurable. The geometry and
interval cores never read settings, so their results do not depend on the
environment.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"


# Singleton instance for import convenience
settings = Settings()
