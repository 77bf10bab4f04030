"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Recovery Engine — muscle fatigue and condition analytics."
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = []
    PROJECT_URL: str = ""

    DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    # IANA timezone used to cut samples into calendar days when the
    # caller does not pass one explicitly.
    TIMEZONE: str = "UTC"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
