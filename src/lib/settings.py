"""
F1 API - Settings

Runtime configuration loaded from environment variables (prefix ``F1_API_``)
or a local ``.env`` file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings for the HTTP service."""

    model_config = SettingsConfigDict(
        env_prefix="F1_API_",
        env_file=".env",
        extra="ignore",
    )

    host: str = Field("0.0.0.0", description="Interface the server binds to")
    port: int = Field(3333, ge=1, le=65535, description="TCP port the server listens on")
    log_level: str = Field("INFO", description="Minimum level for log output")


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings, built on first use."""
    return Settings()
