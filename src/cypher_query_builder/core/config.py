"""Configuration management."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    # Logging
    log_level: str = Field(default="INFO", description="Minimum level emitted by setup_logging")
    log_json: bool = Field(default=False, description="Render log events as JSON instead of console output")
    log_colors: bool = Field(default=True, description="Colorize console log output")

    # Observability
    logfire_enabled: bool = Field(default=False, description="Forward structured log events to Logfire")

    model_config = SettingsConfigDict(
        env_prefix="CYPHER_BUILDER_",
        env_file=".env",
        extra="ignore",  # Ignore extra fields in .env file
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment on first use."""
    return Settings()
