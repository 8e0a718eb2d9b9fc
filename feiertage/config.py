"""
Configuration management using Pydantic Settings.
Loads environment variables (prefix ``FEIERTAGE_``) with validation.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from feiertage.models.region import Region

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Library and CLI settings with environment variable validation."""

    model_config = SettingsConfigDict(
        env_prefix="FEIERTAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="feiertage", description="Application name")
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")

    # Holidays
    default_region: Region = Field(
        default=Region.ALL, description="Region used when none is given on the CLI"
    )
    default_language: str = Field(
        default="de", description="Initial display language for holiday names"
    )
    year_cache_size: int = Field(
        default=128, ge=0, description="Number of (year, region) results kept in memory"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Emit JSON formatted logs")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    @field_validator("default_region", mode="before")
    @classmethod
    def normalize_region(cls, v):
        """Accept region codes in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("default_language")
    @classmethod
    def normalize_language(cls, v: str) -> str:
        """Language codes are stored lower-case."""
        return v.strip().lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the log level is one of the standard level names."""
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to avoid re-reading environment variables.
    """
    return Settings()


# Global settings instance
settings = get_settings()
