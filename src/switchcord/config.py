"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables with validation,
type coercion, and sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogAPIConfig(BaseSettings):
    """Game catalog (IGDB) API configuration."""

    model_config = SettingsConfigDict(env_prefix="CATALOG_", frozen=True)

    api_key: SecretStr = Field(
        default=...,
        description="IGDB user key sent in the user-key header",
    )
    url: str = Field(
        default="https://api-v3.igdb.com/games",
        description="Games query endpoint",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        le=120,
        description="Absolute timeout for a single query in seconds",
    )
    user_agent: str = Field(
        default="Switchcord/1.0",
        description="Value of the user-agent request header",
    )
    platform_id: int = Field(
        default=130,
        ge=0,
        description="Platform filter (130 = Nintendo Switch)",
    )
    category: int = Field(
        default=0,
        ge=0,
        description="Category filter (0 = main game)",
    )
    result_limit: int = Field(
        default=10,
        ge=1,
        le=500,
        description="Maximum number of records requested per search",
    )

    @field_validator("url")
    @classmethod
    def validate_url_scheme(cls, v: str) -> str:
        """Only accept http(s) endpoints."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid catalog URL: {v}")
        return v


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    format: Literal["json", "console"] = Field(
        default="json",
        description="Log output format",
    )
    include_timestamp: bool = Field(
        default=True,
        description="Include timestamp in log entries",
    )


class Settings(BaseSettings):
    """
    Main application settings.

    Aggregates all configuration sections and provides
    a single entry point for configuration access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sub-configurations
    catalog: CatalogAPIConfig = Field(default_factory=CatalogAPIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once from the environment and reused
    across the application.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
