"""Tests for configuration module."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from switchcord.config import CatalogAPIConfig, LoggingConfig, Settings


class TestCatalogAPIConfig:
    """Tests for catalog API configuration."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {"CATALOG_API_KEY": "test_key"}):
            config = CatalogAPIConfig()

        assert config.url == "https://api-v3.igdb.com/games"
        assert config.timeout_seconds == 30
        assert config.user_agent == "Switchcord/1.0"
        assert config.platform_id == 130
        assert config.category == 0
        assert config.result_limit == 10

    def test_api_key_required(self) -> None:
        """Test that API key is required."""
        with patch.dict(os.environ, {}, clear=True), pytest.raises(ValueError):
            CatalogAPIConfig()

    def test_api_key_secret(self) -> None:
        """Test that API key is stored as secret."""
        with patch.dict(os.environ, {"CATALOG_API_KEY": "secret_key_123"}):
            config = CatalogAPIConfig()

        assert "secret_key_123" not in repr(config)
        assert config.api_key.get_secret_value() == "secret_key_123"

    def test_env_overrides(self) -> None:
        """Test values read from prefixed environment variables."""
        with patch.dict(
            os.environ,
            {
                "CATALOG_API_KEY": "key",
                "CATALOG_URL": "http://localhost:8080/games",
                "CATALOG_TIMEOUT_SECONDS": "2.5",
                "CATALOG_PLATFORM_ID": "48",
            },
        ):
            config = CatalogAPIConfig()

        assert config.url == "http://localhost:8080/games"
        assert config.timeout_seconds == 2.5
        assert config.platform_id == 48

    def test_timeout_bounds(self) -> None:
        """Test timeout validation bounds."""
        with pytest.raises(ValueError):
            CatalogAPIConfig(api_key="key", timeout_seconds=0)

        with pytest.raises(ValueError):
            CatalogAPIConfig(api_key="key", timeout_seconds=121)

    def test_invalid_url_scheme(self) -> None:
        """Test that non-http URLs are rejected."""
        with pytest.raises(ValueError, match="Invalid catalog URL"):
            CatalogAPIConfig(api_key="key", url="ftp://api-v3.igdb.com/games")

    def test_config_is_frozen(self) -> None:
        """Test that configuration cannot be mutated after creation."""
        config = CatalogAPIConfig(api_key="key")

        with pytest.raises(ValidationError):
            config.timeout_seconds = 5


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_valid_levels(self) -> None:
        """Test valid log levels."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            with patch.dict(os.environ, {"LOG_LEVEL": level}):
                config = LoggingConfig()
                assert config.level == level

    def test_valid_formats(self) -> None:
        """Test valid log formats."""
        for fmt in ["json", "console"]:
            with patch.dict(os.environ, {"LOG_FORMAT": fmt}):
                config = LoggingConfig()
                assert config.format == fmt

    def test_invalid_level(self) -> None:
        """Test that unknown levels are rejected."""
        with patch.dict(os.environ, {"LOG_LEVEL": "TRACE"}), pytest.raises(ValueError):
            LoggingConfig()


class TestSettings:
    """Tests for aggregated settings."""

    def test_sections_loaded(self) -> None:
        """Test sub-configurations are read from the environment."""
        with patch.dict(
            os.environ,
            {"CATALOG_API_KEY": "key", "LOG_FORMAT": "console"},
        ):
            settings = Settings()

        assert settings.logging.format == "console"
        assert settings.catalog.url == "https://api-v3.igdb.com/games"
        assert settings.catalog.api_key.get_secret_value() == "key"
