"""Tests for configuration management."""

from __future__ import annotations

import pytest

from creature_converter.core.config import (
    ConversionDefaults,
    Settings,
    clear_settings_cache,
    get_settings,
)
from creature_converter.core.exceptions import ConfigurationError


class TestConversionDefaults:
    """Tests for ConversionDefaults configuration."""

    def test_default_values(self) -> None:
        """Test default conversion settings."""
        defaults = ConversionDefaults()

        assert defaults.deadliness == 1.0
        assert defaults.durability == 1.0
        assert defaults.profile_id == "osr_generic_v1"
        assert defaults.pack_id == "osr_generic"
        assert defaults.role is None

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test defaults read from the environment."""
        monkeypatch.setenv("CREATURE_CONVERTER_CONVERSION_DURABILITY", "1.5")
        monkeypatch.setenv("CREATURE_CONVERTER_CONVERSION_ROLE", "brute")

        defaults = ConversionDefaults()

        assert defaults.durability == 1.5
        assert defaults.role == "brute"

    def test_unknown_profile_rejected(self) -> None:
        """Test that an unregistered default profile is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConversionDefaults(profile_id="no_such_profile")

        assert exc_info.value.details["config_key"] == "profile_id"

    def test_unknown_pack_rejected(self) -> None:
        """Test that an unregistered default pack is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConversionDefaults(pack_id="no_such_pack")

        assert exc_info.value.details["config_key"] == "pack_id"


class TestSettings:
    """Tests for main Settings configuration."""

    def test_default_settings(self) -> None:
        """Test default settings initialization."""
        settings = Settings()

        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.conversion.profile_id == "osr_generic_v1"

    def test_debug_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test debug mode setting."""
        monkeypatch.setenv("CREATURE_CONVERTER_DEBUG", "true")

        settings = Settings()

        assert settings.debug is True
        assert settings.is_production is False

    def test_is_production_property(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test is_production property."""
        monkeypatch.setenv("CREATURE_CONVERTER_DEBUG", "false")

        settings = Settings()

        assert settings.is_production is True

    def test_env_vars_applied(self, mock_env_vars: dict[str, str]) -> None:
        """Test settings pick up environment overrides."""
        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.conversion.profile_id == "shadowdark_compatible_v1"
        assert settings.conversion.deadliness == 1.5


class TestGetSettings:
    """Tests for get_settings singleton function."""

    def test_returns_settings_instance(self) -> None:
        """Test that get_settings returns a Settings instance."""
        settings = get_settings()

        assert isinstance(settings, Settings)

    def test_caching(self) -> None:
        """Test that settings are cached."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_cache_clear(self) -> None:
        """Test that cache can be cleared."""
        settings1 = get_settings()
        clear_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_invalid_slider_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that out-of-range slider defaults surface as ConfigurationError."""
        monkeypatch.setenv("CREATURE_CONVERTER_CONVERSION_DEADLINESS", "5.0")

        with pytest.raises(ConfigurationError):
            get_settings()

    def test_invalid_profile_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an unknown default profile surfaces unchanged."""
        monkeypatch.setenv("CREATURE_CONVERTER_CONVERSION_PROFILE_ID", "nope")

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert exc_info.value.details["config_key"] == "profile_id"
