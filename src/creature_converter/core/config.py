"""Configuration management for the creature converter.

This module provides centralized configuration management using
pydantic-settings, supporting environment variables, .env files and
runtime overrides. Conversion defaults seed the settings returned by
``get_default_settings()``; they never change how a given
``ConversionSettings`` is converted.

Example:
    >>> from creature_converter.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.conversion.profile_id)
    'osr_generic_v1'

Environment Variables:
    CREATURE_CONVERTER_DEBUG: Force DEBUG-level console logging
    CREATURE_CONVERTER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CREATURE_CONVERTER_LOG_JSON: Emit JSON log lines instead of console output
    CREATURE_CONVERTER_CONVERSION_DEADLINESS: Default damage multiplier (0.5-2.0)
    CREATURE_CONVERTER_CONVERSION_DURABILITY: Default HP multiplier (0.5-2.0)
    CREATURE_CONVERTER_CONVERSION_PROFILE_ID: Default conversion profile
    CREATURE_CONVERTER_CONVERSION_PACK_ID: Default output system pack
    CREATURE_CONVERTER_CONVERSION_ROLE: Default creature role
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from creature_converter.core.constants import MAX_MULTIPLIER, MIN_MULTIPLIER
from creature_converter.core.exceptions import ConfigurationError


class ConversionDefaults(BaseSettings):
    """Defaults used when the caller asks for fresh conversion settings.

    Attributes:
        deadliness: Default damage multiplier.
        durability: Default hit point multiplier.
        profile_id: Conversion profile selected by default.
        pack_id: Output system pack selected by default.
        role: Optional default creature role.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREATURE_CONVERTER_CONVERSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    deadliness: float = Field(
        default=1.0,
        ge=MIN_MULTIPLIER,
        le=MAX_MULTIPLIER,
        description="Default damage multiplier",
    )
    durability: float = Field(
        default=1.0,
        ge=MIN_MULTIPLIER,
        le=MAX_MULTIPLIER,
        description="Default HP multiplier",
    )
    profile_id: str = Field(
        default="osr_generic_v1",
        description="Default conversion profile id",
    )
    pack_id: str = Field(
        default="osr_generic",
        description="Default output system pack id",
    )
    role: str | None = Field(
        default=None,
        description="Default creature role",
    )

    @field_validator("profile_id", mode="after")
    @classmethod
    def ensure_profile_registered(cls, value: str) -> str:
        """Reject default profile ids that are not in the registry.

        Raises:
            ConfigurationError: If the profile id is unknown.
        """
        from creature_converter.profiles.registry import is_registered_profile

        if not is_registered_profile(value):
            raise ConfigurationError(
                f"Unknown default conversion profile: {value}",
                config_key="profile_id",
            )
        return value

    @field_validator("pack_id", mode="after")
    @classmethod
    def ensure_pack_registered(cls, value: str) -> str:
        """Reject default pack ids that are not in the registry.

        Raises:
            ConfigurationError: If the pack id is unknown.
        """
        from creature_converter.profiles.packs import is_registered_pack

        if not is_registered_pack(value):
            raise ConfigurationError(
                f"Unknown default system pack: {value}",
                config_key="pack_id",
            )
        return value


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        debug: Force debug-level console logging.
        log_level: Application logging level.
        log_json: Emit JSON logs.
        conversion: Conversion defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREATURE_CONVERTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    debug: bool = Field(
        default=False,
        description="Force debug-level console logging",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    conversion: ConversionDefaults = Field(default_factory=ConversionDefaults)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode.

        Returns:
            True if not in debug mode.
        """
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Useful for tests or when environment variables changed at runtime.
    """
    get_settings.cache_clear()


__all__ = [
    "ConversionDefaults",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
