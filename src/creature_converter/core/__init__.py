"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        ConverterError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        ProfileError: Invalid conversion profile tables.
        PayloadError: Persisted payloads that cannot be loaded.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
"""

from __future__ import annotations

from creature_converter.core.config import (
    ConversionDefaults,
    Settings,
    clear_settings_cache,
    get_settings,
)
from creature_converter.core.exceptions import (
    ConfigurationError,
    ConverterError,
    PayloadError,
    ProfileError,
)
from creature_converter.core.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "ConverterError",
    "ConfigurationError",
    "ProfileError",
    "PayloadError",
    # Configuration
    "Settings",
    "ConversionDefaults",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
]
