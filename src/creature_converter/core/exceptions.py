"""Custom exception hierarchy for the creature converter.

All exceptions inherit from ConverterError, enabling unified error handling
at the application boundary while preserving domain-specific context.

The conversion pipeline itself (parse, convert, validate) never raises for
malformed creature text, unknown identifiers or out-of-range settings; these
exceptions cover configuration, reference-data construction and the
persistence boundary.

Example:
    >>> from creature_converter.core.exceptions import ProfileError
    >>> raise ProfileError("HP target decreases at tier 3", profile_id="osr_generic_v1")
"""

from __future__ import annotations

from typing import Any


class ConverterError(Exception):
    """Base exception for all creature converter errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(ConverterError):
    """Raised when application configuration is invalid.

    This includes out-of-range slider defaults and default profile or pack
    identifiers that are not registered.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Reference Data Exceptions
# =============================================================================


class ProfileError(ConverterError):
    """Raised when a conversion profile is constructed with invalid tables.

    Profiles must define every threat tier and every creature role, and
    their per-tier targets must never decrease as the tier rises.
    """

    def __init__(
        self,
        message: str,
        *,
        profile_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize profile error with profile context.

        Args:
            message: Human-readable error description.
            profile_id: Identifier of the offending profile.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if profile_id:
            combined_details["profile_id"] = profile_id
        super().__init__(message, details=combined_details)


# =============================================================================
# Persistence Boundary Exceptions
# =============================================================================


class PayloadError(ConverterError):
    """Raised when a persisted payload cannot be deserialized.

    Entries cross the storage boundary as plain JSON; a payload that does
    not match the current schema surfaces here instead of as a raw
    pydantic error.
    """

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize payload error with payload context.

        Args:
            message: Human-readable error description.
            payload_type: Name of the record type being loaded.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if payload_type:
            combined_details["payload_type"] = payload_type
        super().__init__(message, details=combined_details)


__all__ = [
    "ConverterError",
    "ConfigurationError",
    "ProfileError",
    "PayloadError",
]
