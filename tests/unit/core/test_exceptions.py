"""Tests for the exception hierarchy."""

from __future__ import annotations

from creature_converter.core.exceptions import (
    ConfigurationError,
    ConverterError,
    PayloadError,
    ProfileError,
)


class TestConverterError:
    """Tests for the base ConverterError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = ConverterError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = ConverterError(
            "Test error",
            details={"key": "value", "count": 42},
        )
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        exc = ConverterError("Test", details={"x": 1})
        repr_str = repr(exc)
        assert "ConverterError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestDomainExceptions:
    """Tests for context-carrying exceptions."""

    def test_configuration_error_with_key(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad value", config_key="deadliness")
        assert exc.details["config_key"] == "deadliness"
        assert isinstance(exc, ConverterError)

    def test_profile_error_merges_details(self) -> None:
        """Test ProfileError keeps caller details alongside the profile id."""
        exc = ProfileError(
            "Missing tiers",
            profile_id="custom_v1",
            details={"missing_tiers": [5]},
        )
        assert exc.details == {"missing_tiers": [5], "profile_id": "custom_v1"}
        assert "profile_id='custom_v1'" in str(exc)

    def test_payload_error_with_type(self) -> None:
        """Test PayloadError with payload type."""
        exc = PayloadError("Bad JSON", payload_type="Entry")
        assert exc.details["payload_type"] == "Entry"
        assert isinstance(exc, ConverterError)
        assert isinstance(exc, Exception)

    def test_no_context_means_no_details(self) -> None:
        """Test that omitting context leaves details empty."""
        exc = ProfileError("Broken")
        assert exc.details == {}
        assert str(exc) == "Broken"
