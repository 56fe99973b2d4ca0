"""Tests for half-up rounding helpers."""

from __future__ import annotations

import pytest

from creature_converter.core.rounding import clamp, round_half_up, round_tenth


class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.5, 1),
            (1.5, 2),
            (2.5, 3),
            (2.49, 2),
            (-0.5, 0),
            (-1.5, -1),
            (-1.6, -2),
            (7.0, 7),
        ],
    )
    def test_halves_round_up(self, value: float, expected: int) -> None:
        """Test halves always round toward positive infinity."""
        assert round_half_up(value) == expected

    def test_returns_int(self) -> None:
        """Test the result is an int."""
        assert isinstance(round_half_up(3.2), int)


class TestRoundTenth:
    """Tests for round_tenth."""

    def test_one_decimal(self) -> None:
        """Test rounding to one decimal place."""
        assert round_tenth(3.14159) == 3.1
        assert round_tenth(4.25) == 4.3
        assert round_tenth(7.7) == 7.7


class TestClamp:
    """Tests for clamp."""

    def test_inside_range(self) -> None:
        """Test values inside the range pass through."""
        assert clamp(1.2, 0.5, 2.0) == 1.2

    def test_outside_range(self) -> None:
        """Test values outside the range are pinned to the bounds."""
        assert clamp(0.1, 0.5, 2.0) == 0.5
        assert clamp(5.0, 0.5, 2.0) == 2.0

    def test_idempotent(self) -> None:
        """Test clamping twice equals clamping once."""
        once = clamp(9.0, 0.5, 2.0)
        assert clamp(once, 0.5, 2.0) == once
