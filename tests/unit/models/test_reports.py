"""Tests for report schemas."""

from __future__ import annotations

from creature_converter.models import (
    BandResult,
    BandValidationReport,
    ParsedCreatureData,
    ParseResult,
)
from creature_converter.models.enums import BandField, BandStatus, FieldMatchStatus


class TestBandResult:
    """Tests for BandResult model."""

    def test_delta_display_signed(self) -> None:
        """Test deltas are shown with an explicit sign."""
        high = BandResult(field=BandField.AC, value=15, target=12, status=BandStatus.HIGH, delta=3)
        low = BandResult(field=BandField.HP, value=8, target=10, status=BandStatus.LOW, delta=-2)
        fractional = BandResult(
            field=BandField.DPR,
            value=3.6,
            target=3.2,
            status=BandStatus.PASS,
            delta=0.4,
        )

        assert high.delta_display == "+3"
        assert low.delta_display == "-2"
        assert fractional.delta_display == "+0.4"

    def test_delta_display_in_dump(self) -> None:
        """Test the computed delta is serialized."""
        result = BandResult(field=BandField.AC, value=12, target=12, status=BandStatus.PASS, delta=0)
        assert result.model_dump()["delta_display"] == "+0"


class TestBandValidationReport:
    """Tests for BandValidationReport model."""

    def test_out_of_band(self) -> None:
        """Test out_of_band lists failing fields in order."""
        report = BandValidationReport(
            score=50,
            balanced=False,
            results=[
                BandResult(field=BandField.AC, value=15, target=12, status=BandStatus.HIGH, delta=3),
                BandResult(field=BandField.HP, value=5, target=5, status=BandStatus.PASS, delta=0),
                BandResult(
                    field=BandField.ATTACK_BONUS,
                    value=1,
                    target=1,
                    status=BandStatus.PASS,
                    delta=0,
                ),
                BandResult(field=BandField.DPR, value=1.0, target=3.2, status=BandStatus.LOW, delta=-2.2),
            ],
            summary="2 stats outside target bands: AC, DPR.",
        )

        assert report.out_of_band == [BandField.AC, BandField.DPR]


class TestParseResult:
    """Tests for ParseResult model."""

    def test_warnings_default_empty(self) -> None:
        """Test warnings default to an empty list."""
        result = ParseResult(success=True, data=ParsedCreatureData(name="Goblin"), confidence=0.5)
        assert result.warnings == []


class TestFieldMatchStatus:
    """Tests for reference comparison statuses."""

    def test_statuses(self) -> None:
        """Test reference comparisons report only match, mismatch or missing."""
        assert [status.value for status in FieldMatchStatus] == ["match", "mismatch", "missing"]
