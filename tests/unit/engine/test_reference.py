"""Tests for reference stat-block validation."""

from __future__ import annotations

import pytest

from creature_converter.engine.reference import (
    ATTACK_COUNT_FIELD,
    NO_REFERENCE_SUMMARY,
    PRIVATE_REFERENCE_SUMMARY,
    compare_numeric,
    compare_text,
    parse_reference,
    validate_against_reference,
)
from creature_converter.models import Attack, FieldMatchStatus, OutputCreatureData


class TestComparisons:
    """Tests for field comparison helpers."""

    @pytest.mark.parametrize(
        ("converted", "reference", "status"),
        [
            (14, 16, FieldMatchStatus.MATCH),
            (14, 18, FieldMatchStatus.MISMATCH),
            (5, 5, FieldMatchStatus.MATCH),
            (0, 0, FieldMatchStatus.MATCH),
            (3, 0, FieldMatchStatus.MISMATCH),
        ],
    )
    def test_numeric(self, converted: int, reference: int, status: FieldMatchStatus) -> None:
        """Test numeric fields match within 15% of the reference."""
        assert compare_numeric(converted, reference) == status

    def test_text(self) -> None:
        """Test text comparison ignores case and surrounding whitespace."""
        assert compare_text("Goblin", "  goblin ") == FieldMatchStatus.MATCH
        assert compare_text("Goblin", "Hobgoblin") == FieldMatchStatus.MISMATCH


class TestParseReference:
    """Tests for parse_reference."""

    def test_drops_missing_fields(self, srd_goblin_text: str) -> None:
        """Test only fields the parser found are kept."""
        reference = parse_reference(srd_goblin_text)

        assert reference["name"] == "Goblin"
        assert reference["ac"] == 15
        assert reference["hp"] == 7
        assert len(reference["attacks"]) == 2
        assert "saves" not in reference


class TestValidateAgainstReference:
    """Tests for validate_against_reference."""

    @pytest.mark.parametrize("reference", [None, "", {}])
    def test_no_reference(self, converted_goblin: OutputCreatureData, reference: object) -> None:
        """Test a missing reference scores zero."""
        report = validate_against_reference(converted_goblin, reference)  # type: ignore[arg-type]

        assert report.has_reference is False
        assert report.accuracy_score == 0
        assert report.diffs == []
        assert report.summary == NO_REFERENCE_SUMMARY

    def test_private_reference_prompt(self, converted_goblin: OutputCreatureData) -> None:
        """Test packs that need a user reference use the privacy prompt."""
        report = validate_against_reference(converted_goblin, pack_id="shadowdark_private_verify")
        assert report.summary == PRIVATE_REFERENCE_SUMMARY

    def test_all_match(self, converted_goblin: OutputCreatureData) -> None:
        """Test a matching reference scores 100."""
        reference = {
            "name": "goblin ",
            "ac": 14,
            "hp": 5,
            "movement": "30 FT.",
            "saves": "+3 vs physical effects",
            "attacks": [Attack(name="Scimitar")],
        }

        report = validate_against_reference(converted_goblin, reference)

        assert report.has_reference is True
        assert report.accuracy_score == 100
        assert all(diff.status == FieldMatchStatus.MATCH for diff in report.diffs)
        assert [diff.field for diff in report.diffs] == [
            "ac",
            "hp",
            "name",
            "movement",
            "saves",
            ATTACK_COUNT_FIELD,
        ]
        assert report.summary == "All checked fields match the reference. Accuracy: 100%."

    def test_mismatches(self, converted_goblin: OutputCreatureData) -> None:
        """Test mismatched fields carry the reference value as a suggestion."""
        report = validate_against_reference(
            converted_goblin,
            {"ac": 18, "hp": 5, "name": "Hobgoblin"},
        )
        by_field = {diff.field: diff for diff in report.diffs}

        assert by_field["ac"].status == FieldMatchStatus.MISMATCH
        assert by_field["ac"].converted == 14
        assert by_field["ac"].suggested == 18
        assert by_field["hp"].suggested is None
        assert by_field["name"].suggested == "Hobgoblin"
        assert report.accuracy_score == 33
        assert report.summary == "2 field(s) differ from reference: ac, name. Accuracy: 33%."

    def test_attack_count(self, converted_goblin: OutputCreatureData) -> None:
        """Test the attack count must be equal."""
        report = validate_against_reference(
            converted_goblin,
            {"attacks": [Attack(name="Scimitar"), Attack(name="Shortbow")]},
        )

        assert len(report.diffs) == 1
        diff = report.diffs[0]
        assert diff.field == ATTACK_COUNT_FIELD
        assert diff.status == FieldMatchStatus.MISMATCH
        assert diff.converted == 1
        assert diff.reference == 2

    def test_raw_text_reference(
        self,
        converted_goblin: OutputCreatureData,
        simple_goblin_text: str,
    ) -> None:
        """Test raw stat-block text is parsed before comparison."""
        report = validate_against_reference(converted_goblin, simple_goblin_text)

        assert report.has_reference is True
        assert report.accuracy_score == 80
        assert report.summary == "1 field(s) differ from reference: hp. Accuracy: 80%."

    def test_nothing_comparable(self, converted_goblin: OutputCreatureData) -> None:
        """Test a reference with no comparable fields counts as fully accurate."""
        report = validate_against_reference(converted_goblin, {"alignment": "evil"})

        assert report.has_reference is True
        assert report.diffs == []
        assert report.accuracy_score == 100
