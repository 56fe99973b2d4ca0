"""Validation of converted cards against a user-supplied reference.

When a user owns the published stat block for a creature they can paste
it as a reference. The converted card is compared field by field: numeric
fields match within 15% of the reference, text fields match ignoring case
and surrounding whitespace, and the attack count must be equal.
"""

from __future__ import annotations

from typing import Any

from creature_converter.core.logging import get_logger
from creature_converter.core.rounding import round_half_up
from creature_converter.ingestion.statblock import parse
from creature_converter.models.creature import OutputCreatureData
from creature_converter.models.enums import FieldMatchStatus
from creature_converter.models.reports import FieldDiff, ReferenceReport
from creature_converter.profiles.packs import get_pack


logger = get_logger(__name__)

NUMERIC_TOLERANCE = 0.15
NUMERIC_FIELDS = ("ac", "hp", "morale", "threat_tier")
STRING_FIELDS = ("name", "movement", "saves")
ATTACK_COUNT_FIELD = "attacks (count)"

NO_REFERENCE_SUMMARY = "No reference provided. Paste the target stat block to verify accuracy."
PRIVATE_REFERENCE_SUMMARY = (
    "Paste the official stat block text you own into the Reference field to verify accuracy. "
    "Your reference text stays private and is never transmitted."
)


def parse_reference(raw_text: str) -> dict[str, Any]:
    """Parse reference text into the fields that can be compared.

    Args:
        raw_text: Stat block pasted by the user.

    Returns:
        Mapping with name, ac, hp, movement, attacks and saves; fields the
        parser could not find are omitted.
    """
    data = parse(raw_text).data
    reference: dict[str, Any] = {
        "name": data.name,
        "ac": data.ac,
        "hp": data.hp,
        "movement": data.movement,
        "attacks": data.attacks,
        "saves": data.saves,
    }
    return {key: value for key, value in reference.items() if value is not None}


def compare_numeric(converted: float, reference: float) -> FieldMatchStatus:
    """Match when within 15% of the reference; exact when the reference is 0."""
    if reference == 0:
        return FieldMatchStatus.MATCH if converted == 0 else FieldMatchStatus.MISMATCH
    delta = abs(converted - reference) / abs(reference)
    return FieldMatchStatus.MATCH if delta <= NUMERIC_TOLERANCE else FieldMatchStatus.MISMATCH


def compare_text(converted: str, reference: str) -> FieldMatchStatus:
    """Match ignoring case and surrounding whitespace."""
    if converted.strip().lower() == reference.strip().lower():
        return FieldMatchStatus.MATCH
    return FieldMatchStatus.MISMATCH


def _diff(field: str, status: FieldMatchStatus, converted: Any, reference: Any) -> FieldDiff:
    suggested = reference if status != FieldMatchStatus.MATCH else None
    return FieldDiff(
        field=field,
        status=status,
        converted=converted,
        reference=reference,
        suggested=suggested,
    )


def validate_against_reference(
    output: OutputCreatureData,
    reference: str | dict[str, Any] | None = None,
    pack_id: str | None = None,
) -> ReferenceReport:
    """Compare a converted card to a reference stat block.

    Args:
        output: Converted stat card.
        reference: Raw reference text, or already-parsed reference fields.
        pack_id: Pack whose no-reference prompt to use; defaults to the
            card's own pack.

    Returns:
        The comparison report. Without a reference the score is 0 and
        ``has_reference`` is False.
    """
    if not reference:
        pack = get_pack(pack_id or output.output_pack_id)
        summary = PRIVATE_REFERENCE_SUMMARY if pack.requires_user_reference else NO_REFERENCE_SUMMARY
        return ReferenceReport(accuracy_score=0, diffs=[], summary=summary, has_reference=False)

    fields = parse_reference(reference) if isinstance(reference, str) else reference
    converted = output.model_dump()
    diffs: list[FieldDiff] = []

    for field in NUMERIC_FIELDS:
        expected = fields.get(field)
        if expected is None:
            continue
        actual = converted.get(field)
        if actual is None:
            diffs.append(_diff(field, FieldMatchStatus.MISSING, actual, expected))
        else:
            diffs.append(_diff(field, compare_numeric(actual, expected), actual, expected))

    for field in STRING_FIELDS:
        expected = fields.get(field)
        if not expected:
            continue
        actual = converted.get(field)
        if not actual:
            diffs.append(_diff(field, FieldMatchStatus.MISSING, actual, expected))
        else:
            diffs.append(_diff(field, compare_text(actual, expected), actual, expected))

    reference_attacks = len(fields.get("attacks") or [])
    if reference_attacks > 0:
        converted_attacks = len(output.attacks)
        status = (
            FieldMatchStatus.MATCH
            if converted_attacks == reference_attacks
            else FieldMatchStatus.MISMATCH
        )
        diffs.append(
            FieldDiff(
                field=ATTACK_COUNT_FIELD,
                status=status,
                converted=converted_attacks,
                reference=reference_attacks,
            )
        )

    matched = sum(1 for diff in diffs if diff.status == FieldMatchStatus.MATCH)
    accuracy = round_half_up(100 * matched / len(diffs)) if diffs else 100

    differing = [diff.field for diff in diffs if diff.status != FieldMatchStatus.MATCH]
    if differing:
        summary = (
            f"{len(differing)} field(s) differ from reference: {', '.join(differing)}. "
            f"Accuracy: {accuracy}%."
        )
    else:
        summary = f"All checked fields match the reference. Accuracy: {accuracy}%."

    logger.debug("Reference validated", name=output.name, accuracy=accuracy, compared=len(diffs))
    return ReferenceReport(accuracy_score=accuracy, diffs=diffs, summary=summary, has_reference=True)


__all__ = [
    "parse_reference",
    "compare_numeric",
    "compare_text",
    "validate_against_reference",
    "NUMERIC_TOLERANCE",
    "NO_REFERENCE_SUMMARY",
    "PRIVATE_REFERENCE_SUMMARY",
]
