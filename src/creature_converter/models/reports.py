"""Pydantic V2 schemas for pipeline results and validation reports.

These are derived, non-persisted views: the parser result, the band
validation report and the reference comparison report.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from creature_converter.models.creature import ParsedCreatureData
from creature_converter.models.enums import BandField, BandStatus, FieldMatchStatus


class ParseResult(BaseModel):
    """Outcome of parsing one stat block.

    ``success`` is advisory: it only says the confidence is above 0.3.
    Callers may convert a low-confidence result anyway.

    Attributes:
        success: Whether confidence exceeds the success threshold.
        data: The extracted creature.
        confidence: Extraction confidence between 0 and 1.
        warnings: One entry per field that could not be extracted.
    """

    model_config = ConfigDict(extra="forbid")

    success: bool
    data: ParsedCreatureData
    confidence: float = Field(ge=0.0, le=1.0)
    warnings: list[str] = Field(default_factory=list)


def _signed(value: int | float) -> str:
    return f"+{value:g}" if value >= 0 else f"{value:g}"


class BandResult(BaseModel):
    """Band check for a single stat-card field.

    Attributes:
        field: Field checked.
        value: Actual converted value.
        target: Target value from the tuning record.
        status: pass, high or low.
        delta: Signed difference ``value - target``.
        suggestion: How to bring the field back into band, when out of band.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    field: BandField
    value: int | float
    target: int | float
    status: BandStatus
    delta: int | float
    suggestion: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def delta_display(self) -> str:
        """Signed delta for display (e.g., '+3', '-2', '+0.4')."""
        return _signed(self.delta)


class BandValidationReport(BaseModel):
    """Band validation of a converted card against its profile.

    Attributes:
        score: Percentage of fields within tolerance (0-100).
        balanced: True only when every field passes.
        results: Per-field results in AC, HP, Attack Bonus, DPR order.
        summary: Short human-readable summary.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    score: int = Field(ge=0, le=100)
    balanced: bool
    results: list[BandResult] = Field(default_factory=list)
    summary: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def out_of_band(self) -> list[BandField]:
        """Fields whose status is not pass."""
        return [result.field for result in self.results if result.status != BandStatus.PASS]


class FieldDiff(BaseModel):
    """Comparison of one converted field against a reference stat block.

    Attributes:
        field: Field name.
        status: match, mismatch or missing.
        converted: Converted value.
        reference: Reference value.
        suggested: Value to apply if the user adopts the reference.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    field: str
    status: FieldMatchStatus
    converted: Any = None
    reference: Any = None
    suggested: Any = None


class ReferenceReport(BaseModel):
    """Comparison of a converted card against a user-supplied reference.

    Attributes:
        accuracy_score: Percentage of compared fields that match (0-100).
        diffs: Per-field comparisons.
        summary: Short human-readable summary.
        has_reference: Whether a reference was supplied at all.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    accuracy_score: int = Field(ge=0, le=100)
    diffs: list[FieldDiff] = Field(default_factory=list)
    summary: str
    has_reference: bool


__all__ = [
    "ParseResult",
    "BandResult",
    "BandValidationReport",
    "FieldDiff",
    "ReferenceReport",
]
