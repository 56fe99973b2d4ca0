"""Pydantic V2 schema for user-controlled conversion settings.

Settings are deliberately unconstrained at the schema level: sliders and
target levels outside their ranges are clamped by
``engine.conversion.validate_settings`` rather than rejected, and unknown
role/profile/pack identifiers are absorbed by ``engine.bridge``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ConversionSettings(BaseModel):
    """User tuning for one conversion.

    Attributes:
        deadliness: Damage multiplier (clamped to 0.5-2.0 before use).
        durability: Hit point multiplier (clamped to 0.5-2.0 before use).
        target_level: Explicit level override for tier resolution.
        role: Creature role override; unknown values resolve to skirmisher.
        conversion_profile_id: Active conversion profile id.
        output_profile: Legacy output-profile label from older entries.
        output_pack_id: Active system pack id.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    deadliness: float = Field(default=1.0, description="Damage multiplier")
    durability: float = Field(default=1.0, description="HP multiplier")
    target_level: int | None = Field(default=None, description="Level override")
    role: str | None = Field(default=None, description="Creature role override")
    conversion_profile_id: str | None = Field(
        default=None,
        description="Conversion profile id",
    )
    output_profile: str | None = Field(
        default=None,
        description="Legacy output profile label",
    )
    output_pack_id: str | None = Field(default=None, description="System pack id")


__all__ = ["ConversionSettings"]
