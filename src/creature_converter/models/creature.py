"""Pydantic V2 schemas for creature records.

This module defines the records that flow through the conversion
pipeline: the structured creature extracted from source text, the
converted stat card, and the tuning metadata embedded in every converted
card. Every record serializes to plain JSON (no behaviour-bearing
objects, no cycles) so it can cross the storage and export boundaries.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from creature_converter.core.constants import MAX_TIER, MIN_TIER
from creature_converter.models.enums import (
    CreatureRole,
    LegacyOutputProfile,
    LicenseType,
    SourceSystem,
)


# Type alias for validated threat tiers
ThreatTier = Annotated[int, Field(ge=MIN_TIER, le=MAX_TIER, description="Threat tier (1-5)")]


# =============================================================================
# Stat Block Pieces
# =============================================================================


class Attack(BaseModel):
    """A single attack line.

    Attributes:
        name: Attack name (e.g., 'Scimitar').
        bonus: To-hit bonus, if known.
        damage: Damage expression such as '1d6+2' or '1d6+2 slashing'.
        description: Free-text notes carried through conversion.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(min_length=1, description="Attack name")
    bonus: int | None = Field(default=None, description="To-hit bonus")
    damage: str | None = Field(default=None, description="Damage dice expression")
    description: str | None = Field(default=None, description="Free-text description")


class SpecialAction(BaseModel):
    """A named special ability such as a breath weapon.

    Attributes:
        name: Action name.
        description: What the action does.
        recharge: Recharge condition (e.g., 'Recharge 5-6').
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(min_length=1, description="Action name")
    description: str = Field(default="", description="Action description")
    recharge: str | None = Field(default=None, description="Recharge condition")


# =============================================================================
# Parsed Input
# =============================================================================


class ParsedCreatureData(BaseModel):
    """Structured creature extracted from a source stat block.

    Every field is optional; a reviewer may edit any of them before the
    record is converted. A ``None`` value always means "not found".

    Attributes:
        name: Creature name.
        ac: Armor class.
        hp: Hit points.
        movement: Movement description (e.g., '30 ft., fly 60 ft.').
        attacks: Attacks in source order; the first is the primary attack.
        special_actions: Special actions in source order.
        saves: Saving throw text.
        cr: Challenge rating, kept as text to preserve fractions like '1/4'.
        level: Numeric level derived from CR or read directly.
        system: Source rules system.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str | None = Field(default=None, description="Creature name")
    ac: int | None = Field(default=None, description="Armor class")
    hp: int | None = Field(default=None, description="Hit points")
    movement: str | None = Field(default=None, description="Movement text")
    attacks: list[Attack] = Field(default_factory=list, description="Attacks")
    special_actions: list[SpecialAction] = Field(
        default_factory=list,
        description="Special actions",
    )
    saves: str | None = Field(default=None, description="Saving throw text")
    cr: str | None = Field(default=None, description="Challenge rating text")
    level: int | None = Field(default=None, description="Numeric level")
    system: SourceSystem | None = Field(default=None, description="Source rules system")


# =============================================================================
# Tuning Metadata
# =============================================================================


class TargetSet(BaseModel):
    """Numeric balance targets for one (profile, tier, role) combination.

    Attributes:
        ac_target: Armor class target.
        hp_target: Hit point target.
        attack_bonus_target: Attack bonus target.
        dpr_target: Average damage per round target.
        morale_target: Morale target, when the profile uses morale.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ac_target: int
    hp_target: int
    attack_bonus_target: int
    dpr_target: float
    morale_target: int | None = None


class TuningProvenance(BaseModel):
    """Which source and ruleset produced a converted card.

    Attributes:
        source_system: Source system tag, or 'unknown'.
        output_system: Display name of the conversion profile.
        version: Conversion profile version.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    source_system: str
    output_system: str
    version: str


class ConversionTuning(BaseModel):
    """Tuning record embedded in every converted card.

    Attributes:
        profile_id: Conversion profile used.
        role: Role used for the role-modifier lookup.
        hp_multiplier: Durability multiplier applied.
        damage_multiplier: Deadliness multiplier applied.
        targets: The exact targets the engine aimed for.
        provenance: Source and output labels.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    profile_id: str
    role: CreatureRole
    hp_multiplier: float
    damage_multiplier: float
    targets: TargetSet
    provenance: TuningProvenance


class ProvenanceBlock(BaseModel):
    """Export provenance for a system pack.

    Attributes:
        pack_id: System pack that produced the card.
        pack_display_name: Human-readable pack name.
        license_type: Licence of the pack's data.
        attribution_text: Attribution required in exports, if any.
        disclaimer: Independence disclaimer.
        generated_at: When the block was produced.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pack_id: str
    pack_display_name: str
    license_type: LicenseType
    attribution_text: str | None = None
    disclaimer: str
    generated_at: datetime


# =============================================================================
# Converted Output
# =============================================================================


class OutputCreatureData(BaseModel):
    """A converted stat card.

    Contains everything needed to render the plain-text card and the JSON
    export without re-running the conversion.

    Attributes:
        name: Creature name.
        ac: Converted armor class.
        hp: Converted hit points (never below 1).
        movement: Movement text.
        attacks: Converted attacks; the first is the primary attack.
        saves: Saving throw text.
        traits: Movement-derived traits.
        special_actions: Special actions carried over from the source.
        morale: Morale value (0 when the profile has no morale).
        loot_notes: Tier-scaled loot suggestion.
        threat_tier: Threat tier the card was built for.
        output_profile: Legacy profile label derived from the profile id.
        output_pack_id: System pack that owns the output format.
        show_morale: Whether the morale line is shown.
        show_reaction: Whether the reaction roll is shown.
        provenance: Export provenance, when attached.
        tuning: Tuning record; absent on legacy cards.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str
    ac: int
    hp: int = Field(ge=1)
    movement: str
    attacks: list[Attack] = Field(default_factory=list)
    saves: str
    traits: list[str] = Field(default_factory=list)
    special_actions: list[SpecialAction] = Field(default_factory=list)
    morale: int = 0
    loot_notes: str = ""
    threat_tier: ThreatTier
    output_profile: LegacyOutputProfile = LegacyOutputProfile.OSR_GENERIC
    output_pack_id: str = "osr_generic"
    show_morale: bool = False
    show_reaction: bool = False
    provenance: ProvenanceBlock | None = None
    tuning: ConversionTuning | None = None


__all__ = [
    "ThreatTier",
    "Attack",
    "SpecialAction",
    "ParsedCreatureData",
    "TargetSet",
    "TuningProvenance",
    "ConversionTuning",
    "ProvenanceBlock",
    "OutputCreatureData",
]
