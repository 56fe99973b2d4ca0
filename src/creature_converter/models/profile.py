"""Pydantic V2 schemas for conversion profiles.

A conversion profile is a named, read-only set of numeric target curves
that define what "balanced" means for one output style. Profiles hold
only numbers: per-tier base targets, per-role multipliers and the
tolerance bands used by band validation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from creature_converter.core.constants import THREAT_TIERS
from creature_converter.core.exceptions import ProfileError
from creature_converter.models.enums import CreatureRole


class TierTargets(BaseModel):
    """Base targets for one threat tier (standard creature).

    Attributes:
        ac_target: Armor class target.
        hp_target: Hit point target.
        attack_bonus_target: Attack bonus target.
        dpr_target: Average damage per round of a single attack.
        morale_target: Morale target; None hides morale for the profile.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ac_target: int = Field(ge=0)
    hp_target: int = Field(ge=1)
    attack_bonus_target: int
    dpr_target: float = Field(gt=0)
    morale_target: int | None = None


class RoleModifiers(BaseModel):
    """Multiplicative factors a role applies to the base tier targets.

    Values above 1 raise the stat; values below 1 lower it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ac: float = Field(gt=0)
    hp: float = Field(gt=0)
    attack_bonus: float = Field(gt=0)
    dpr: float = Field(gt=0)


class Tolerance(BaseModel):
    """Tolerance bands used by band validation.

    Attributes:
        ac: Absolute tolerance for armor class.
        hp: Fractional tolerance for hit points (0.15 = within 15%).
        attack_bonus: Absolute tolerance for attack bonus.
        dpr: Fractional tolerance for damage per round.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ac: int = Field(ge=0)
    hp: float = Field(ge=0)
    attack_bonus: int = Field(ge=0)
    dpr: float = Field(ge=0)


class ConversionProfile(BaseModel):
    """An immutable named ruleset of balance targets.

    Construction fails with ProfileError when a tier or role is missing,
    or when any base target decreases as the tier rises.

    Attributes:
        id: Profile identifier (e.g., 'osr_generic_v1').
        version: Profile version string.
        display_name: Name shown to users and stamped into provenance.
        helper_text: One-line description of the profile.
        show_morale: Whether converted cards show morale.
        show_reaction: Whether converted cards show the reaction roll.
        base_tier_targets: Targets keyed by tier 1-5.
        role_modifiers: Multipliers keyed by role.
        tolerance: Band validation tolerances.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    version: str
    display_name: str
    helper_text: str = ""
    show_morale: bool
    show_reaction: bool
    base_tier_targets: dict[int, TierTargets]
    role_modifiers: dict[CreatureRole, RoleModifiers]
    tolerance: Tolerance

    @model_validator(mode="after")
    def validate_tables(self) -> "ConversionProfile":
        """Ensure the tables are complete and non-decreasing by tier.

        Returns:
            Self if validation passes.

        Raises:
            ProfileError: If a tier or role is missing, or a target decreases.
        """
        missing_tiers = [tier for tier in THREAT_TIERS if tier not in self.base_tier_targets]
        if missing_tiers:
            raise ProfileError(
                "Profile is missing tier targets",
                profile_id=self.id,
                details={"missing_tiers": missing_tiers},
            )

        missing_roles = [role.value for role in CreatureRole if role not in self.role_modifiers]
        if missing_roles:
            raise ProfileError(
                "Profile is missing role modifiers",
                profile_id=self.id,
                details={"missing_roles": missing_roles},
            )

        for previous, current in zip(THREAT_TIERS, THREAT_TIERS[1:]):
            low = self.base_tier_targets[previous]
            high = self.base_tier_targets[current]
            for field_name in ("ac_target", "hp_target", "attack_bonus_target", "dpr_target"):
                if getattr(high, field_name) < getattr(low, field_name):
                    raise ProfileError(
                        f"{field_name} decreases from tier {previous} to tier {current}",
                        profile_id=self.id,
                    )
            if (
                low.morale_target is not None
                and high.morale_target is not None
                and high.morale_target < low.morale_target
            ):
                raise ProfileError(
                    f"morale_target decreases from tier {previous} to tier {current}",
                    profile_id=self.id,
                )
        return self


__all__ = [
    "TierTargets",
    "RoleModifiers",
    "Tolerance",
    "ConversionProfile",
]
