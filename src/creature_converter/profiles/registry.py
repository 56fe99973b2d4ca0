"""Conversion profile registry and effective target resolution.

Profiles are read-only reference data held in an immutable mapping built
once at import time. The engine and the band validator only consume the
``ConversionProfile`` shape, so registering a new profile here needs no
changes anywhere else.

Example:
    >>> from creature_converter.profiles.registry import get_profile, get_effective_targets
    >>> profile = get_profile("osr_generic_v1")
    >>> get_effective_targets(profile, 1, "brute").hp_target
    8
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from creature_converter.core.logging import get_logger
from creature_converter.core.rounding import round_half_up, round_tenth
from creature_converter.models.creature import TargetSet
from creature_converter.models.enums import CreatureRole
from creature_converter.models.profile import ConversionProfile
from creature_converter.profiles.osr_generic import OSR_GENERIC_PROFILE
from creature_converter.profiles.shadowdark_compatible import SHADOWDARK_COMPATIBLE_PROFILE


logger = get_logger(__name__)

DEFAULT_PROFILE_ID = OSR_GENERIC_PROFILE.id

CONVERSION_PROFILES: Mapping[str, ConversionProfile] = MappingProxyType(
    {
        OSR_GENERIC_PROFILE.id: OSR_GENERIC_PROFILE,
        SHADOWDARK_COMPATIBLE_PROFILE.id: SHADOWDARK_COMPATIBLE_PROFILE,
    }
)


def is_registered_profile(profile_id: str | None) -> bool:
    """Check whether a profile id is in the registry."""
    return profile_id is not None and profile_id in CONVERSION_PROFILES


def get_profile(profile_id: str | None) -> ConversionProfile:
    """Look up a conversion profile by id.

    Unknown or missing ids resolve to the OSR Generic profile.

    Args:
        profile_id: Profile identifier (e.g., 'shadowdark_compatible_v1').

    Returns:
        The matching profile, or the default profile.
    """
    profile = CONVERSION_PROFILES.get(profile_id) if profile_id else None
    if profile is None:
        if profile_id:
            logger.warning(
                "Unknown conversion profile, using default",
                profile_id=profile_id,
                default=DEFAULT_PROFILE_ID,
            )
        return CONVERSION_PROFILES[DEFAULT_PROFILE_ID]
    return profile


def list_profiles() -> list[ConversionProfile]:
    """All registered profiles, default first."""
    return list(CONVERSION_PROFILES.values())


def get_effective_targets(
    profile: ConversionProfile,
    tier: int,
    role: CreatureRole | str,
) -> TargetSet:
    """Compute the balance targets for one tier and role.

    AC, HP and attack bonus are the base tier value times the role
    multiplier, rounded half up. DPR is rounded to one decimal. Morale
    comes straight from the tier and ignores the role.

    Args:
        profile: Conversion profile to read.
        tier: Threat tier 1-5; values outside the range are clamped.
        role: Creature role; unknown roles use skirmisher.

    Returns:
        The effective target set.
    """
    tier = max(min(tier, max(profile.base_tier_targets)), min(profile.base_tier_targets))
    try:
        role = CreatureRole(role)
    except ValueError:
        role = CreatureRole.SKIRMISHER

    base = profile.base_tier_targets[tier]
    modifiers = profile.role_modifiers[role]

    return TargetSet(
        ac_target=round_half_up(base.ac_target * modifiers.ac),
        hp_target=round_half_up(base.hp_target * modifiers.hp),
        attack_bonus_target=round_half_up(base.attack_bonus_target * modifiers.attack_bonus),
        dpr_target=round_tenth(base.dpr_target * modifiers.dpr),
        morale_target=base.morale_target,
    )


__all__ = [
    "CONVERSION_PROFILES",
    "DEFAULT_PROFILE_ID",
    "get_profile",
    "get_effective_targets",
    "is_registered_profile",
    "list_profiles",
]
