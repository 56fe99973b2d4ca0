"""Lean "for use with Shadowdark RPG" conversion profile, v1.

Contains only independently designed numeric targets; no rules text or bestiary
entries. HP runs leaner than the OSR profile at every tier and role,
AC climbs moderately, and morale is not shown.
"""

from __future__ import annotations

from creature_converter.models.enums import CreatureRole
from creature_converter.models.profile import (
    ConversionProfile,
    RoleModifiers,
    TierTargets,
    Tolerance,
)


SHADOWDARK_COMPATIBLE_PROFILE = ConversionProfile(
    id="shadowdark_compatible_v1",
    version="1.0.0",
    display_name="For use with Shadowdark RPG (conversion)",
    helper_text=(
        "Creates a Shadowdark-ready stat card using target balance math. "
        "Does not reproduce official bestiary entries."
    ),
    show_morale=False,
    show_reaction=False,
    base_tier_targets={
        1: TierTargets(ac_target=11, hp_target=4, attack_bonus_target=1, dpr_target=3.5),
        2: TierTargets(ac_target=12, hp_target=8, attack_bonus_target=2, dpr_target=5.5),
        3: TierTargets(ac_target=14, hp_target=16, attack_bonus_target=4, dpr_target=8.5),
        4: TierTargets(ac_target=15, hp_target=28, attack_bonus_target=6, dpr_target=13.5),
        5: TierTargets(ac_target=17, hp_target=50, attack_bonus_target=8, dpr_target=21.0),
    },
    role_modifiers={
        CreatureRole.BRUTE: RoleModifiers(ac=1.0, hp=1.5, attack_bonus=0.9, dpr=1.3),
        CreatureRole.SKIRMISHER: RoleModifiers(ac=1.1, hp=0.8, attack_bonus=1.1, dpr=0.9),
        CreatureRole.CASTER: RoleModifiers(ac=0.9, hp=0.7, attack_bonus=0.8, dpr=1.1),
        CreatureRole.BOSS: RoleModifiers(ac=1.1, hp=2.2, attack_bonus=1.1, dpr=1.5),
        CreatureRole.MINION: RoleModifiers(ac=0.9, hp=0.5, attack_bonus=0.9, dpr=0.7),
        CreatureRole.SUPPORT: RoleModifiers(ac=0.9, hp=0.8, attack_bonus=0.8, dpr=0.6),
    },
    tolerance=Tolerance(ac=1, hp=0.15, attack_bonus=1, dpr=0.15),
)


__all__ = ["SHADOWDARK_COMPATIBLE_PROFILE"]
