"""OSR Generic conversion profile, v1.

Targets a B/X / OSE-adjacent feel: leaner HP than 5e, a lower AC ceiling,
a flat attack bonus progression, and morale plus reaction rolls.
All values are independently designed targets.
"""

from __future__ import annotations

from creature_converter.models.enums import CreatureRole
from creature_converter.models.profile import (
    ConversionProfile,
    RoleModifiers,
    TierTargets,
    Tolerance,
)


OSR_GENERIC_PROFILE = ConversionProfile(
    id="osr_generic_v1",
    version="1.0.0",
    display_name="OSR Generic (conversion)",
    helper_text=(
        "Creates a stat card balanced for old-school (B/X / OSE-style) play. "
        "Tuned for fast, lethal combat with morale and reaction rolls."
    ),
    show_morale=True,
    show_reaction=True,
    base_tier_targets={
        1: TierTargets(ac_target=11, hp_target=6, attack_bonus_target=1, dpr_target=3.5, morale_target=7),
        2: TierTargets(ac_target=12, hp_target=12, attack_bonus_target=3, dpr_target=5.5, morale_target=8),
        3: TierTargets(ac_target=14, hp_target=22, attack_bonus_target=5, dpr_target=8.5, morale_target=9),
        4: TierTargets(ac_target=15, hp_target=40, attack_bonus_target=7, dpr_target=13.5, morale_target=10),
        5: TierTargets(ac_target=17, hp_target=72, attack_bonus_target=9, dpr_target=21.0, morale_target=11),
    },
    role_modifiers={
        CreatureRole.BRUTE: RoleModifiers(ac=1.0, hp=1.4, attack_bonus=0.9, dpr=1.3),
        CreatureRole.SKIRMISHER: RoleModifiers(ac=1.1, hp=0.8, attack_bonus=1.1, dpr=0.9),
        CreatureRole.CASTER: RoleModifiers(ac=0.9, hp=0.8, attack_bonus=0.8, dpr=1.1),
        CreatureRole.BOSS: RoleModifiers(ac=1.1, hp=2.0, attack_bonus=1.1, dpr=1.4),
        CreatureRole.MINION: RoleModifiers(ac=0.9, hp=0.5, attack_bonus=0.9, dpr=0.7),
        CreatureRole.SUPPORT: RoleModifiers(ac=1.0, hp=0.9, attack_bonus=0.8, dpr=0.7),
    },
    tolerance=Tolerance(ac=1, hp=0.15, attack_bonus=1, dpr=0.15),
)


__all__ = ["OSR_GENERIC_PROFILE"]
