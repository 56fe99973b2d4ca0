"""Profile-driven creature conversion.

Takes a ``ParsedCreatureData`` plus ``ConversionSettings`` and produces an
``OutputCreatureData`` carrying its full tuning record. All balance
targets come from the selected conversion profile; nothing here is
hard-coded per output system.

Threat tiers:
    Tier 1: Level <= 2  / HP <= 8
    Tier 2: Level 3-4   / HP 9-20
    Tier 3: Level 5-7   / HP 21-40
    Tier 4: Level 8-12  / HP 41-80
    Tier 5: Level 13+   / HP 81+

Example:
    >>> from creature_converter.engine.conversion import convert, get_default_settings
    >>> from creature_converter.models import ParsedCreatureData
    >>> output = convert(ParsedCreatureData(name="Goblin", level=1), get_default_settings())
    >>> output.threat_tier
    1
"""

from __future__ import annotations

from creature_converter.core.config import get_settings
from creature_converter.core.constants import (
    DEFAULT_INFERENCE_HP,
    DEFAULT_MOVEMENT,
    HP_TIER_THRESHOLDS,
    LEVEL_TIER_THRESHOLDS,
    MAX_CONVERTED_ATTACKS,
    MAX_CONVERTED_SPECIAL_ACTIONS,
    MAX_MULTIPLIER,
    MAX_TARGET_LEVEL,
    MAX_TIER,
    MIN_MULTIPLIER,
    MIN_TARGET_LEVEL,
    PRIMARY_DPR_SHARE,
    SYNTHESIZED_ATTACK_NAME,
    UNNAMED_CREATURE_NAME,
)
from creature_converter.core.logging import get_logger
from creature_converter.core.rounding import clamp, round_half_up
from creature_converter.engine.bridge import (
    legacy_output_profile,
    resolve_pack_id,
    resolve_profile_id,
    resolve_role,
)
from creature_converter.engine.dice import parse_dice, scale_existing, scale_to_target
from creature_converter.models.creature import (
    Attack,
    ConversionTuning,
    OutputCreatureData,
    ParsedCreatureData,
    TuningProvenance,
)
from creature_converter.models.settings import ConversionSettings
from creature_converter.profiles.packs import DEFAULT_PACK_ID
from creature_converter.profiles.registry import get_effective_targets, get_profile


logger = get_logger(__name__)


MOVEMENT_TRAITS: tuple[tuple[str, str], ...] = (
    ("fly", "Flying: can fly"),
    ("swim", "Aquatic: can swim"),
    ("climb", "Climber: can climb"),
    ("burrow", "Burrower: can burrow"),
)

LOOT_BY_TIER: dict[int, str] = {
    1: "Minor trinkets, 1d6 cp",
    2: "2d6 sp, common item",
    3: "1d6 gp, uncommon item chance",
    4: "2d6 gp, uncommon item",
    5: "3d6 gp, rare item chance",
}


# =============================================================================
# Tier Resolution
# =============================================================================


def level_to_tier(level: int) -> int:
    """Map a creature or party level onto a threat tier."""
    for max_level, tier in LEVEL_TIER_THRESHOLDS:
        if level <= max_level:
            return tier
    return MAX_TIER


def hp_to_tier(hp: int) -> int:
    """Infer a threat tier from hit points alone."""
    for max_hp, tier in HP_TIER_THRESHOLDS:
        if hp <= max_hp:
            return tier
    return MAX_TIER


def cr_to_level(cr: str) -> int:
    """Convert challenge rating text to a level.

    Fractional ratings are level 0; anything unparseable is level 1.
    """
    if "/" in cr:
        return 0
    digits = ""
    for char in cr.strip():
        if not char.isdigit():
            break
        digits += char
    return int(digits) if digits and int(digits) != 0 else 1


def determine_threat_tier(parsed: ParsedCreatureData, settings: ConversionSettings) -> int:
    """Resolve the threat tier; the first applicable rule wins.

    Order: explicit target level, parsed level, parsed CR, then hit
    points (10 when the source has none).

    Args:
        parsed: Source creature.
        settings: Conversion settings.

    Returns:
        Threat tier 1-5.
    """
    if settings.target_level is not None:
        return level_to_tier(settings.target_level)
    if parsed.level is not None:
        return level_to_tier(parsed.level)
    if parsed.cr is not None:
        return level_to_tier(cr_to_level(parsed.cr))
    return hp_to_tier(parsed.hp if parsed.hp is not None else DEFAULT_INFERENCE_HP)


# =============================================================================
# Settings
# =============================================================================


def get_default_settings() -> ConversionSettings:
    """Fresh conversion settings seeded from the configured defaults.

    Returns:
        Settings with the configured sliders, profile, pack and role.
    """
    defaults = get_settings().conversion
    return ConversionSettings(
        deadliness=defaults.deadliness,
        durability=defaults.durability,
        target_level=None,
        role=defaults.role,
        conversion_profile_id=defaults.profile_id,
        output_profile=legacy_output_profile(defaults.profile_id).value,
        output_pack_id=defaults.pack_id,
    )


def validate_settings(settings: ConversionSettings) -> ConversionSettings:
    """Clamp settings into their accepted ranges.

    Multipliers are clamped to 0.5-2.0 and the target level to 0-20;
    missing profile and pack ids are filled with the defaults. Values are
    clamped, never rejected, and clamping twice changes nothing.

    Args:
        settings: Settings as supplied by the caller.

    Returns:
        A new, clamped settings object.
    """
    target_level = settings.target_level
    if target_level is not None:
        target_level = int(clamp(target_level, MIN_TARGET_LEVEL, MAX_TARGET_LEVEL))

    return settings.model_copy(
        update={
            "deadliness": clamp(settings.deadliness, MIN_MULTIPLIER, MAX_MULTIPLIER),
            "durability": clamp(settings.durability, MIN_MULTIPLIER, MAX_MULTIPLIER),
            "target_level": target_level,
            "conversion_profile_id": resolve_profile_id(
                settings.conversion_profile_id,
                settings.output_profile,
            ),
            "output_pack_id": settings.output_pack_id or DEFAULT_PACK_ID,
        }
    )


# =============================================================================
# Attacks
# =============================================================================


def _dpr_shares(effective_dpr: float, count: int) -> list[float]:
    if count == 1:
        return [effective_dpr]
    secondary = effective_dpr * (1 - PRIMARY_DPR_SHARE) / (count - 1)
    return [effective_dpr * PRIMARY_DPR_SHARE] + [secondary] * (count - 1)


def _scale_damage(damage: str | None, target_share: float) -> str:
    formula = parse_dice(damage)
    if formula is None or formula.average <= 0:
        return scale_to_target(target_share)
    return scale_existing(damage, target_share / formula.average)  # type: ignore[arg-type]


def build_attacks(
    source_attacks: list[Attack],
    attack_bonus: int,
    dpr_target: float,
    deadliness: float,
) -> list[Attack]:
    """Convert source attacks onto the DPR budget.

    Every attack gets the same flat bonus. With no source attacks a single
    generic attack is synthesized. Otherwise the first three are kept; a
    lone attack takes the whole budget, and with several the primary takes
    60% while the rest split the remainder evenly.

    Args:
        source_attacks: Attacks from the parsed creature.
        attack_bonus: Attack bonus target.
        dpr_target: DPR target before the deadliness multiplier.
        deadliness: Damage multiplier.

    Returns:
        Converted attacks, primary first.
    """
    effective_dpr = dpr_target * deadliness

    if not source_attacks:
        return [
            Attack(
                name=SYNTHESIZED_ATTACK_NAME,
                bonus=attack_bonus,
                damage=scale_to_target(effective_dpr),
            )
        ]

    kept = source_attacks[:MAX_CONVERTED_ATTACKS]
    shares = _dpr_shares(effective_dpr, len(kept))

    return [
        Attack(
            name=source.name,
            bonus=attack_bonus,
            damage=_scale_damage(source.damage, share),
            description=source.description,
        )
        for source, share in zip(kept, shares)
    ]


# =============================================================================
# Traits and Loot
# =============================================================================


def extract_traits(movement: str | None) -> list[str]:
    """Traits implied by movement modes; a creature may have several."""
    if not movement:
        return []
    lowered = movement.lower()
    return [trait for keyword, trait in MOVEMENT_TRAITS if keyword in lowered]


def loot_notes(tier: int) -> str:
    """Loot suggestion for a tier."""
    return LOOT_BY_TIER.get(tier, "No loot noted")


# =============================================================================
# Conversion
# =============================================================================


def convert(parsed: ParsedCreatureData, settings: ConversionSettings) -> OutputCreatureData:
    """Convert a parsed creature into a stat card for the selected profile.

    Settings are clamped with :func:`validate_settings` first, so
    out-of-range sliders and target levels never reach the math. The
    result is fully determined by the two arguments.

    Args:
        parsed: Source creature.
        settings: Conversion settings.

    Returns:
        The converted stat card with its tuning record.
    """
    settings = validate_settings(settings)
    profile = get_profile(settings.conversion_profile_id)
    role = resolve_role(settings.role)
    tier = determine_threat_tier(parsed, settings)
    targets = get_effective_targets(profile, tier, role)

    hp = max(1, round_half_up(targets.hp_target * settings.durability))

    ac = targets.ac_target
    if parsed.ac is not None:
        blended = round_half_up((parsed.ac + targets.ac_target) / 2)
        ac = int(clamp(blended, targets.ac_target - 1, targets.ac_target + 2))

    attacks = build_attacks(
        parsed.attacks,
        targets.attack_bonus_target,
        targets.dpr_target,
        settings.deadliness,
    )

    tuning = ConversionTuning(
        profile_id=profile.id,
        role=role,
        hp_multiplier=settings.durability,
        damage_multiplier=settings.deadliness,
        targets=targets,
        provenance=TuningProvenance(
            source_system=parsed.system.value if parsed.system else "unknown",
            output_system=profile.display_name,
            version=profile.version,
        ),
    )

    output = OutputCreatureData(
        name=parsed.name or UNNAMED_CREATURE_NAME,
        ac=ac,
        hp=hp,
        movement=parsed.movement or DEFAULT_MOVEMENT,
        attacks=attacks,
        saves=parsed.saves or f"+{tier + 2} vs physical effects",
        traits=extract_traits(parsed.movement),
        special_actions=[
            action.model_copy() for action in parsed.special_actions[:MAX_CONVERTED_SPECIAL_ACTIONS]
        ],
        morale=targets.morale_target if targets.morale_target is not None else 0,
        loot_notes=loot_notes(tier),
        threat_tier=tier,
        output_profile=legacy_output_profile(profile.id),
        output_pack_id=resolve_pack_id(settings.output_pack_id),
        show_morale=profile.show_morale,
        show_reaction=profile.show_reaction,
        tuning=tuning,
    )

    logger.debug(
        "Creature converted",
        name=output.name,
        profile_id=profile.id,
        role=role.value,
        tier=tier,
        hp=output.hp,
        ac=output.ac,
    )
    return output


__all__ = [
    "convert",
    "determine_threat_tier",
    "level_to_tier",
    "hp_to_tier",
    "cr_to_level",
    "get_default_settings",
    "validate_settings",
    "build_attacks",
    "extract_traits",
    "loot_notes",
]
