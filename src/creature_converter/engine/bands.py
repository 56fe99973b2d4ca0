"""Band validation of converted stat cards.

Checks a converted card against the targets recorded in its own tuning
block, using the profile's tolerances. "Balanced" means inside the
profile's self-defined bands, not a match with any published creature.
"""

from __future__ import annotations

from creature_converter.core.logging import get_logger
from creature_converter.core.rounding import round_half_up, round_tenth
from creature_converter.engine.dice import average_damage
from creature_converter.models.creature import Attack, OutputCreatureData
from creature_converter.models.enums import BandField, BandStatus
from creature_converter.models.profile import ConversionProfile
from creature_converter.models.reports import BandResult, BandValidationReport
from creature_converter.profiles.registry import get_profile


logger = get_logger(__name__)

NO_TUNING_SUMMARY = "No tuning data. Re-convert to generate a validation report."
BALANCED_SUMMARY = "All stats within target bands. Balanced."

# (high suggestion, low suggestion) per field
SUGGESTIONS: dict[BandField, tuple[str | None, str | None]] = {
    BandField.AC: (
        "Reduce source AC or lower the tier.",
        "Increase source AC or raise the tier.",
    ),
    BandField.HP: (
        "Lower the Durability slider or reduce the tier.",
        "Raise the Durability slider or increase the tier.",
    ),
    BandField.ATTACK_BONUS: (
        None,
        "Source attack bonus may be unusually low. Try changing role to Skirmisher.",
    ),
    BandField.DPR: (
        "Lower the Deadliness slider.",
        "Raise the Deadliness slider or switch role to Brute.",
    ),
}


def calc_dpr(attacks: list[Attack]) -> float:
    """Average damage of the primary attack; 0 without usable dice."""
    if not attacks:
        return 0.0
    return average_damage(attacks[0].damage)


def _status(deviation: float, tolerance: float) -> BandStatus:
    if abs(deviation) <= tolerance:
        return BandStatus.PASS
    return BandStatus.HIGH if deviation > 0 else BandStatus.LOW


def _fraction(value: float, target: float) -> float:
    return (value - target) / target if target > 0 else 0.0


def _result(
    field: BandField,
    value: int | float,
    target: int | float,
    status: BandStatus,
    delta: int | float,
) -> BandResult:
    high, low = SUGGESTIONS[field]
    suggestion = {BandStatus.HIGH: high, BandStatus.LOW: low}.get(status)
    return BandResult(
        field=field,
        value=value,
        target=target,
        status=status,
        delta=delta,
        suggestion=suggestion,
    )


def validate_bands(
    output: OutputCreatureData,
    profile: ConversionProfile | None = None,
) -> BandValidationReport:
    """Score a converted card against its targeted bands.

    AC and attack bonus use absolute tolerances; HP and DPR use fractional
    ones. Only the primary attack counts toward attack bonus and DPR.

    Args:
        output: Converted stat card.
        profile: Profile supplying the tolerances; defaults to the profile
            named in the card's tuning record.

    Returns:
        The validation report. A card without tuning data scores 0.
    """
    tuning = output.tuning
    if tuning is None:
        return BandValidationReport(score=0, balanced=False, results=[], summary=NO_TUNING_SUMMARY)

    if profile is None:
        profile = get_profile(tuning.profile_id)
    tolerance = profile.tolerance
    targets = tuning.targets

    primary_bonus = output.attacks[0].bonus if output.attacks else None
    attack_bonus = primary_bonus if primary_bonus is not None else 0
    dpr = calc_dpr(output.attacks)

    ac_delta = output.ac - targets.ac_target
    hp_delta = output.hp - targets.hp_target
    ab_delta = attack_bonus - targets.attack_bonus_target

    results = [
        _result(
            BandField.AC,
            output.ac,
            targets.ac_target,
            _status(ac_delta, tolerance.ac),
            ac_delta,
        ),
        _result(
            BandField.HP,
            output.hp,
            targets.hp_target,
            _status(_fraction(output.hp, targets.hp_target), tolerance.hp),
            hp_delta,
        ),
        _result(
            BandField.ATTACK_BONUS,
            attack_bonus,
            targets.attack_bonus_target,
            _status(ab_delta, tolerance.attack_bonus),
            ab_delta,
        ),
        _result(
            BandField.DPR,
            round_tenth(dpr),
            targets.dpr_target,
            _status(_fraction(dpr, targets.dpr_target), tolerance.dpr),
            round_tenth(dpr - targets.dpr_target),
        ),
    ]

    passed = sum(1 for result in results if result.status == BandStatus.PASS)
    score = round_half_up(100 * passed / len(results))
    balanced = score == 100

    if balanced:
        summary = BALANCED_SUMMARY
    else:
        out_of_band = [result.field.value for result in results if result.status != BandStatus.PASS]
        noun = "stat" if len(out_of_band) == 1 else "stats"
        summary = f"{len(out_of_band)} {noun} outside target bands: {', '.join(out_of_band)}."

    logger.debug("Bands validated", name=output.name, score=score, balanced=balanced)
    return BandValidationReport(score=score, balanced=balanced, results=results, summary=summary)


__all__ = ["validate_bands", "calc_dpr", "NO_TUNING_SUMMARY", "BALANCED_SUMMARY"]
