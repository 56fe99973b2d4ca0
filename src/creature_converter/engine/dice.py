"""Dice expression parsing and analytic damage scaling.

Damage is never rolled here. Expressions of the form ``NdM[+/-K]`` are
reduced to their average and rescaled toward a target average, either by
synthesizing fresh dice or by re-counting the dice of an existing
expression while keeping its die size.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from creature_converter.core.constants import DIE_SIZES, FALLBACK_DIE_SIZE
from creature_converter.core.logging import get_logger
from creature_converter.core.rounding import round_half_up


logger = get_logger(__name__)

_DICE_PATTERN = re.compile(
    r"(?<!\d)(\d{1,4})d(\d{1,4})(?!\d)(?:\s*([+-])\s*(\d{1,4})(?!\d))?",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class DiceFormula:
    """A parsed ``NdM[+/-K]`` expression.

    Attributes:
        num_dice: Number of dice (N).
        die_size: Faces per die (M).
        modifier: Flat modifier (K, signed).
    """

    num_dice: int
    die_size: int
    modifier: int = 0

    @property
    def average_per_die(self) -> float:
        """Expected value of a single die."""
        return (self.die_size + 1) / 2

    @property
    def average(self) -> float:
        """Expected value of the whole expression."""
        return self.num_dice * self.average_per_die + self.modifier

    def __str__(self) -> str:
        return format_dice(self.num_dice, self.die_size, self.modifier)


def format_dice(num_dice: int, die_size: int, modifier: int = 0) -> str:
    """Render dice as text, omitting a zero modifier.

    Example:
        >>> format_dice(2, 6, -1)
        '2d6-1'
    """
    if modifier == 0:
        return f"{num_dice}d{die_size}"
    return f"{num_dice}d{die_size}{modifier:+d}"


def parse_dice(expression: str | None) -> DiceFormula | None:
    """Find the first ``NdM[+/-K]`` group in an expression.

    Trailing text such as a damage type is ignored, so '1d6+2 slashing'
    parses as 1d6+2.

    Args:
        expression: Damage text.

    Returns:
        The parsed formula, or None when no dice group is present.
    """
    if not expression:
        return None

    match = _DICE_PATTERN.search(expression)
    if match is None:
        return None

    num_dice, die_size, sign, flat = match.groups()
    modifier = int(flat) * (-1 if sign == "-" else 1) if flat else 0
    return DiceFormula(num_dice=int(num_dice), die_size=int(die_size), modifier=modifier)


def average_damage(expression: str | None) -> float:
    """Average of a damage expression, or 0 when it has no dice."""
    formula = parse_dice(expression)
    return formula.average if formula else 0.0


def scale_to_target(target_average: float) -> str:
    """Synthesize plain dice whose average lands near a target.

    Die sizes are tried smallest first; the first whose best dice count
    lands within half a die's average of the target wins. When none
    qualify the result falls back to d6s.

    Args:
        target_average: Desired average damage.

    Returns:
        Dice expression such as '2d4' or '3d8'.

    Example:
        >>> scale_to_target(7.0)
        '3d4'
    """
    for die_size in DIE_SIZES:
        average_per_die = (die_size + 1) / 2
        num_dice = max(1, round_half_up(target_average / average_per_die))
        if abs(num_dice * average_per_die - target_average) <= average_per_die / 2:
            return format_dice(num_dice, die_size)

    average_per_die = (FALLBACK_DIE_SIZE + 1) / 2
    num_dice = max(1, round_half_up(target_average / average_per_die))
    return format_dice(num_dice, FALLBACK_DIE_SIZE)


def scale_existing(expression: str, factor: float) -> str:
    """Rescale an existing expression while keeping its die size.

    The dice count is recomputed for ``average * factor``; any leftover of
    at least one point becomes a flat modifier. One die fewer is also
    tried and whichever lands closer to the target wins, ties going to the
    higher average. Between them the two counts reach every half-point
    average, so a larger factor never yields a smaller average.

    Args:
        expression: Source damage expression.
        factor: Multiplier applied to the source average.

    Returns:
        Rescaled dice expression, or the input unchanged when it has no dice.

    Example:
        >>> scale_existing("1d8+2", 2.0)
        '2d8+4'
    """
    formula = parse_dice(expression)
    if formula is None:
        logger.warning("Cannot rescale damage without dice", expression=expression)
        return expression

    target_average = formula.average * factor
    average_per_die = formula.average_per_die
    num_dice = max(1, round_half_up((target_average - formula.modifier) / average_per_die))

    candidates = [
        DiceFormula(
            num_dice=count,
            die_size=formula.die_size,
            modifier=round_half_up(target_average - count * average_per_die),
        )
        for count in (num_dice, num_dice - 1)
        if count >= 1
    ]
    best = min(
        candidates,
        key=lambda candidate: (abs(candidate.average - target_average), -candidate.average),
    )
    return str(best)


__all__ = [
    "DiceFormula",
    "format_dice",
    "parse_dice",
    "average_damage",
    "scale_to_target",
    "scale_existing",
    "round_half_up",
]
