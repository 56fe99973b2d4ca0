"""Best-effort extraction of creature fields from stat-block text.

The parser is a set of ordered regex heuristics, not a language
understanding system. Every field is optional: a field that cannot be
found produces a warning and stays empty (movement alone falls back to a
default), and the overall result carries a confidence score instead of
ever raising for malformed text.

Example:
    >>> from creature_converter.ingestion.statblock import parse
    >>> result = parse("Goblin\\nAC 15\\nHP 7\\nSpeed 30 ft.")
    >>> result.data.ac
    15
"""

from __future__ import annotations

import re

from creature_converter.core.constants import (
    DEFAULT_MOVEMENT,
    MAX_AC,
    MAX_ACTION_NAME_LENGTH,
    MAX_HP,
    MAX_PARSED_SPECIAL_ACTIONS,
    MAX_SAVES_LENGTH,
    MIN_AC,
    MIN_HP,
    SUCCESS_CONFIDENCE,
    UNKNOWN_CREATURE_NAME,
)
from creature_converter.core.logging import get_logger
from creature_converter.ingestion.attacks import extract_attacks
from creature_converter.models.creature import ParsedCreatureData, SpecialAction
from creature_converter.models.enums import SourceSystem
from creature_converter.models.reports import ParseResult


logger = get_logger(__name__)


# =============================================================================
# Patterns
# =============================================================================

# Markdown emphasis that may close a bold or italic label
_EMPHASIS = r"[*_]*"

# A whole number of at most four digits; longer digit runs never match
_NUMBER = r"(?<!\d)(\d{1,4})(?!\d)"

AC_PATTERNS = (
    re.compile(r"\bAC\b" + _EMPHASIS + r"[ \t]*[:=]?[ \t]*" + _NUMBER, re.IGNORECASE),
    re.compile(r"Armor\s*Class" + _EMPHASIS + r"\s*[:=]?\s*" + _NUMBER, re.IGNORECASE),
    re.compile(r"\bAC\s+" + _NUMBER, re.IGNORECASE),
    re.compile(r"Defense" + _EMPHASIS + r"\s*[:=]?\s*" + _NUMBER, re.IGNORECASE),
)

HP_PATTERNS = (
    re.compile(r"\bHP\b" + _EMPHASIS + r"[ \t]*[:=]?[ \t]*" + _NUMBER, re.IGNORECASE),
    re.compile(r"Hit\s*Points?" + _EMPHASIS + r"\s*[:=]?\s*" + _NUMBER, re.IGNORECASE),
    re.compile(_NUMBER + r"[ \t]*(?:hit\s*points?|hp\b)", re.IGNORECASE),
    re.compile(r"\bHD" + _EMPHASIS + r"[ \t]*[:=]?[ \t]*(?<!\d)(\d{1,4})d", re.IGNORECASE),
)

ANY_DICE_PATTERN = re.compile(r"(?<!\d)(\d{1,4})d(\d{1,4})(?!\d)")

MOVEMENT_PATTERNS = (
    re.compile(
        r"Speed" + _EMPHASIS + r"[ \t]*[:=]?[ \t]*([\w \t,.]+(?:ft\.?|feet|'))",
        re.IGNORECASE,
    ),
    re.compile(
        r"Movement" + _EMPHASIS + r"[ \t]*[:=]?[ \t]*([\w \t,.]+(?:ft\.?|feet|'))",
        re.IGNORECASE,
    ),
    re.compile(
        r"\bMove" + _EMPHASIS + r"[ \t]*[:=]?[ \t]*(\d+(?:[ \t]*(?:ft\.?|feet|'))?)",
        re.IGNORECASE,
    ),
    re.compile(r"(\d+)[ \t]*(?:ft\.?|feet|')[ \t]*(?:speed|move|movement)", re.IGNORECASE),
)

_RATING = r"(?<!\d)(\d{1,4}(?:/\d{1,4})?)(?![\d/])"

CR_PATTERNS = (
    re.compile(r"\bCR" + _EMPHASIS + r"[ \t]*[:=]?[ \t]*" + _RATING, re.IGNORECASE),
    re.compile(
        r"Challenge[ \t]*(?:Rating)?" + _EMPHASIS + r"[ \t]*[:=]?[ \t]*" + _RATING,
        re.IGNORECASE,
    ),
    re.compile(r"\bLevel" + _EMPHASIS + r"[ \t]*[:=]?[ \t]*" + _NUMBER, re.IGNORECASE),
)

LEVEL_PATTERN = re.compile(r"\bLevel" + _EMPHASIS + r"[ \t]*[:=]?[ \t]*" + _NUMBER, re.IGNORECASE)
HIT_DICE_PATTERN = re.compile(_NUMBER + r"[ \t]*HD\b", re.IGNORECASE)

SAVES_PATTERNS = (
    re.compile(
        r"Saving[ \t]*Throws?" + _EMPHASIS + r"[ \t]*[:=]?[ \t]*([A-Za-z \t+,\d-]+)",
        re.IGNORECASE,
    ),
    re.compile(r"\bSaves?\b" + _EMPHASIS + r"[ \t]*[:=]?[ \t]*([A-Za-z \t+,\d-]+)", re.IGNORECASE),
)

BOLD_ACTION_PATTERN = re.compile(
    r"\*\*(?P<name>[^*]+)\*\*[ \t]*(?:\((?P<paren>[^)]+)\))?[ \t]*[.:]?[ \t]*"
    r"(?P<description>[^*\n]+(?:\n(?![*\n])[^\n]+)*)"
)
LINE_ACTION_PATTERN = re.compile(
    r"^(?P<name>[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*)[ \t]*(?:\((?P<paren>[^)]+)\))?[.:]?[ \t]+"
    r"(?P<description>.+)$",
    re.MULTILINE,
)
INLINE_PARENTHETICAL_PATTERN = re.compile(r"^(?P<name>.+?)\s*\((?P<paren>[^)]+)\)$")
RECHARGE_PATTERN = re.compile(r"Recharge\s*(\d+[-–]\d+|\d+)", re.IGNORECASE)
ATTACK_LINE_PATTERN = re.compile(r"to\s+hit|weapon\s+attack", re.IGNORECASE)

# Names that are stat-block section labels rather than abilities
SECTION_HEADERS = frozenset(
    {
        "actions",
        "reactions",
        "traits",
        "legendary actions",
        "lair actions",
        "bonus actions",
        "armor class",
        "hit points",
        "hit dice",
        "saving throws",
        "damage resistances",
        "damage immunities",
        "damage vulnerabilities",
        "condition immunities",
        "melee attack",
        "ranged attack",
        "speed",
        "challenge",
        "abilities",
        "str",
        "dex",
        "con",
        "int",
        "wis",
        "cha",
        "description",
    }
)

# First words that mark a labelled stat line (e.g., 'Skills Stealth +6')
LABEL_WORDS = frozenset(
    {
        "senses",
        "languages",
        "skills",
        "speed",
        "movement",
        "move",
        "challenge",
        "level",
        "morale",
        "alignment",
        "proficiency",
        "tiny",
        "small",
        "medium",
        "large",
        "huge",
        "gargantuan",
    }
)

CONFIDENCE_MAX_SCORE = 6.0


# =============================================================================
# Field Extractors
# =============================================================================


def extract_name(first_line: str) -> str:
    """Clean the first line into a creature name.

    Strips heading markers, a trailing parenthetical and surrounding
    emphasis markers.
    """
    name = re.sub(r"^#+\s*", "", first_line)
    name = re.sub(r"\s*\([^)]+\)\s*$", "", name)
    name = re.sub(r"^\*+|\*+$", "", name)
    return name.strip() or UNKNOWN_CREATURE_NAME


def _first_in_range(
    text: str,
    patterns: tuple[re.Pattern[str], ...],
    low: int,
    high: int,
) -> int | None:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            value = int(match.group(1))
            if low <= value <= high:
                return value
    return None


def extract_ac(text: str) -> int | None:
    """Armor class between 0 and 30 from the first matching label."""
    return _first_in_range(text, AC_PATTERNS, MIN_AC, MAX_AC)


def extract_hp(text: str) -> int | None:
    """Hit points between 1 and 1000.

    Falls back to the average of the first ``NdM`` group anywhere in the
    text when no labelled value is found.
    """
    hp = _first_in_range(text, HP_PATTERNS, MIN_HP, MAX_HP)
    if hp is not None:
        return hp

    dice = ANY_DICE_PATTERN.search(text)
    if dice:
        count, sides = int(dice.group(1)), int(dice.group(2))
        return count * (sides + 1) // 2
    return None


def extract_movement(text: str) -> str | None:
    """Movement text; a bare number gets ' ft' appended."""
    for pattern in MOVEMENT_PATTERNS:
        match = pattern.search(text)
        if match:
            movement = match.group(1).strip()
            if movement.isdigit():
                movement = f"{movement} ft"
            return movement
    return None


def extract_cr(text: str) -> str | None:
    """Challenge rating text, fractions preserved (e.g., '1/4')."""
    for pattern in CR_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def extract_level(text: str, cr: str | None) -> int | None:
    """Numeric level from the CR, or from 'Level N' / 'N HD' text.

    Fractional CRs of 1/4 or less are level 0; every other fraction is
    level 1.
    """
    if cr:
        if "/" in cr:
            numerator, denominator = (int(part) for part in cr.split("/", 1))
            if denominator > 0 and numerator / denominator <= 0.25:
                return 0
            return 1
        return int(cr)

    for pattern in (LEVEL_PATTERN, HIT_DICE_PATTERN):
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    return None


def _is_header(name: str) -> bool:
    lowered = name.lower()
    return lowered in SECTION_HEADERS or lowered.split()[0] in LABEL_WORDS


def extract_special_actions(text: str) -> list[SpecialAction]:
    """Named abilities from bold markers or 'Name (note): text' lines.

    Section labels, over-long names and attack lines are rejected, and
    a 'Recharge N' or 'Recharge N-M' token is split into its own field.
    """
    actions: list[SpecialAction] = []
    seen: set[str] = set()

    for pattern in (BOLD_ACTION_PATTERN, LINE_ACTION_PATTERN):
        for match in pattern.finditer(text):
            name = match["name"].strip().rstrip(".:").strip()
            description = (match["description"] or "").strip()
            parenthetical = (match["paren"] or "").strip()

            # '**Fire Breath (Recharge 5-6).**' keeps the note inside the bold
            inline = INLINE_PARENTHETICAL_PATTERN.match(name)
            if inline and not parenthetical:
                name, parenthetical = inline["name"], inline["paren"]

            if not name or len(name) > MAX_ACTION_NAME_LENGTH:
                continue
            # 'Legendary Actions' also matches as name 'Legendary' + text 'Actions'
            if _is_header(name) or _is_header(f"{name} {description}"):
                continue
            if ATTACK_LINE_PATTERN.search(description):
                continue
            if name.lower() in seen:
                continue

            recharge = RECHARGE_PATTERN.search(parenthetical) or RECHARGE_PATTERN.search(description)
            seen.add(name.lower())
            actions.append(
                SpecialAction(
                    name=name,
                    description=description,
                    recharge=f"Recharge {recharge.group(1)}" if recharge else None,
                )
            )

    return actions[:MAX_PARSED_SPECIAL_ACTIONS]


def extract_saves(text: str) -> str | None:
    """Saving throw text, truncated to 100 characters."""
    for pattern in SAVES_PATTERNS:
        match = pattern.search(text)
        if match:
            saves = match.group(1).strip()[:MAX_SAVES_LENGTH]
            if saves:
                return saves
    return None


def calculate_confidence(data: ParsedCreatureData) -> float:
    """Weighted share of the signals that were found, between 0 and 1."""
    score = 0.0
    if data.name and data.name != UNKNOWN_CREATURE_NAME:
        score += 1
    if data.ac is not None:
        score += 1
    if data.hp is not None:
        score += 1
    if data.movement:
        score += 0.5
    if data.attacks:
        score += 1
    if data.cr or data.level is not None:
        score += 0.5
    if data.special_actions:
        score += 0.5
    if data.saves:
        score += 0.5
    return min(1.0, score / CONFIDENCE_MAX_SCORE)


# =============================================================================
# Parser Entry Point
# =============================================================================


def _resolve_system(system_hint: SourceSystem | str | None) -> SourceSystem | None:
    if not system_hint:
        return None
    try:
        return SourceSystem(str(system_hint).lower())
    except ValueError:
        logger.warning("Unknown source system hint", system_hint=system_hint)
        return SourceSystem.OTHER


def parse(text: str, system_hint: SourceSystem | str | None = None) -> ParseResult:
    """Extract a structured creature from stat-block text.

    Args:
        text: Raw stat-block text in any common layout.
        system_hint: Source rules system, recorded on the result.

    Returns:
        The parse result. ``success`` is advisory: it is True when the
        confidence exceeds 0.3, and a failed result may still be used.
    """
    data = ParsedCreatureData(system=_resolve_system(system_hint))
    warnings: list[str] = []

    if not text or not text.strip():
        return ParseResult(success=False, data=data, confidence=0.0, warnings=["Empty text provided"])

    lines = [line.strip() for line in text.splitlines() if line.strip()]
    data.name = extract_name(lines[0])

    data.ac = extract_ac(text)
    if data.ac is None:
        warnings.append("Could not extract AC")

    data.hp = extract_hp(text)
    if data.hp is None:
        warnings.append("Could not extract HP")

    movement = extract_movement(text)
    if movement is None:
        movement = DEFAULT_MOVEMENT
        warnings.append("Could not extract movement, using default")
    data.movement = movement

    data.attacks = extract_attacks(text)
    if not data.attacks:
        warnings.append("Could not extract attacks")

    data.cr = extract_cr(text)
    data.level = extract_level(text, data.cr)
    data.special_actions = extract_special_actions(text)
    data.saves = extract_saves(text)

    confidence = calculate_confidence(data)
    logger.debug(
        "Stat block parsed",
        name=data.name,
        confidence=round(confidence, 3),
        warnings=len(warnings),
    )
    return ParseResult(
        success=confidence > SUCCESS_CONFIDENCE,
        data=data,
        confidence=confidence,
        warnings=warnings,
    )


__all__ = [
    "parse",
    "extract_name",
    "extract_ac",
    "extract_hp",
    "extract_movement",
    "extract_cr",
    "extract_level",
    "extract_special_actions",
    "extract_saves",
    "calculate_confidence",
]
