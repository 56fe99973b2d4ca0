"""Attack extraction strategies for stat-block text.

Attack lines come in many shapes. Each shape is handled by one
independent extractor; :func:`extract_attacks` tries them in order and
keeps the result of the first extractor that finds anything. Extractors
never raise for unrecognized text, they simply return an empty list.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Iterator

from creature_converter.core.constants import MAX_PARSED_ATTACKS
from creature_converter.core.logging import get_logger
from creature_converter.models.creature import Attack


logger = get_logger(__name__)


def _compact(dice: str) -> str:
    return re.sub(r"\s+", "", dice)


# =============================================================================
# Extractor Base
# =============================================================================


class AttackExtractor(ABC):
    """One attack-line shape.

    Subclasses provide a compiled ``pattern`` and turn each match into an
    :class:`Attack`. Names repeated within one extractor's results are
    dropped, case-insensitively.
    """

    name: str
    pattern: re.Pattern[str]

    @abstractmethod
    def build(self, match: re.Match[str]) -> Attack:
        """Turn one regex match into an attack."""

    def _matches(self, text: str) -> Iterator[re.Match[str]]:
        return self.pattern.finditer(text)

    def extract(self, text: str) -> list[Attack]:
        """Find every attack of this shape in ``text``.

        Args:
            text: Full stat-block text.

        Returns:
            Attacks in source order, without case-insensitive duplicates.
        """
        attacks: list[Attack] = []
        seen: set[str] = set()
        for match in self._matches(text):
            attack = self.build(match)
            key = attack.name.lower()
            if key in seen:
                continue
            seen.add(key)
            attacks.append(attack)
        return attacks


# =============================================================================
# Extractors, most specific first
# =============================================================================


class FullWeaponAttackExtractor(AttackExtractor):
    """'Scimitar. Melee Weapon Attack: +4 to hit, reach 5 ft., one target.
    Hit: 5 (1d6 + 2) slashing damage.'"""

    name = "full_weapon_attack"
    pattern = re.compile(
        r"(?P<name>[A-Z][a-z]+(?:[ \t]+[A-Za-z]+)?)\.[*_]*[ \t]*"
        r"(?i:melee|ranged)[ \t]*(?i:weapon[ \t]*)?(?i:attack):[ \t]*"
        r"\+?(?P<bonus>\d{1,4})[ \t]*(?i:to[ \t]*hit)[^\n]*?"
        r"(?i:hit):[ \t]*\d+[ \t]*\((?P<dice>[^)]+)\)[ \t]*"
        r"(?P<type>\w+)[ \t]*(?i:damage)"
    )

    def build(self, match: re.Match[str]) -> Attack:
        return Attack(
            name=match["name"].strip(),
            bonus=int(match["bonus"]),
            damage=f"{_compact(match['dice'])} {match['type']}",
        )


class LabelledAttackExtractor(AttackExtractor):
    """'Melee Attack: Greataxe +5 to hit, 1d12+3 slashing damage'"""

    name = "labelled_attack"
    pattern = re.compile(
        r"(?:melee|ranged)[ \t]*attack:[ \t]*"
        r"(?P<name>[a-z]+(?:[ \t]+[a-z]+)?)[ \t]*"
        r"(?P<bonus>[+-]\d{1,4})[ \t]*to[ \t]*hit[, \t]+"
        r"(?P<dice>\d{1,4}d\d{1,4}(?:[ \t]*[+-][ \t]*\d{1,4})?)[ \t]*"
        r"(?P<type>\w+)?[ \t]*damage",
        re.IGNORECASE,
    )

    def build(self, match: re.Match[str]) -> Attack:
        damage = _compact(match["dice"])
        if match["type"]:
            damage = f"{damage} {match['type']}"
        return Attack(name=match["name"].strip(), bonus=int(match["bonus"]), damage=damage)


class ParenthesizedBonusExtractor(AttackExtractor):
    """'Bite (+3): 1d8+1'"""

    name = "parenthesized_bonus"
    pattern = re.compile(
        r"(?P<name>[A-Z][a-z]+(?:[ \t]+[A-Za-z]+)?)[ \t]*"
        r"\((?P<bonus>[+-]?\d{1,4})\)[: \t]+"
        r"(?P<dice>\d{1,4}d\d{1,4}(?:[ \t]*[+-][ \t]*\d{1,4})?)"
    )

    def build(self, match: re.Match[str]) -> Attack:
        return Attack(
            name=match["name"].strip(),
            bonus=int(match["bonus"]),
            damage=_compact(match["dice"]),
        )


class GenericToHitExtractor(AttackExtractor):
    """'Claw Attack: +3 to hit, Hit: 5 (1d6+2)'"""

    name = "generic_to_hit"
    pattern = re.compile(
        r"(?P<name>\w+(?:[ \t]+\w+)?)[.:]?[ \t]*"
        r"(?:melee|ranged)?[ \t]*(?:weapon[ \t]*)?attack[: \t]*"
        r"(?P<bonus>[+-]\d{1,4})[ \t]*to[ \t]*hit[^.\n]*?"
        r"hit[: \t]+\d+[ \t]*\((?P<dice>[^)]+)\)",
        re.IGNORECASE,
    )

    def build(self, match: re.Match[str]) -> Attack:
        return Attack(
            name=match["name"].strip(),
            bonus=int(match["bonus"]),
            damage=_compact(match["dice"]),
        )


class WeaponKeywordExtractor(AttackExtractor):
    """Bare weapon or natural-attack names, without bonus or damage."""

    name = "weapon_keyword"
    pattern = re.compile(
        r"\b(?P<name>scimitar|longsword|shortbow|longbow|claw|bite|slam|sword|dagger|"
        r"staff|bow|crossbow|fist|tentacle|gore|sting|mace|spear|axe|hammer|"
        r"greataxe|javelin)\b",
        re.IGNORECASE,
    )

    def build(self, match: re.Match[str]) -> Attack:
        keyword = match["name"]
        return Attack(name=keyword[0].upper() + keyword[1:])


ATTACK_EXTRACTORS: tuple[AttackExtractor, ...] = (
    FullWeaponAttackExtractor(),
    LabelledAttackExtractor(),
    ParenthesizedBonusExtractor(),
    GenericToHitExtractor(),
    WeaponKeywordExtractor(),
)


def extract_attacks(
    text: str,
    extractors: tuple[AttackExtractor, ...] = ATTACK_EXTRACTORS,
) -> list[Attack]:
    """Run the extractor cascade and keep the first non-empty result.

    Args:
        text: Full stat-block text.
        extractors: Extractors in priority order.

    Returns:
        Up to five attacks, primary first; empty when nothing matched.
    """
    for extractor in extractors:
        attacks = extractor.extract(text)
        if attacks:
            logger.debug("Attacks extracted", extractor=extractor.name, count=len(attacks))
            return attacks[:MAX_PARSED_ATTACKS]
    return []


__all__ = [
    "AttackExtractor",
    "FullWeaponAttackExtractor",
    "LabelledAttackExtractor",
    "ParenthesizedBonusExtractor",
    "GenericToHitExtractor",
    "WeaponKeywordExtractor",
    "ATTACK_EXTRACTORS",
    "extract_attacks",
]
