"""Enumeration types for the creature converter.

This module defines the closed identifier sets used throughout the
conversion pipeline: source systems, creature roles, band statuses and the
legacy output-profile labels kept for older persisted entries.
"""

from __future__ import annotations

from enum import StrEnum


class SourceSystem(StrEnum):
    """Rules system a source stat block was written for."""

    DND_5E = "5e"
    BX = "bx"
    OSE = "ose"
    OTHER = "other"


class CreatureRole(StrEnum):
    """Combat archetype whose multipliers bias a tier's base targets.

    Skirmisher is the default when no role is given.
    """

    BRUTE = "brute"
    SKIRMISHER = "skirmisher"
    CASTER = "caster"
    BOSS = "boss"
    MINION = "minion"
    SUPPORT = "support"

    @property
    def display_name(self) -> str:
        """Get the capitalized role name.

        Returns:
            Role name for display (e.g., 'Brute').
        """
        return self.value.capitalize()


class LegacyOutputProfile(StrEnum):
    """Output-profile labels stored on entries created before profile ids."""

    DUSKWARDEN_DEFAULT = "duskwarden_default"
    OSR_GENERIC = "osr_generic"
    SHADOWDARK_COMPATIBLE = "shadowdark_compatible"


class LicenseType(StrEnum):
    """Licence attached to the data a system pack ships."""

    CC_BY_4_0 = "CC-BY-4.0"
    USER_PROVIDED = "UserProvided"
    INTERNAL = "Internal"


class BandStatus(StrEnum):
    """Where a converted value sits relative to its target band."""

    PASS = "pass"
    HIGH = "high"
    LOW = "low"


class BandField(StrEnum):
    """Stat-card fields checked by band validation, in report order."""

    AC = "AC"
    HP = "HP"
    ATTACK_BONUS = "Attack Bonus"
    DPR = "DPR"


class FieldMatchStatus(StrEnum):
    """Outcome of comparing one converted field to a reference stat block."""

    MATCH = "match"
    MISMATCH = "mismatch"
    MISSING = "missing"


class EntryType(StrEnum):
    """Kinds of library entries."""

    CREATURE = "creature"
    ADVENTURE_NOTE = "adventure_note"


__all__ = [
    "SourceSystem",
    "CreatureRole",
    "LegacyOutputProfile",
    "LicenseType",
    "BandStatus",
    "BandField",
    "FieldMatchStatus",
    "EntryType",
]
