"""Stat-block ingestion: free text to structured creature records.

Submodules:
    statblock: Field extractors and the ``parse`` entry point
    attacks: Ordered attack-line extractor strategies
"""

from __future__ import annotations

from creature_converter.ingestion.attacks import (
    ATTACK_EXTRACTORS,
    AttackExtractor,
    extract_attacks,
)
from creature_converter.ingestion.statblock import parse


__all__ = [
    "parse",
    "extract_attacks",
    "AttackExtractor",
    "ATTACK_EXTRACTORS",
]
