"""Application-wide constants for the creature converter.

This module defines the fixed limits and defaults used by the parser,
the conversion engine and the validators.
"""

from __future__ import annotations

# =============================================================================
# Tuning Sliders
# =============================================================================

MIN_MULTIPLIER = 0.5
"""Lowest accepted deadliness/durability multiplier."""

MAX_MULTIPLIER = 2.0
"""Highest accepted deadliness/durability multiplier."""

MIN_TARGET_LEVEL = 0
"""Lowest explicit target level."""

MAX_TARGET_LEVEL = 20
"""Highest explicit target level."""

# =============================================================================
# Threat Tiers
# =============================================================================

MIN_TIER = 1
MAX_TIER = 5
THREAT_TIERS = (1, 2, 3, 4, 5)

LEVEL_TIER_THRESHOLDS = ((2, 1), (4, 2), (7, 3), (12, 4))
"""(max level, tier) pairs; levels above the last bound are tier 5."""

HP_TIER_THRESHOLDS = ((8, 1), (20, 2), (40, 3), (80, 4))
"""(max HP, tier) pairs; HP above the last bound is tier 5."""

DEFAULT_INFERENCE_HP = 10
"""HP assumed for tier inference when the source has no hit points."""

# =============================================================================
# Parser Limits
# =============================================================================

MAX_PARSED_ATTACKS = 5
MAX_PARSED_SPECIAL_ACTIONS = 5
MAX_ACTION_NAME_LENGTH = 50
MAX_SAVES_LENGTH = 100

MIN_AC = 0
MAX_AC = 30
MIN_HP = 1
MAX_HP = 1000

DEFAULT_MOVEMENT = "30 ft"
UNKNOWN_CREATURE_NAME = "Unknown Creature"
SUCCESS_CONFIDENCE = 0.3

# =============================================================================
# Conversion Budget
# =============================================================================

MAX_CONVERTED_ATTACKS = 3
"""Source attacks beyond this count are dropped."""

MAX_CONVERTED_SPECIAL_ACTIONS = 3

PRIMARY_DPR_SHARE = 0.6
"""Share of the DPR budget given to the first attack when there are several."""

UNNAMED_CREATURE_NAME = "Unnamed Creature"
SYNTHESIZED_ATTACK_NAME = "Attack"

DIE_SIZES = (4, 6, 8, 10, 12)
"""Die sizes tried, smallest first, when synthesizing damage dice."""

FALLBACK_DIE_SIZE = 6


__all__ = [
    "MIN_MULTIPLIER",
    "MAX_MULTIPLIER",
    "MIN_TARGET_LEVEL",
    "MAX_TARGET_LEVEL",
    "MIN_TIER",
    "MAX_TIER",
    "THREAT_TIERS",
    "LEVEL_TIER_THRESHOLDS",
    "HP_TIER_THRESHOLDS",
    "DEFAULT_INFERENCE_HP",
    "MAX_PARSED_ATTACKS",
    "MAX_PARSED_SPECIAL_ACTIONS",
    "MAX_ACTION_NAME_LENGTH",
    "MAX_SAVES_LENGTH",
    "MIN_AC",
    "MAX_AC",
    "MIN_HP",
    "MAX_HP",
    "DEFAULT_MOVEMENT",
    "UNKNOWN_CREATURE_NAME",
    "SUCCESS_CONFIDENCE",
    "MAX_CONVERTED_ATTACKS",
    "MAX_CONVERTED_SPECIAL_ACTIONS",
    "PRIMARY_DPR_SHARE",
    "UNNAMED_CREATURE_NAME",
    "SYNTHESIZED_ATTACK_NAME",
    "DIE_SIZES",
    "FALLBACK_DIE_SIZE",
]
