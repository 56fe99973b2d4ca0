"""Conversion engine: dice math, conversion and validation.

Submodules:
    dice: Dice parsing and analytic damage scaling
    bridge: Legacy and unknown identifier translation
    conversion: Tier resolution and the ``convert`` pipeline
    bands: Band validation against profile targets
    reference: Comparison against user-supplied reference stat blocks
"""

from __future__ import annotations

from creature_converter.engine.bands import calc_dpr, validate_bands
from creature_converter.engine.bridge import (
    legacy_output_profile,
    resolve_pack_id,
    resolve_profile_id,
    resolve_role,
)
from creature_converter.engine.conversion import (
    convert,
    determine_threat_tier,
    get_default_settings,
    validate_settings,
)
from creature_converter.engine.dice import (
    DiceFormula,
    parse_dice,
    round_half_up,
    scale_existing,
    scale_to_target,
)
from creature_converter.engine.reference import parse_reference, validate_against_reference


__all__ = [
    # Dice
    "DiceFormula",
    "parse_dice",
    "scale_to_target",
    "scale_existing",
    "round_half_up",
    # Bridge
    "resolve_profile_id",
    "resolve_role",
    "resolve_pack_id",
    "legacy_output_profile",
    # Conversion
    "convert",
    "determine_threat_tier",
    "get_default_settings",
    "validate_settings",
    # Validation
    "validate_bands",
    "calc_dpr",
    "validate_against_reference",
    "parse_reference",
]
