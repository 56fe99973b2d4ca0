"""Creature Converter - profile-driven stat-block conversion.

Turns free-form creature stat blocks written for one rules system into
balanced stat cards for another, and reports how closely each card sits
inside its target bands.

PIPELINE:
- Parser extracts a structured creature from text (best effort, never raises)
- Profiles define per-tier, per-role numeric targets for each output style
- Engine scales source stats and dice toward those targets
- Validators score the result against the targets or a user reference

Example:
    >>> from creature_converter import convert, get_default_settings, parse, validate_bands
    >>>
    >>> result = parse("Goblin\\nAC 15\\nHP 7\\nSpeed 30 ft.", "5e")
    >>> card = convert(result.data, get_default_settings())
    >>> report = validate_bands(card)
    >>> print(report.summary)

Modules:
    core: Configuration, logging, constants and base exceptions.
    models: Pydantic V2 schemas for creatures, profiles, settings and reports.
    ingestion: Stat-block parser and attack extractors.
    profiles: Conversion profiles and system packs.
    engine: Dice math, conversion, band and reference validation.
    export: Plain-text and JSON stat-card export.
"""

from __future__ import annotations

# Core
from creature_converter.core.config import Settings, get_settings
from creature_converter.core.exceptions import ConverterError
from creature_converter.core.logging import configure_logging, get_logger

# Models
from creature_converter.models import (
    Attack,
    BandValidationReport,
    ConversionProfile,
    ConversionSettings,
    CreatureRole,
    Entry,
    OutputCreatureData,
    ParsedCreatureData,
    ParseResult,
    SourceSystem,
    SpecialAction,
)

# Pipeline
from creature_converter.engine import (
    convert,
    determine_threat_tier,
    get_default_settings,
    validate_against_reference,
    validate_bands,
    validate_settings,
)
from creature_converter.export import export_json, format_stat_card
from creature_converter.ingestion import parse
from creature_converter.profiles import get_effective_targets, get_profile, list_profiles


__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core
    "Settings",
    "get_settings",
    "ConverterError",
    "configure_logging",
    "get_logger",
    # Models
    "Attack",
    "SpecialAction",
    "ParsedCreatureData",
    "OutputCreatureData",
    "ConversionSettings",
    "ConversionProfile",
    "CreatureRole",
    "SourceSystem",
    "ParseResult",
    "BandValidationReport",
    "Entry",
    # Pipeline
    "parse",
    "convert",
    "determine_threat_tier",
    "get_default_settings",
    "validate_settings",
    "validate_bands",
    "validate_against_reference",
    "get_profile",
    "get_effective_targets",
    "list_profiles",
    "format_stat_card",
    "export_json",
]
