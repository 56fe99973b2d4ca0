"""Pydantic V2 schemas for the creature converter.

Submodules:
    enums: Identifier sets (SourceSystem, CreatureRole, BandStatus, etc.)
    creature: Parsed creatures, converted stat cards and tuning metadata
    profile: Conversion profile tables
    settings: User tuning settings
    reports: Parse results and validation reports
    entry: Persisted library entry shape

Example:
    >>> from creature_converter.models import Attack, ParsedCreatureData
    >>> parsed = ParsedCreatureData(name="Goblin", hp=7, attacks=[Attack(name="Scimitar")])
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from creature_converter.models.enums import (
    BandField,
    BandStatus,
    CreatureRole,
    EntryType,
    FieldMatchStatus,
    LegacyOutputProfile,
    LicenseType,
    SourceSystem,
)

# =============================================================================
# Creature Records
# =============================================================================
from creature_converter.models.creature import (
    Attack,
    ConversionTuning,
    OutputCreatureData,
    ParsedCreatureData,
    ProvenanceBlock,
    SpecialAction,
    TargetSet,
    ThreatTier,
    TuningProvenance,
)

# =============================================================================
# Profiles, Settings, Reports
# =============================================================================
from creature_converter.models.profile import (
    ConversionProfile,
    RoleModifiers,
    TierTargets,
    Tolerance,
)
from creature_converter.models.settings import ConversionSettings
from creature_converter.models.reports import (
    BandResult,
    BandValidationReport,
    FieldDiff,
    ParseResult,
    ReferenceReport,
)
from creature_converter.models.entry import Entry


__all__ = [
    # Enums
    "BandField",
    "BandStatus",
    "CreatureRole",
    "EntryType",
    "FieldMatchStatus",
    "LegacyOutputProfile",
    "LicenseType",
    "SourceSystem",
    # Creature records
    "Attack",
    "ConversionTuning",
    "OutputCreatureData",
    "ParsedCreatureData",
    "ProvenanceBlock",
    "SpecialAction",
    "TargetSet",
    "ThreatTier",
    "TuningProvenance",
    # Profiles
    "ConversionProfile",
    "RoleModifiers",
    "TierTargets",
    "Tolerance",
    # Settings
    "ConversionSettings",
    # Reports
    "BandResult",
    "BandValidationReport",
    "FieldDiff",
    "ParseResult",
    "ReferenceReport",
    # Persistence
    "Entry",
]
