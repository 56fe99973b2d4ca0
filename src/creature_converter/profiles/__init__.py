"""Read-only reference data: conversion profiles and system packs.

Submodules:
    osr_generic: OSR Generic conversion profile
    shadowdark_compatible: Lean Shadowdark-compatible conversion profile
    registry: Profile lookup and effective target resolution
    packs: Output system packs and export provenance
"""

from __future__ import annotations

from creature_converter.profiles.packs import (
    SYSTEM_PACKS,
    SystemPack,
    build_provenance,
    get_pack,
    is_registered_pack,
    list_packs,
)
from creature_converter.profiles.registry import (
    CONVERSION_PROFILES,
    DEFAULT_PROFILE_ID,
    get_effective_targets,
    get_profile,
    is_registered_profile,
    list_profiles,
)


__all__ = [
    # Profiles
    "CONVERSION_PROFILES",
    "DEFAULT_PROFILE_ID",
    "get_profile",
    "get_effective_targets",
    "is_registered_profile",
    "list_profiles",
    # Packs
    "SYSTEM_PACKS",
    "SystemPack",
    "get_pack",
    "is_registered_pack",
    "list_packs",
    "build_provenance",
]
