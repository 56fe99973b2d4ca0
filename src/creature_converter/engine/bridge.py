"""Translation of legacy and unrecognized identifiers.

Older entries store an ``output_profile`` label instead of a conversion
profile id, and any stored role or pack id may no longer exist. These
helpers map every such value onto a current canonical identifier so the
conversion engine never sees anything else.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from creature_converter.core.logging import get_logger
from creature_converter.models.enums import CreatureRole, LegacyOutputProfile
from creature_converter.profiles.packs import DEFAULT_PACK_ID, is_registered_pack
from creature_converter.profiles.registry import DEFAULT_PROFILE_ID, is_registered_profile


logger = get_logger(__name__)

DEFAULT_ROLE = CreatureRole.SKIRMISHER

# Legacy output-profile label -> conversion profile id
LEGACY_PROFILE_IDS: Mapping[str, str] = MappingProxyType(
    {
        LegacyOutputProfile.SHADOWDARK_COMPATIBLE: "shadowdark_compatible_v1",
        LegacyOutputProfile.OSR_GENERIC: "osr_generic_v1",
        LegacyOutputProfile.DUSKWARDEN_DEFAULT: "osr_generic_v1",
    }
)

# Conversion profile id -> legacy output-profile label
PROFILE_LEGACY_LABELS: Mapping[str, LegacyOutputProfile] = MappingProxyType(
    {
        "shadowdark_compatible_v1": LegacyOutputProfile.SHADOWDARK_COMPATIBLE,
        "osr_generic_v1": LegacyOutputProfile.OSR_GENERIC,
    }
)


def resolve_profile_id(
    conversion_profile_id: str | None,
    output_profile: str | None = None,
) -> str:
    """Resolve the conversion profile id for a set of settings.

    A registered explicit id wins. An explicit id that is really a legacy
    label is translated, then the legacy ``output_profile`` field is
    tried, and anything else falls back to the default profile.

    Args:
        conversion_profile_id: Explicit profile id from the settings.
        output_profile: Legacy output-profile label.

    Returns:
        A registered conversion profile id.
    """
    if is_registered_profile(conversion_profile_id):
        return conversion_profile_id  # type: ignore[return-value]

    for candidate in (conversion_profile_id, output_profile):
        if candidate and candidate in LEGACY_PROFILE_IDS:
            return LEGACY_PROFILE_IDS[candidate]

    if conversion_profile_id or output_profile:
        logger.warning(
            "Unrecognized profile identifiers, using default",
            conversion_profile_id=conversion_profile_id,
            output_profile=output_profile,
            default=DEFAULT_PROFILE_ID,
        )
    return DEFAULT_PROFILE_ID


def resolve_role(value: str | CreatureRole | None) -> CreatureRole:
    """Resolve a role name, case-insensitively, defaulting to skirmisher."""
    if value is None:
        return DEFAULT_ROLE
    try:
        return CreatureRole(str(value).strip().lower())
    except ValueError:
        logger.warning("Unknown creature role, using default", role=value, default=DEFAULT_ROLE.value)
        return DEFAULT_ROLE


def resolve_pack_id(value: str | None) -> str:
    """Resolve a system pack id, defaulting to OSR Generic."""
    if is_registered_pack(value):
        return value  # type: ignore[return-value]
    if value:
        logger.warning("Unknown system pack, using default", pack_id=value, default=DEFAULT_PACK_ID)
    return DEFAULT_PACK_ID


def legacy_output_profile(profile_id: str) -> LegacyOutputProfile:
    """Legacy output-profile label stored alongside a converted card."""
    return PROFILE_LEGACY_LABELS.get(profile_id, LegacyOutputProfile.DUSKWARDEN_DEFAULT)


__all__ = [
    "DEFAULT_ROLE",
    "LEGACY_PROFILE_IDS",
    "PROFILE_LEGACY_LABELS",
    "resolve_profile_id",
    "resolve_role",
    "resolve_pack_id",
    "legacy_output_profile",
]
