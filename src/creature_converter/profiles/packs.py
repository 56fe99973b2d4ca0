"""System pack registry.

A system pack describes the output format a converted card is exported
under: its display name, the licence of any data it ships, the
attribution that licence requires, and the disclaimer stamped into
exports. Packs carry no rules text; the numeric targets live in the
conversion profiles.
"""

from __future__ import annotations

from datetime import UTC, datetime
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

from creature_converter.core.logging import get_logger
from creature_converter.models.creature import ProvenanceBlock
from creature_converter.models.enums import LicenseType


logger = get_logger(__name__)


DEFAULT_DISCLAIMER = (
    "Creature Converter is an independent product. Not affiliated with "
    "The Arcane Library, LLC, Wizards of the Coast, or any other publisher."
)

SRD_ATTRIBUTION = (
    "This content derives from the System Reference Document 5.1 by Wizards of the Coast LLC, "
    "available at https://dnd.wizards.com/resources/systems-reference-document. "
    "Licensed under CC-BY 4.0 (https://creativecommons.org/licenses/by/4.0/)."
)

SHADOWDARK_DISCLAIMER = (
    "Compatibility profile for use with Shadowdark RPG. "
    "Creature Converter is an independent production and is not affiliated with "
    "The Arcane Library, LLC. This output does not reproduce Shadowdark RPG rules text."
)


class SystemPack(BaseModel):
    """Read-only description of an output system pack.

    Attributes:
        id: Pack identifier.
        display_name: Name shown to users.
        description: One-line description.
        license_type: Licence of the pack's data.
        attribution_text: Attribution that must appear in exports.
        license_source: Where the licensed data comes from.
        disclaimer: Independence disclaimer for exports.
        requires_user_reference: Whether output must be verified against
            a reference stat block the user owns.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    display_name: str
    description: str = ""
    license_type: LicenseType
    attribution_text: str | None = None
    license_source: str | None = None
    disclaimer: str = DEFAULT_DISCLAIMER
    requires_user_reference: bool = False


OSR_GENERIC_PACK = SystemPack(
    id="osr_generic",
    display_name="OSR Generic",
    description="Heuristic conversion targeting B/X / OSE-style stat cards. No embedded proprietary data.",
    license_type=LicenseType.INTERNAL,
)

DND5E_SRD_PACK = SystemPack(
    id="dnd5e_srd",
    display_name="D&D 5e (SRD)",
    description="Conversion labelled against SRD 5.1 data (CC BY 4.0).",
    license_type=LicenseType.CC_BY_4_0,
    attribution_text=SRD_ATTRIBUTION,
    license_source="https://dnd.wizards.com/resources/systems-reference-document",
)

SHADOWDARK_VERIFY_PACK = SystemPack(
    id="shadowdark_private_verify",
    display_name="For use with Shadowdark RPG (verify)",
    description=(
        "Compatibility stat card tuned for Shadowdark RPG. Paste your own reference "
        "stat block to verify accuracy. No Shadowdark content is embedded."
    ),
    license_type=LicenseType.USER_PROVIDED,
    disclaimer=SHADOWDARK_DISCLAIMER,
    requires_user_reference=True,
)

DEFAULT_PACK_ID = OSR_GENERIC_PACK.id

SYSTEM_PACKS: Mapping[str, SystemPack] = MappingProxyType(
    {
        pack.id: pack
        for pack in (OSR_GENERIC_PACK, DND5E_SRD_PACK, SHADOWDARK_VERIFY_PACK)
    }
)


def is_registered_pack(pack_id: str | None) -> bool:
    """Check whether a pack id is in the registry."""
    return pack_id is not None and pack_id in SYSTEM_PACKS


def get_pack(pack_id: str | None) -> SystemPack:
    """Look up a system pack, falling back to OSR Generic.

    Args:
        pack_id: Pack identifier.

    Returns:
        The matching pack, or the default pack.
    """
    pack = SYSTEM_PACKS.get(pack_id) if pack_id else None
    if pack is None:
        if pack_id:
            logger.warning("Unknown system pack, using default", pack_id=pack_id, default=DEFAULT_PACK_ID)
        return SYSTEM_PACKS[DEFAULT_PACK_ID]
    return pack


def list_packs() -> list[SystemPack]:
    """All registered packs, default first."""
    return list(SYSTEM_PACKS.values())


def build_provenance(pack_id: str | None, generated_at: datetime | None = None) -> ProvenanceBlock:
    """Build the export provenance block for a pack.

    Args:
        pack_id: Pack that produced the card; unknown ids use the default pack.
        generated_at: Generation time; defaults to now (UTC).

    Returns:
        Provenance block with the pack's licence, attribution and disclaimer.
    """
    pack = get_pack(pack_id)
    return ProvenanceBlock(
        pack_id=pack.id,
        pack_display_name=pack.display_name,
        license_type=pack.license_type,
        attribution_text=pack.attribution_text,
        disclaimer=pack.disclaimer,
        generated_at=generated_at or datetime.now(UTC),
    )


__all__ = [
    "SystemPack",
    "SYSTEM_PACKS",
    "DEFAULT_PACK_ID",
    "DEFAULT_DISCLAIMER",
    "SRD_ATTRIBUTION",
    "SHADOWDARK_DISCLAIMER",
    "get_pack",
    "is_registered_pack",
    "list_packs",
    "build_provenance",
]
