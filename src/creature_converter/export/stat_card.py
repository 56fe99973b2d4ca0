"""Plain-text and JSON export of converted stat cards.

Everything here renders from ``OutputCreatureData`` alone; nothing is
re-converted. The JSON payload is the card itself plus a provenance
block and a small metadata block describing how it was tuned.
"""

from __future__ import annotations

import json
import re
from datetime import datetime
from typing import Any

from creature_converter.core.logging import get_logger
from creature_converter.models.creature import Attack, OutputCreatureData
from creature_converter.models.enums import LicenseType
from creature_converter.profiles.packs import SHADOWDARK_VERIFY_PACK, build_provenance


logger = get_logger(__name__)

BULLET = "•"

ATTRIBUTION_HEADER = (
    "[Your Product Name] uses content converted via Creature Converter.",
    "",
    "Creature Converter is an independent production and is not affiliated with The Arcane Library, LLC.",
)

SHADOWDARK_LICENSE_NOTE = (
    "If your product uses Shadowdark RPG content, you must include appropriate "
    "attribution per the Shadowdark RPG Third-Party License."
)


def _attack_line(attack: Attack) -> str:
    line = f"{BULLET} {attack.name}"
    if attack.bonus is not None:
        line += f" {attack.bonus:+d}"
    if attack.damage:
        line += f" ({attack.damage})"
    return line


def format_stat_card(output: OutputCreatureData) -> str:
    """Render a converted card as plain text.

    Args:
        output: Converted stat card.

    Returns:
        Multi-line text with the name, core stats, attacks and any saves,
        traits, special actions and loot.

    Example:
        >>> print(format_stat_card(output))
        GOBLIN
        AC 12 | HP 5 | Move 30 ft.
        Morale 7 | Threat Tier 1
        ...
    """
    lines = [
        output.name.upper(),
        f"AC {output.ac} | HP {output.hp} | Move {output.movement}",
    ]
    if output.show_morale:
        lines.append(f"Morale {output.morale} | Threat Tier {output.threat_tier}")
    else:
        lines.append(f"Threat Tier {output.threat_tier}")

    lines.extend(["", "ATTACKS:"])
    lines.extend(_attack_line(attack) for attack in output.attacks)

    if output.saves:
        lines.extend(["", f"SAVES: {output.saves}"])

    if output.traits:
        lines.extend(["", "TRAITS:"])
        lines.extend(f"{BULLET} {trait}" for trait in output.traits)

    if output.special_actions:
        lines.extend(["", "SPECIAL ACTIONS:"])
        for action in output.special_actions:
            line = f"{BULLET} {action.name}"
            if action.recharge:
                line += f" ({action.recharge})"
            lines.append(line)
            if action.description:
                lines.append(f"  {action.description}")

    if output.loot_notes:
        lines.extend(["", f"LOOT: {output.loot_notes}"])

    return "\n".join(lines)


def build_attribution(output: OutputCreatureData) -> str:
    """Attribution template for products that publish the card.

    CC-BY packs append their required attribution; the Shadowdark verify
    pack appends the third-party licence reminder.
    """
    lines = list(ATTRIBUTION_HEADER)
    provenance = output.provenance or build_provenance(output.output_pack_id)
    if provenance.license_type == LicenseType.CC_BY_4_0 and provenance.attribution_text:
        lines.extend(["", "Data attribution:", provenance.attribution_text])
    if output.output_pack_id == SHADOWDARK_VERIFY_PACK.id:
        lines.extend(["", SHADOWDARK_LICENSE_NOTE])
    return "\n".join(lines)


def build_export_payload(
    output: OutputCreatureData,
    generated_at: datetime | None = None,
) -> dict[str, Any]:
    """JSON-ready export of a converted card.

    Args:
        output: Converted stat card.
        generated_at: Timestamp for a freshly built provenance block; the
            card's own provenance is used when it has one.

    Returns:
        The card's fields plus ``_provenance`` and ``_meta``.
    """
    payload = output.model_dump(mode="json")
    provenance = output.provenance or build_provenance(output.output_pack_id, generated_at)
    tuning = output.tuning

    payload["_provenance"] = provenance.model_dump(mode="json")
    payload["_meta"] = {
        "conversion_profile_id": tuning.profile_id if tuning else None,
        "tier": output.threat_tier,
        "role": tuning.role.value if tuning else None,
        "tuning": tuning.model_dump(mode="json") if tuning else None,
    }
    return payload


def export_json(
    output: OutputCreatureData,
    generated_at: datetime | None = None,
    *,
    indent: int = 2,
) -> str:
    """Serialize the export payload to JSON text."""
    payload = build_export_payload(output, generated_at)
    logger.debug("Stat card exported", name=output.name, pack_id=payload["_provenance"]["pack_id"])
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def export_filename(output: OutputCreatureData, extension: str = "json") -> str:
    """File name for an exported card (e.g., 'hill-giant.json')."""
    slug = re.sub(r"\s+", "-", output.name.strip().lower()) or "creature"
    return f"{slug}.{extension}"


__all__ = [
    "format_stat_card",
    "build_attribution",
    "build_export_payload",
    "export_json",
    "export_filename",
]
