"""Export rendering for converted stat cards."""

from __future__ import annotations

from creature_converter.export.stat_card import (
    build_attribution,
    build_export_payload,
    export_filename,
    export_json,
    format_stat_card,
)


__all__ = [
    "format_stat_card",
    "build_attribution",
    "build_export_payload",
    "export_json",
    "export_filename",
]
