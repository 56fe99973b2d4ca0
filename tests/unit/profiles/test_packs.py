"""Tests for the system pack registry."""

from __future__ import annotations

from datetime import UTC, datetime

from creature_converter.models import LicenseType
from creature_converter.profiles.packs import (
    DEFAULT_DISCLAIMER,
    DEFAULT_PACK_ID,
    SRD_ATTRIBUTION,
    build_provenance,
    get_pack,
    is_registered_pack,
    list_packs,
)


class TestPacks:
    """Tests for pack lookup."""

    def test_registered_packs(self) -> None:
        """Test all three packs are registered, default first."""
        ids = [pack.id for pack in list_packs()]
        assert ids == ["osr_generic", "dnd5e_srd", "shadowdark_private_verify"]
        assert DEFAULT_PACK_ID == "osr_generic"

    def test_unknown_falls_back(self) -> None:
        """Test unknown pack ids resolve to OSR Generic."""
        assert get_pack("gurps").id == "osr_generic"
        assert get_pack(None).id == "osr_generic"

    def test_is_registered(self) -> None:
        """Test registry membership checks."""
        assert is_registered_pack("dnd5e_srd")
        assert not is_registered_pack("gurps")
        assert not is_registered_pack(None)

    def test_srd_pack_attribution(self) -> None:
        """Test the SRD pack carries CC-BY attribution."""
        pack = get_pack("dnd5e_srd")

        assert pack.license_type == LicenseType.CC_BY_4_0
        assert pack.attribution_text == SRD_ATTRIBUTION
        assert pack.requires_user_reference is False

    def test_shadowdark_requires_reference(self) -> None:
        """Test the verify pack asks for a user reference and ships no data."""
        pack = get_pack("shadowdark_private_verify")

        assert pack.license_type == LicenseType.USER_PROVIDED
        assert pack.requires_user_reference is True
        assert pack.attribution_text is None


class TestBuildProvenance:
    """Tests for build_provenance."""

    def test_fields_from_pack(self) -> None:
        """Test provenance copies the pack's licence and disclaimer."""
        stamp = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)

        provenance = build_provenance("osr_generic", stamp)

        assert provenance.pack_id == "osr_generic"
        assert provenance.pack_display_name == "OSR Generic"
        assert provenance.license_type == LicenseType.INTERNAL
        assert provenance.attribution_text is None
        assert provenance.disclaimer == DEFAULT_DISCLAIMER
        assert provenance.generated_at == stamp

    def test_defaults_to_now(self) -> None:
        """Test the timestamp defaults to the current UTC time."""
        before = datetime.now(UTC)

        provenance = build_provenance("dnd5e_srd")

        assert provenance.generated_at >= before
        assert provenance.attribution_text == SRD_ATTRIBUTION

    def test_unknown_pack(self) -> None:
        """Test unknown packs produce the default pack's provenance."""
        assert build_provenance("gurps").pack_id == "osr_generic"
