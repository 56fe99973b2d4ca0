"""Tests for the conversion profile registry."""

from __future__ import annotations

import pytest

from creature_converter.models import ConversionProfile, CreatureRole
from creature_converter.profiles.osr_generic import OSR_GENERIC_PROFILE
from creature_converter.profiles.registry import (
    CONVERSION_PROFILES,
    DEFAULT_PROFILE_ID,
    get_effective_targets,
    get_profile,
    is_registered_profile,
    list_profiles,
)
from creature_converter.profiles.shadowdark_compatible import SHADOWDARK_COMPATIBLE_PROFILE


class TestRegistry:
    """Tests for profile lookup."""

    def test_default_profile(self) -> None:
        """Test OSR Generic is the default."""
        assert DEFAULT_PROFILE_ID == "osr_generic_v1"
        assert list_profiles()[0] is OSR_GENERIC_PROFILE

    def test_lookup(self) -> None:
        """Test lookup by id."""
        assert get_profile("shadowdark_compatible_v1") is SHADOWDARK_COMPATIBLE_PROFILE

    @pytest.mark.parametrize("profile_id", [None, "", "pathfinder_v9"])
    def test_unknown_falls_back(self, profile_id: str | None) -> None:
        """Test unknown or missing ids resolve to the default profile."""
        assert get_profile(profile_id) is OSR_GENERIC_PROFILE

    def test_is_registered(self) -> None:
        """Test registry membership checks."""
        assert is_registered_profile("osr_generic_v1")
        assert not is_registered_profile("osr_generic")
        assert not is_registered_profile(None)

    def test_registry_is_read_only(self) -> None:
        """Test the registry cannot be mutated."""
        with pytest.raises(TypeError):
            CONVERSION_PROFILES["homebrew"] = OSR_GENERIC_PROFILE  # type: ignore[index]

    def test_profile_flags(self) -> None:
        """Test morale and reaction visibility per profile."""
        assert OSR_GENERIC_PROFILE.show_morale is True
        assert OSR_GENERIC_PROFILE.show_reaction is True
        assert SHADOWDARK_COMPATIBLE_PROFILE.show_morale is False
        assert SHADOWDARK_COMPATIBLE_PROFILE.show_reaction is False


class TestEffectiveTargets:
    """Tests for get_effective_targets."""

    def test_brute_tier_one(self) -> None:
        """Test role multipliers with half-up rounding."""
        targets = get_effective_targets(OSR_GENERIC_PROFILE, 1, CreatureRole.BRUTE)

        assert targets.ac_target == 11
        assert targets.hp_target == 8
        assert targets.attack_bonus_target == 1
        assert targets.dpr_target == pytest.approx(4.6)
        assert targets.morale_target == 7

    def test_skirmisher_tier_three(self) -> None:
        """Test skirmisher targets at tier 3."""
        targets = get_effective_targets(OSR_GENERIC_PROFILE, 3, "skirmisher")

        assert targets.ac_target == 15
        assert targets.hp_target == 18
        assert targets.attack_bonus_target == 6
        assert targets.dpr_target == pytest.approx(7.7)

    def test_tier_clamped(self) -> None:
        """Test out-of-range tiers are clamped to 1-5."""
        assert get_effective_targets(OSR_GENERIC_PROFILE, 9, "brute") == get_effective_targets(
            OSR_GENERIC_PROFILE, 5, "brute"
        )
        assert get_effective_targets(OSR_GENERIC_PROFILE, 0, "brute") == get_effective_targets(
            OSR_GENERIC_PROFILE, 1, "brute"
        )

    def test_unknown_role_is_skirmisher(self) -> None:
        """Test unknown roles use the skirmisher multipliers."""
        assert get_effective_targets(OSR_GENERIC_PROFILE, 2, "wizard") == get_effective_targets(
            OSR_GENERIC_PROFILE, 2, CreatureRole.SKIRMISHER
        )

    def test_morale_ignores_role(self) -> None:
        """Test morale comes straight from the tier."""
        morale = {
            get_effective_targets(OSR_GENERIC_PROFILE, 4, role).morale_target for role in CreatureRole
        }
        assert morale == {10}

    def test_no_morale_profile(self) -> None:
        """Test profiles without morale leave it empty."""
        targets = get_effective_targets(SHADOWDARK_COMPATIBLE_PROFILE, 2, "boss")
        assert targets.morale_target is None

    @pytest.mark.parametrize("profile", [OSR_GENERIC_PROFILE, SHADOWDARK_COMPATIBLE_PROFILE])
    @pytest.mark.parametrize("role", list(CreatureRole))
    def test_non_decreasing_by_tier(
        self, profile: ConversionProfile, role: CreatureRole
    ) -> None:
        """Test effective targets never fall as the tier rises."""
        targets = [get_effective_targets(profile, tier, role) for tier in range(1, 6)]
        for low, high in zip(targets, targets[1:]):
            assert high.ac_target >= low.ac_target
            assert high.hp_target >= low.hp_target
            assert high.attack_bonus_target >= low.attack_bonus_target
            assert high.dpr_target >= low.dpr_target

    @pytest.mark.parametrize("role", list(CreatureRole))
    @pytest.mark.parametrize("tier", range(1, 6))
    def test_lean_hp_not_above_generic(self, tier: int, role: CreatureRole) -> None:
        """Test the Shadowdark profile never asks for more HP than OSR Generic."""
        lean = get_effective_targets(SHADOWDARK_COMPATIBLE_PROFILE, tier, role)
        generic = get_effective_targets(OSR_GENERIC_PROFILE, tier, role)

        assert lean.hp_target <= generic.hp_target
