"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the creature converter test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from creature_converter.models import (
    Attack,
    ConversionSettings,
    OutputCreatureData,
    ParsedCreatureData,
    SourceSystem,
    SpecialAction,
)


if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Isolate each test from .env files and cached settings."""
    from creature_converter.core.config import clear_settings_cache

    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "CREATURE_CONVERTER_DEBUG": "true",
        "CREATURE_CONVERTER_LOG_LEVEL": "DEBUG",
        "CREATURE_CONVERTER_CONVERSION_PROFILE_ID": "shadowdark_compatible_v1",
        "CREATURE_CONVERTER_CONVERSION_DEADLINESS": "1.5",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Stat Block Fixtures
# =============================================================================


@pytest.fixture
def simple_goblin_text() -> str:
    """Provide a compact goblin stat block with a labelled attack line."""
    return (
        "Goblin\n"
        "AC 15\n"
        "HP 7\n"
        "Speed 30 ft.\n"
        "Melee Attack: Scimitar +4 to hit, 1d6+2 slashing damage"
    )


@pytest.fixture
def srd_goblin_text() -> str:
    """Provide a goblin stat block in full 5e layout."""
    return (
        "Goblin\n"
        "Small humanoid (goblinoid), neutral evil\n"
        "Armor Class 15 (leather armor, shield)\n"
        "Hit Points 7 (2d6)\n"
        "Speed 30 ft.\n"
        "STR DEX CON INT WIS CHA\n"
        "8 (-1) 14 (+2) 10 (+0) 10 (+0) 8 (-1) 8 (-1)\n"
        "Skills Stealth +6\n"
        "Senses darkvision 60 ft., passive Perception 9\n"
        "Languages Common, Goblin\n"
        "Challenge 1/4 (50 XP)\n"
        "Nimble Escape. The goblin can take the Disengage or Hide action as a bonus action.\n"
        "Actions\n"
        "Scimitar. Melee Weapon Attack: +4 to hit, reach 5 ft., one target. "
        "Hit: 5 (1d6 + 2) slashing damage.\n"
        "Shortbow. Ranged Weapon Attack: +4 to hit, range 80/320 ft., one target. "
        "Hit: 5 (1d6 + 2) piercing damage.\n"
    )


@pytest.fixture
def dragon_text() -> str:
    """Provide a markdown stat block with flying movement and a recharge ability."""
    return (
        "## Young Red Dragon\n"
        "**Armor Class** 18 (natural armor)\n"
        "**Hit Points** 178 (17d10 + 85)\n"
        "**Speed** 40 ft., climb 40 ft., fly 80 ft.\n"
        "**Saving Throws** Dex +4, Con +9, Wis +4, Cha +8\n"
        "**Challenge** 10 (5,900 XP)\n"
        "**Fire Breath (Recharge 5-6).** The dragon exhales fire in a 30-foot cone.\n"
        "**Bite.** Melee Weapon Attack: +10 to hit, reach 10 ft., one target. "
        "Hit: 17 (2d10 + 6) piercing damage.\n"
        "**Claw.** Melee Weapon Attack: +10 to hit, reach 5 ft., one target. "
        "Hit: 13 (2d6 + 6) slashing damage.\n"
    )


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def default_settings() -> ConversionSettings:
    """Provide settings with both sliders at 1.0 and the OSR profile."""
    return ConversionSettings(conversion_profile_id="osr_generic_v1")


@pytest.fixture
def parsed_goblin() -> ParsedCreatureData:
    """Provide a parsed level-1 goblin with one attack."""
    return ParsedCreatureData(
        name="Goblin",
        ac=15,
        hp=7,
        movement="30 ft.",
        attacks=[Attack(name="Scimitar", bonus=4, damage="1d6+2 slashing")],
        level=1,
        system=SourceSystem.DND_5E,
    )


@pytest.fixture
def parsed_wyvern() -> ParsedCreatureData:
    """Provide a parsed mid-tier flyer with several attacks and actions."""
    return ParsedCreatureData(
        name="Wyvern",
        ac=13,
        hp=110,
        movement="20 ft., fly 80 ft.",
        attacks=[
            Attack(name="Bite", bonus=7, damage="2d6+4 piercing"),
            Attack(name="Claws", bonus=7, damage="2d8+4 slashing"),
            Attack(name="Stinger", bonus=7, damage="2d6+4 piercing"),
            Attack(name="Tail", bonus=7, damage="1d8+4 bludgeoning"),
        ],
        special_actions=[
            SpecialAction(name="Multiattack", description="Bite and stinger."),
            SpecialAction(name="Dive", description="Swoops down."),
            SpecialAction(name="Roar", description="Frightens nearby foes."),
            SpecialAction(name="Venom", description="Poisons the target.", recharge="Recharge 6"),
        ],
        cr="6",
        system=SourceSystem.DND_5E,
    )


@pytest.fixture
def converted_goblin(
    parsed_goblin: ParsedCreatureData,
    default_settings: ConversionSettings,
) -> OutputCreatureData:
    """Provide the goblin converted with default settings."""
    from creature_converter.engine.conversion import convert

    return convert(parsed_goblin, default_settings)
