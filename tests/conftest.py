"""Pytest configuration and shared fixtures.

This module provides common fixtures for the textquest test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from textquest.engine.selection import Selector
    from textquest.models import Consumable, Entity, Equipment, Item


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset cached settings and the default selector around each test."""
    from textquest.core.config import clear_settings_cache
    from textquest.engine.selection import reset_default_selector

    clear_settings_cache()
    reset_default_selector()
    yield
    clear_settings_cache()
    reset_default_selector()


# =============================================================================
# Item Fixtures
# =============================================================================


@pytest.fixture
def hammer() -> Equipment:
    """A weapon granting the Bash command."""
    from textquest.models import attack, weapon

    return weapon("Hammer", attack=3, defense=2, agility=4, command=attack("Bash"))


@pytest.fixture
def knife() -> Equipment:
    """A weapon granting the Stab command."""
    from textquest.models import attack, weapon

    return weapon("Knife", attack=5, defense=3, agility=7, command=attack("Stab"))


@pytest.fixture
def iron_helmet() -> Equipment:
    """A helmet adding 3 defense."""
    from textquest.models import helmet

    return helmet(defense=3)


@pytest.fixture
def apple() -> Consumable:
    """A consumable restoring 5 hp."""
    from textquest.models import food

    return food("Apple", recovers=5)


@pytest.fixture
def trinket() -> Item:
    """A plain item that can be neither equipped nor used."""
    from textquest.models import Item

    return Item(name="Trinket", value=3)


# =============================================================================
# Entity Fixtures
# =============================================================================


@pytest.fixture
def entity() -> Entity:
    """An entity with all default stats."""
    from textquest.models import Entity

    return Entity()


@pytest.fixture
def hero() -> Entity:
    """A wounded hero with some gold."""
    from textquest.models import Entity

    return Entity(name="Hero", max_hp=20, hp=10, gold=10)


@pytest.fixture
def seeded_selector() -> Selector:
    """A Selector with a fixed seed for reproducible choices."""
    from textquest.engine.selection import Selector

    return Selector(seed=42)
