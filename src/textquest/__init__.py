"""textquest - stat, equipment and inventory engine for text adventures.

Tracks a combatant's mutable state (hit points, attack/defense/agility,
gold, carried items, equipped gear, battle commands) and enforces the
rules under which it changes.

Example:
    >>> from textquest import Entity, attack, weapon
    >>> hero = Entity(name="Hero", max_hp=30)
    >>> _ = hero.add_item(weapon("Hammer", attack=3, command=attack("Bash")))
    >>> _ = hero.equip_item("Hammer")
    >>> hero.attack
    4

Modules:
    core: Configuration, logging, and base exceptions.
    models: Items, battle commands, components and the Entity aggregate.
    engine: Injectable randomness for combat choices.
    presentation: Plain-text status and inventory views.
"""

from __future__ import annotations

# Core
from textquest.core.config import Settings, get_settings
from textquest.core.exceptions import TextQuestError
from textquest.core.logging import configure_logging, get_logger

# Engine
from textquest.engine.selection import Selector

# Models
from textquest.models import (
    Attack,
    BattleCommand,
    Consumable,
    Entity,
    Equipment,
    EquipmentSlot,
    Escape,
    Item,
    ItemKind,
    ItemStack,
    Outcome,
    OutcomeStatus,
    Rewards,
    StatChange,
    Use,
    attack,
    escape,
    food,
    helmet,
    legs,
    shield,
    torso,
    use_command,
    weapon,
)

# Presentation
from textquest.presentation import battle_commands_text, inventory_text, status_text


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "TextQuestError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Engine
    "Selector",
    # Models
    "Entity",
    "Item",
    "Consumable",
    "Equipment",
    "EquipmentSlot",
    "ItemKind",
    "ItemStack",
    "StatChange",
    "BattleCommand",
    "Attack",
    "Escape",
    "Use",
    "Outcome",
    "OutcomeStatus",
    "Rewards",
    "attack",
    "escape",
    "use_command",
    "weapon",
    "shield",
    "helmet",
    "torso",
    "legs",
    "food",
    # Presentation
    "battle_commands_text",
    "inventory_text",
    "status_text",
]
