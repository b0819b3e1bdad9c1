"""Pydantic V2 data model for textquest entities.

Submodules:
    enums: Slots, item kinds, command kinds and outcome statuses.
    items: The item union (Item, Consumable, Equipment) and factories.
    commands: Battle commands (Attack, Escape, Use) and factories.
    components: Inventory, outfit and battle command collections.
    outcome: Operation results and reward reports.
    entity: The Entity aggregate.

Example:
    >>> from textquest.models import Entity, food
    >>> hero = Entity(name="Hero", max_hp=20, hp=10)
    >>> _ = hero.add_item(food("Apple", recovers=5), 2)
    >>> hero.use_item("Apple", hero).ok
    True
    >>> hero.hp
    15
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from textquest.models.enums import (
    CommandKind,
    EquipmentSlot,
    ItemKind,
    OutcomeStatus,
)

# =============================================================================
# Items and Commands
# =============================================================================
from textquest.models.commands import (
    Attack,
    BattleCommand,
    Command,
    Escape,
    Use,
    attack,
    escape,
    use_command,
)
from textquest.models.items import (
    AnyItem,
    Consumable,
    Equipment,
    Item,
    StatChange,
    food,
    helmet,
    legs,
    shield,
    torso,
    weapon,
)

# =============================================================================
# Components and Results
# =============================================================================
from textquest.models.components import (
    BattleCommandSet,
    InventoryComponent,
    ItemStack,
    OutfitComponent,
)
from textquest.models.outcome import Outcome, RewardHook, Rewards

# =============================================================================
# Entity
# =============================================================================
from textquest.models.entity import Entity


__all__ = [
    # Enums
    "CommandKind",
    "EquipmentSlot",
    "ItemKind",
    "OutcomeStatus",
    # Commands
    "BattleCommand",
    "Attack",
    "Escape",
    "Use",
    "Command",
    "attack",
    "escape",
    "use_command",
    # Items
    "Item",
    "Consumable",
    "Equipment",
    "AnyItem",
    "StatChange",
    "weapon",
    "shield",
    "helmet",
    "torso",
    "legs",
    "food",
    # Components
    "ItemStack",
    "InventoryComponent",
    "OutfitComponent",
    "BattleCommandSet",
    # Results
    "Outcome",
    "Rewards",
    "RewardHook",
    # Entity
    "Entity",
]
