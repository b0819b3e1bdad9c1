"""Plain-text views of an entity for the game's console front-end.

Functions here only build strings; printing is the caller's business.
"""

from __future__ import annotations

from textquest.core.constants import COMMAND_BULLET, EMPTY_SLOT_LABEL, LIST_BULLET
from textquest.models.entity import Entity
from textquest.models.enums import EquipmentSlot


def battle_commands_text(entity: Entity) -> str:
    """One bulleted line per battle command, followed by a blank line."""
    lines = [f"{COMMAND_BULLET} {name}\n" for name in entity.battle_commands.names]
    return "".join(lines) + "\n"


def inventory_text(entity: Entity) -> str:
    """Gold in pouch followed by each stack as ``* name (quantity)``."""
    text = f"Current gold in pouch: {entity.gold}.\n\n"
    if entity.inventory.is_empty:
        return text + f"{entity.name}'s inventory is empty!\n\n"
    text += f"{entity.name}'s inventory:\n"
    for stack in entity.inventory.stacks:
        text += f"{LIST_BULLET} {stack.name} ({stack.quantity})\n"
    return text + "\n"


def status_text(entity: Entity) -> str:
    """Stats, equipment by slot and, when there are any, battle commands."""
    text = (
        "Stats:\n"
        f"{LIST_BULLET} HP: {entity.hp}/{entity.max_hp}\n"
        f"{LIST_BULLET} Attack: {entity.attack}\n"
        f"{LIST_BULLET} Defense: {entity.defense}\n"
        f"{LIST_BULLET} Agility: {entity.agility}\n\n"
        "Equipment:\n"
    )
    for slot in EquipmentSlot:
        equipment = entity.outfit.get(slot)
        label = equipment.name if equipment is not None else EMPTY_SLOT_LABEL
        text += f"{LIST_BULLET} {slot.display_name}: {label}\n"
    text += "\n"

    if not entity.battle_commands.is_empty:
        text += "Battle Commands:\n" + battle_commands_text(entity)
    return text


__all__ = [
    "battle_commands_text",
    "inventory_text",
    "status_text",
]
