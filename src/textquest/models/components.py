"""Collections an entity is composed of.

- ``InventoryComponent``: ordered item stacks, one stack per item name.
- ``OutfitComponent``: at most one equipment item per slot.
- ``BattleCommandSet``: battle commands kept sorted by name, no duplicates.

Components hold their own collection rules only. Rules that span several
components (moving gear between inventory and outfit, granting commands)
live on ``Entity``.
"""

from __future__ import annotations

from bisect import bisect_left
from operator import attrgetter
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from textquest.core.exceptions import InvalidEntityStateError
from textquest.models.commands import BattleCommand, Command
from textquest.models.enums import EquipmentSlot
from textquest.models.items import AnyItem, Equipment, Item, StatChange


_by_name = attrgetter("name")


class Component(BaseModel):
    """Base class for entity components.

    Components are mutated in place by the owning entity.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="ignore",
    )


# =============================================================================
# Inventory
# =============================================================================


class ItemStack(BaseModel):
    """An item paired with the number of copies held."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    item: AnyItem
    quantity: int = Field(default=1, ge=1)

    @property
    def name(self) -> str:
        return self.item.name


class InventoryComponent(Component):
    """Carried items, in the order they were first acquired."""

    stacks: list[ItemStack] = Field(default_factory=list)

    @field_validator("stacks", mode="after")
    @classmethod
    def merge_duplicate_stacks(cls, v: list[ItemStack]) -> list[ItemStack]:
        """Fold stacks sharing an item name into the first one."""
        merged: dict[str, ItemStack] = {}
        for stack in v:
            existing = merged.get(stack.name)
            if existing is None:
                merged[stack.name] = ItemStack(item=stack.item, quantity=stack.quantity)
            else:
                existing.quantity += stack.quantity
        return list(merged.values())

    @property
    def is_empty(self) -> bool:
        return not self.stacks

    def index_of(self, name: str) -> int | None:
        """Position of the stack holding ``name``, or None."""
        for i, stack in enumerate(self.stacks):
            if stack.name == name:
                return i
        return None

    def get(self, name: str) -> ItemStack | None:
        index = self.index_of(name)
        return None if index is None else self.stacks[index]

    def quantity_of(self, name: str) -> int:
        stack = self.get(name)
        return 0 if stack is None else stack.quantity

    def add(self, item: Item, quantity: int = 1) -> bool:
        """Merge ``quantity`` copies into the item's stack, or append a new one.

        Returns:
            False (and changes nothing) when quantity is below 1.
        """
        if quantity < 1:
            return False
        stack = self.get(item.name)
        if stack is None:
            self.stacks.append(ItemStack(item=item, quantity=quantity))
        else:
            stack.quantity += quantity
        return True

    def remove(self, name: str, quantity: int = 1) -> int:
        """Remove up to ``quantity`` copies of ``name``.

        The stack is deleted once it would reach zero; the remaining stacks
        keep their order.

        Returns:
            Number of copies actually removed (0 when absent).
        """
        if quantity < 1:
            return 0
        index = self.index_of(name)
        if index is None:
            return 0
        stack = self.stacks[index]
        if quantity >= stack.quantity:
            del self.stacks[index]
            return stack.quantity
        stack.quantity -= quantity
        return quantity

    def clear(self) -> None:
        self.stacks.clear()


# =============================================================================
# Outfit
# =============================================================================


class OutfitComponent(Component):
    """Equipped gear keyed by slot. A missing key is an empty slot."""

    slots: dict[EquipmentSlot, Equipment] = Field(default_factory=dict)

    @field_validator("slots", mode="after")
    @classmethod
    def check_slot_keys(cls, v: dict[EquipmentSlot, Equipment]) -> dict[EquipmentSlot, Equipment]:
        """Reject equipment stored under a slot it does not fit."""
        for slot, equipment in v.items():
            if equipment.slot != slot:
                raise InvalidEntityStateError(
                    f"{equipment.name} belongs in the {equipment.slot} slot, not {slot}",
                    details={"slot": str(slot), "item": equipment.name},
                )
        return v

    @property
    def is_empty(self) -> bool:
        return not self.slots

    def get(self, slot: EquipmentSlot) -> Equipment | None:
        return self.slots.get(slot)

    def slot_of(self, name: str) -> EquipmentSlot | None:
        """Slot currently holding an item called ``name``, or None."""
        for slot, equipment in self.slots.items():
            if equipment.name == name:
                return slot
        return None

    def put(self, equipment: Equipment) -> None:
        """Place ``equipment`` in its slot. The slot must be empty."""
        if equipment.slot in self.slots:
            raise InvalidEntityStateError(
                f"{equipment.slot} slot is already occupied",
                details={"slot": str(equipment.slot), "item": self.slots[equipment.slot].name},
            )
        self.slots[equipment.slot] = equipment

    def take(self, slot: EquipmentSlot) -> Equipment | None:
        """Empty ``slot`` and return what was in it."""
        return self.slots.pop(slot, None)

    def total_stat_change(self) -> StatChange:
        total = StatChange()
        for equipment in self.slots.values():
            total = total + equipment.stat_change
        return total

    def granted_commands(self) -> list[BattleCommand]:
        return [
            equipment.granted_command
            for equipment in self.slots.values()
            if equipment.granted_command is not None
        ]


# =============================================================================
# Battle Commands
# =============================================================================


class BattleCommandSet(Component):
    """Battle commands sorted by name with no two sharing a name."""

    commands: list[Command] = Field(default_factory=list)

    @field_validator("commands", mode="after")
    @classmethod
    def sort_unique(cls, v: list[BattleCommand]) -> list[BattleCommand]:
        """Keep the first command of each name, sorted by name."""
        unique: dict[str, BattleCommand] = {}
        for command in v:
            unique.setdefault(command.name, command)
        return sorted(unique.values(), key=_by_name)

    @property
    def names(self) -> list[str]:
        return [command.name for command in self.commands]

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def index_of(self, name: str) -> int | None:
        """Position of the command called ``name``, or None."""
        index = bisect_left(self.commands, name, key=_by_name)
        if index < len(self.commands) and self.commands[index].name == name:
            return index
        return None

    def add(self, command: BattleCommand) -> bool:
        """Insert ``command`` in name order. Returns False if the name exists."""
        index = bisect_left(self.commands, command.name, key=_by_name)
        if index < len(self.commands) and self.commands[index].name == command.name:
            return False
        self.commands.insert(index, command)
        return True

    def remove(self, name: str) -> bool:
        """Drop the command called ``name``. Returns False if absent."""
        index = self.index_of(name)
        if index is None:
            return False
        del self.commands[index]
        return True


def coerce_component_input(value: Any, field: str) -> Any:
    """Wrap a bare list/dict as component data.

    Lets callers write ``Entity(inventory=[...], outfit={...})`` instead of
    spelling out the component.
    """
    if isinstance(value, (list, tuple, dict)) and not (
        isinstance(value, dict) and field in value
    ):
        return {field: value}
    return value


__all__ = [
    "Component",
    "ItemStack",
    "InventoryComponent",
    "OutfitComponent",
    "BattleCommandSet",
    "coerce_component_input",
]
