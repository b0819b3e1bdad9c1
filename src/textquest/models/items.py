"""Item hierarchy as a closed tagged union.

Every item is one of three kinds, told apart by the ``kind`` field:

- ``Item``: plain items carried for their value.
- ``Consumable``: used up on use, restoring ``recovers`` hp to a target.
- ``Equipment``: worn in a slot, adding ``stat_change`` to the wearer's
  effective stats and optionally granting a battle command.

Items are immutable descriptors identified by name. Quantities are tracked
by the inventory, never by the item itself.

Example:
    >>> from textquest.models.items import helmet, food
    >>> cap = helmet("Leather Cap", defense=2)
    >>> cap.slot
    <EquipmentSlot.HELMET: 'helmet'>
    >>> food("Apple", recovers=3).consumable
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from textquest.models.base import build_model
from textquest.models.commands import Command
from textquest.models.enums import EquipmentSlot, ItemKind


if TYPE_CHECKING:
    from textquest.models.entity import Entity


# =============================================================================
# Stat Delta
# =============================================================================


class StatChange(BaseModel):
    """Attack/defense/agility adjustment contributed while equipped.

    Deltas may be negative (cursed gear, heavy armor slowing the wearer).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    attack: int = 0
    defense: int = 0
    agility: int = 0

    def __add__(self, other: StatChange) -> StatChange:
        return StatChange(
            attack=self.attack + other.attack,
            defense=self.defense + other.defense,
            agility=self.agility + other.agility,
        )

    @computed_field(description="Whether the delta changes nothing")
    @property
    def is_zero(self) -> bool:
        return self.attack == 0 and self.defense == 0 and self.agility == 0


# =============================================================================
# Item Variants
# =============================================================================


class Item(BaseModel):
    """A plain item. Base of the item union.

    Equality and hashing use the name only.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    kind: Literal[ItemKind.PLAIN] = ItemKind.PLAIN
    name: str = Field(default="Item", min_length=1, description="Display name and identity key")
    description: str = Field(default="", description="Flavor text")
    value: int = Field(default=0, ge=0, description="Price in gold")
    disposable: bool = Field(default=True, description="Whether the item may be dropped")

    @computed_field(description="Whether using the item consumes it")
    @property
    def consumable(self) -> bool:
        return self.kind == ItemKind.CONSUMABLE

    @computed_field(description="Whether the item can be worn in a slot")
    @property
    def equippable(self) -> bool:
        return self.kind == ItemKind.EQUIPMENT

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


class Consumable(Item):
    """An item spent on use; restores ``recovers`` hp to the chosen target."""

    kind: Literal[ItemKind.CONSUMABLE] = ItemKind.CONSUMABLE  # type: ignore[assignment]
    name: str = Field(default="Food", min_length=1)
    recovers: int = Field(default=0, ge=0, description="Hit points restored on use")

    def apply_to(self, target: Entity) -> int:
        """Apply the effect to ``target`` and return the hp actually restored."""
        return target.heal(self.recovers)


class Equipment(Item):
    """Gear worn in ``slot``.

    Attributes:
        slot: The slot this item occupies when equipped.
        stat_change: Delta added to the wearer's effective stats.
        granted_command: Battle command available while equipped (weapons).
    """

    kind: Literal[ItemKind.EQUIPMENT] = ItemKind.EQUIPMENT  # type: ignore[assignment]
    slot: EquipmentSlot
    stat_change: StatChange = Field(default_factory=StatChange)
    granted_command: Command | None = Field(default=None)


AnyItem = Annotated[Item | Consumable | Equipment, Field(discriminator="kind")]
"""Any concrete item, discriminated by ``kind``."""


# =============================================================================
# Factories
# =============================================================================


def _equipment(
    slot: EquipmentSlot,
    name: str | None,
    *,
    attack: int,
    defense: int,
    agility: int,
    granted_command: Command | None = None,
    description: str = "",
    value: int = 0,
    disposable: bool = True,
) -> Equipment:
    return build_model(
        Equipment,
        name=name or slot.display_name,
        slot=slot,
        stat_change=StatChange(attack=attack, defense=defense, agility=agility),
        granted_command=granted_command,
        description=description,
        value=value,
        disposable=disposable,
    )


def weapon(
    name: str | None = None,
    *,
    attack: int = 0,
    defense: int = 0,
    agility: int = 0,
    command: Command | None = None,
    description: str = "",
    value: int = 0,
    disposable: bool = True,
) -> Equipment:
    """Build a weapon, optionally granting ``command`` while equipped.

    The name defaults to "Weapon".
    """
    return _equipment(
        EquipmentSlot.WEAPON,
        name,
        attack=attack,
        defense=defense,
        agility=agility,
        granted_command=command,
        description=description,
        value=value,
        disposable=disposable,
    )


def shield(name: str | None = None, *, attack: int = 0, defense: int = 0, agility: int = 0, **kwargs: Any) -> Equipment:
    """Build a shield (default name "Shield")."""
    return _equipment(EquipmentSlot.SHIELD, name, attack=attack, defense=defense, agility=agility, **kwargs)


def helmet(name: str | None = None, *, attack: int = 0, defense: int = 0, agility: int = 0, **kwargs: Any) -> Equipment:
    """Build a helmet (default name "Helmet")."""
    return _equipment(EquipmentSlot.HELMET, name, attack=attack, defense=defense, agility=agility, **kwargs)


def torso(name: str | None = None, *, attack: int = 0, defense: int = 0, agility: int = 0, **kwargs: Any) -> Equipment:
    """Build torso armor (default name "Torso")."""
    return _equipment(EquipmentSlot.TORSO, name, attack=attack, defense=defense, agility=agility, **kwargs)


def legs(name: str | None = None, *, attack: int = 0, defense: int = 0, agility: int = 0, **kwargs: Any) -> Equipment:
    """Build leg armor (default name "Legs")."""
    return _equipment(EquipmentSlot.LEGS, name, attack=attack, defense=defense, agility=agility, **kwargs)


def food(name: str = "Food", *, recovers: int = 0, description: str = "", value: int = 0) -> Consumable:
    """Build a consumable that restores ``recovers`` hp."""
    return build_model(Consumable, name=name, recovers=recovers, description=description, value=value)


__all__ = [
    "StatChange",
    "Item",
    "Consumable",
    "Equipment",
    "AnyItem",
    "weapon",
    "shield",
    "helmet",
    "torso",
    "legs",
    "food",
]
