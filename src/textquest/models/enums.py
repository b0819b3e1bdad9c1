"""Enumeration types for textquest.

These enums close the sets of item kinds, equipment slots, battle command
kinds and operation outcomes so that dispatch on them is exhaustive.
"""

from __future__ import annotations

from enum import StrEnum


class EquipmentSlot(StrEnum):
    """Positions an equipment item can occupy.

    Declaration order is the display order used by status listings.
    """

    WEAPON = "weapon"
    SHIELD = "shield"
    HELMET = "helmet"
    TORSO = "torso"
    LEGS = "legs"

    @property
    def display_name(self) -> str:
        """Get the capitalized slot name (e.g. 'Weapon')."""
        return self.value.capitalize()


class ItemKind(StrEnum):
    """Discriminator for the item union."""

    PLAIN = "plain"
    """Carried for its value only (treasure, keys, junk)."""

    CONSUMABLE = "consumable"
    """Used up on use, applying an effect to a target."""

    EQUIPMENT = "equipment"
    """Worn in a slot, contributing a stat delta."""


class CommandKind(StrEnum):
    """Discriminator for battle commands."""

    ATTACK = "attack"
    ESCAPE = "escape"
    USE = "use"


class OutcomeStatus(StrEnum):
    """Result of a mutating entity operation."""

    APPLIED = "applied"
    """State changed as requested."""

    NOOP = "noop"
    """Precondition not met (e.g. item absent); nothing changed."""

    REJECTED = "rejected"
    """Operation refused for the given target; nothing changed."""


__all__ = [
    "EquipmentSlot",
    "ItemKind",
    "CommandKind",
    "OutcomeStatus",
]
