"""Battle commands: the named actions an entity can take in combat.

Commands are immutable and identified by name. ``Entity`` keeps them in a
sorted, duplicate-free list; some are intrinsic to the entity and some are
granted by an equipped weapon for as long as it stays equipped.

Example:
    >>> from textquest.models.commands import attack, escape
    >>> bash = attack("Bash", strength=2)
    >>> bash == attack("Bash")
    True
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from textquest.core import constants
from textquest.models.base import build_model
from textquest.models.enums import CommandKind


class BattleCommand(BaseModel):
    """Base for every battle command.

    Equality, hashing and ordering use the name only, so two commands
    with the same name are the same action regardless of their payload.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1, description="Display name and identity key")
    kind: CommandKind

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BattleCommand):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __lt__(self, other: BattleCommand) -> bool:
        return self.name < other.name

    def __str__(self) -> str:
        return self.name


class Attack(BattleCommand):
    """Deal damage scaled by ``strength`` with ``success_rate`` percent odds."""

    name: str = Field(default="Attack", min_length=1)
    kind: Literal[CommandKind.ATTACK] = CommandKind.ATTACK
    strength: int = Field(default=constants.DEFAULT_ATTACK_STRENGTH, ge=0)
    success_rate: int = Field(default=constants.DEFAULT_SUCCESS_RATE, ge=0, le=100)


class Escape(BattleCommand):
    """Attempt to flee the battle."""

    name: str = Field(default="Escape", min_length=1)
    kind: Literal[CommandKind.ESCAPE] = CommandKind.ESCAPE


class Use(BattleCommand):
    """Use an inventory item during battle."""

    name: str = Field(default="Use", min_length=1)
    kind: Literal[CommandKind.USE] = CommandKind.USE


Command = Annotated[Attack | Escape | Use, Field(discriminator="kind")]
"""Any concrete battle command, discriminated by ``kind``."""


def attack(
    name: str = "Attack",
    *,
    strength: int = constants.DEFAULT_ATTACK_STRENGTH,
    success_rate: int = constants.DEFAULT_SUCCESS_RATE,
) -> Attack:
    """Build an attack command."""
    return build_model(Attack, name=name, strength=strength, success_rate=success_rate)


def escape(name: str = "Escape") -> Escape:
    """Build an escape command."""
    return build_model(Escape, name=name)


def use_command(name: str = "Use") -> Use:
    """Build a use-item command."""
    return build_model(Use, name=name)


__all__ = [
    "BattleCommand",
    "Attack",
    "Escape",
    "Use",
    "Command",
    "attack",
    "escape",
    "use_command",
]
