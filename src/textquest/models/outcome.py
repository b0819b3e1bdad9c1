"""Results returned by entity operations.

Entity operations never raise for player mistakes. They return an
``Outcome`` saying whether the change was applied, silently skipped
(no-op), or rejected with a reason the caller can show the player.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, computed_field

from textquest.core import constants
from textquest.models.enums import OutcomeStatus
from textquest.models.items import AnyItem


class Outcome(BaseModel):
    """Tri-state result of a mutating entity operation."""

    model_config = ConfigDict(frozen=True)

    status: OutcomeStatus
    message: str = Field(default="", description="User-facing text, set for rejections")

    @classmethod
    def applied(cls, message: str = "") -> Outcome:
        return cls(status=OutcomeStatus.APPLIED, message=message)

    @classmethod
    def noop(cls, message: str = "") -> Outcome:
        return cls(status=OutcomeStatus.NOOP, message=message)

    @classmethod
    def rejected(cls, message: str) -> Outcome:
        return cls(status=OutcomeStatus.REJECTED, message=message)

    @computed_field(description="Whether state changed")
    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.APPLIED

    def __bool__(self) -> bool:
        return self.ok


class Rewards(BaseModel):
    """Gold and treasure granted by ``Entity.add_rewards``."""

    model_config = ConfigDict(frozen=True)

    gold: int = Field(default=0, ge=0)
    item: AnyItem | None = None

    @computed_field(description="Whether anything was granted")
    @property
    def is_empty(self) -> bool:
        return self.gold == 0 and self.item is None

    def summary(self) -> str:
        """Render the reward report, e.g. ``"Rewards:\\n* 5 gold\\n* Potion\\n\\n"``."""
        lines = ["Rewards:"]
        if self.gold > 0:
            lines.append(f"{constants.LIST_BULLET} {self.gold} gold")
        if self.item is not None:
            lines.append(f"{constants.LIST_BULLET} {self.item.name}")
        return "\n".join(lines) + "\n\n"


RewardHook = Callable[[Rewards], None]
"""Callback receiving the report of a non-empty reward."""


__all__ = [
    "Outcome",
    "Rewards",
    "RewardHook",
]
