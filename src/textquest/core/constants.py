"""Library-wide constants for textquest.

Default entity stats live in ``GameSettings`` so they can be overridden
from the environment; the values below are the fallbacks those settings
use, plus display constants shared by the presentation layer.
"""

from __future__ import annotations

# =============================================================================
# Entity Defaults
# =============================================================================

DEFAULT_ENTITY_NAME = "Entity"
"""Name given to entities built without one."""

DEFAULT_MAX_HP = 1
"""Starting maximum hit points (hp defaults to the same value)."""

DEFAULT_ATTACK = 1
"""Starting base attack."""

DEFAULT_DEFENSE = 1
"""Starting base defense."""

DEFAULT_AGILITY = 1
"""Starting base agility."""

DEFAULT_GOLD = 0
"""Starting gold."""

# =============================================================================
# Battle Command Defaults
# =============================================================================

DEFAULT_ATTACK_STRENGTH = 1
"""Damage multiplier for attack commands."""

DEFAULT_SUCCESS_RATE = 100
"""Chance (percent) that an attack command lands."""

# =============================================================================
# Display
# =============================================================================

COMMAND_BULLET = "❊"
"""Glyph printed in front of each battle command."""

LIST_BULLET = "*"
"""Glyph printed in front of stat, equipment and inventory lines."""

EMPTY_SLOT_LABEL = "none"
"""Label shown for an empty equipment slot."""


__all__ = [
    "DEFAULT_ENTITY_NAME",
    "DEFAULT_MAX_HP",
    "DEFAULT_ATTACK",
    "DEFAULT_DEFENSE",
    "DEFAULT_AGILITY",
    "DEFAULT_GOLD",
    "DEFAULT_ATTACK_STRENGTH",
    "DEFAULT_SUCCESS_RATE",
    "COMMAND_BULLET",
    "LIST_BULLET",
    "EMPTY_SLOT_LABEL",
]
