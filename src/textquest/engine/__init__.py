"""Engine helpers that drive entities during play.

Exports:
    Selector: Injectable random source for combat choices.
    get_default_selector: Selector seeded from settings.
    reset_default_selector: Reseed the default selector.
"""

from __future__ import annotations

from textquest.engine.selection import (
    Selector,
    get_default_selector,
    reset_default_selector,
)


__all__ = [
    "Selector",
    "get_default_selector",
    "reset_default_selector",
]
