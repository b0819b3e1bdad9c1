"""Random selection for simple combat AI.

Entities pick attacks and item targets through a ``Selector`` so tests and
replays can inject a seeded source of randomness.

Example:
    >>> selector = Selector(seed=7)
    >>> selector.choice(["Kick", "Zap"]) in ("Kick", "Zap")
    True
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from functools import lru_cache
from typing import TypeVar

from textquest.core.config import get_settings
from textquest.core.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class Selector:
    """Uniform random choices over a seedable ``random.Random``."""

    def __init__(self, *, seed: int | None = None, rng: random.Random | None = None) -> None:
        """Initialize the selector.

        Args:
            seed: Seed for a private ``random.Random``. Ignored if rng is given.
            rng: An existing generator to draw from.
        """
        self._seed = seed
        self._rng = rng if rng is not None else random.Random(seed)
        logger.debug("Selector initialized", seed=seed, shared_rng=rng is not None)

    @property
    def seed(self) -> int | None:
        return self._seed

    def choice(self, options: Sequence[T]) -> T | None:
        """Pick one element uniformly, or None when ``options`` is empty."""
        if not options:
            return None
        return options[self._rng.randrange(len(options))]

    def pair(self, first: Sequence[T], second: Sequence[U]) -> tuple[T, U] | None:
        """Pick independently from both sequences; None if either is empty."""
        left = self.choice(first)
        right = self.choice(second)
        if left is None or right is None:
            return None
        return left, right


@lru_cache(maxsize=1)
def get_default_selector() -> Selector:
    """Selector used when a caller does not pass one.

    Seeded from ``GameSettings.random_seed``.
    """
    return Selector(seed=get_settings().game.random_seed)


def reset_default_selector() -> None:
    """Drop the cached default selector so the next call reseeds it."""
    get_default_selector.cache_clear()


__all__ = [
    "Selector",
    "get_default_selector",
    "reset_default_selector",
]
