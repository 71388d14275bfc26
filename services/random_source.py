"""
Random sources for die rolls

The rules engine only consumes a RandomSource; the bot supplies the system one.
"""
import random
from typing import Optional, Protocol

from constants import DIE_MIN_FACE, DIE_MAX_FACE


class RandomSource(Protocol):
    """Supplies uniformly distributed six-sided die results."""

    def roll_die(self) -> int:
        ...


class SystemRandomSource:
    """RandomSource backed by the `random` module."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def roll_die(self) -> int:
        return self._rng.randint(DIE_MIN_FACE, DIE_MAX_FACE)
