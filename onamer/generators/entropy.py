#!/usr/bin/env python3
"""
Random Sources for Word Generation
==================================
Every draw made by a word model goes through a RandomSource handle that
is passed in at construction time, so callers can replay a generation
run by seeding it.

Sources:
- TrueRandom: cryptographically secure, backed by secrets.SystemRandom.
  Used when no seed is given.
- SeededRandom: reproducible, backed by random.Random(seed).

Usage:
    from onamer.generators.entropy import get_rng

    rng = get_rng(seed=42)
    rng.randint(2, 3)
    rng.choice(('a', 'e', 'i'))
"""

import random as _random
import secrets
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence


# =============================================================================
# Random Source Interface
# =============================================================================

class RandomSource(ABC):
    """Minimal random interface the generators depend on."""

    @abstractmethod
    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""

    @abstractmethod
    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""

    @abstractmethod
    def _choose(self, seq: Sequence[Any]) -> Any:
        pass

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return self._choose(seq)


# =============================================================================
# Implementations
# =============================================================================

class TrueRandom(RandomSource):
    """
    Cryptographically secure random number generator.

    Draws from the operating system entropy pool via os.urandom(), so it
    cannot be seeded. Use SeededRandom when output must be reproducible.
    """

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def random(self) -> float:
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def _choose(self, seq: Sequence[Any]) -> Any:
        return self._rng.choice(seq)

    def __repr__(self) -> str:
        return "TrueRandom()"


class SeededRandom(RandomSource):
    """
    Reproducible random source.

    Two instances built with the same seed return the same sequence of
    draws for the same sequence of calls.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = _random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def _choose(self, seq: Sequence[Any]) -> Any:
        return self._rng.choice(seq)

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed!r})"


# Global instance
_true_random = TrueRandom()


def get_rng(seed: Optional[int] = None) -> RandomSource:
    """
    Get a random source.

    Returns the shared TrueRandom instance when seed is None, otherwise a
    fresh SeededRandom for that seed.
    """
    if seed is None:
        return _true_random
    return SeededRandom(seed)


__all__ = [
    "RandomSource",
    "TrueRandom",
    "SeededRandom",
    "get_rng",
]
