#!/usr/bin/env python3
"""
Word Model Base Class
=====================
Base class for all word models. A model owns a phoneme inventory and a
random source, and turns them into words:

- synthesize_syllable: one syllable, given whether it opens the word
- build_word / synthesize_word: N syllables, N drawn from [min, max]
- generate: a batch of words

Subclasses only decide how a single syllable is assembled; word length,
range validation and batching live here.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from onamer.errors import ConfigurationError
from onamer.settings import get_setting
from .entropy import RandomSource, get_rng
from .phonemes import PhonemeInventory

logger = logging.getLogger(__name__)


# =============================================================================
# Data Classes
# =============================================================================

class SyllablePattern(Enum):
    """Slot layout of a single syllable."""
    CV = "CV"
    VC = "VC"
    CVC = "CVC"
    MORA = "mora"


@dataclass
class GeneratedWord:
    """A generated word together with the syllables it was built from."""
    text: str
    syllables: List[str] = field(default_factory=list)
    language: str = ""

    @property
    def syllable_count(self) -> int:
        return len(self.syllables)


@dataclass(frozen=True)
class SyllableRange:
    """Closed range [minimum, maximum] of syllables per word."""
    minimum: int
    maximum: int

    def __post_init__(self):
        for label, value in (('min', self.minimum), ('max', self.maximum)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{label} syllable count must be an integer, got {value!r}")
        if self.minimum < 1:
            raise ConfigurationError(f"min syllable count must be at least 1, got {self.minimum}")
        if self.minimum > self.maximum:
            raise ConfigurationError(
                f"min syllable count ({self.minimum}) is greater than max ({self.maximum})"
            )


def validate_count(count) -> int:
    """Check a requested word count: a non-negative integer."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise ConfigurationError(f"word count must be an integer, got {count!r}")
    if count < 0:
        raise ConfigurationError(f"word count must not be negative, got {count}")
    return count


# =============================================================================
# Word Model
# =============================================================================

class WordModel(ABC):
    """
    Abstract base class for all word models.

    Parameters
    ----------
    inventory : PhonemeInventory
        Phoneme inventory the model draws from.
    seed : int, optional
        Seed for a reproducible random source. Ignored when rng is given.
    rng : RandomSource, optional
        Random source to draw from. Defaults to get_rng(seed).
    """

    def __init__(self,
                 inventory: PhonemeInventory,
                 seed: int = None,
                 rng: RandomSource = None):
        self.inventory = inventory
        self._rng = rng or get_rng(seed)
        self._check_inventory(inventory)
        logger.debug("Initialized %s on '%s' inventory (%r)",
                     type(self).__name__, inventory.name, self._rng)

    @property
    def language(self) -> str:
        return self.inventory.name

    @property
    def rng(self) -> RandomSource:
        return self._rng

    def _check_inventory(self, inventory: PhonemeInventory):
        """Reject inventories this model cannot draw from."""

    # -------------------------------------------------------------------------
    # Synthesis
    # -------------------------------------------------------------------------

    @abstractmethod
    def synthesize_syllable(self, is_word_start: bool = False, **options) -> str:
        """Produce one syllable. Must be implemented by subclasses."""

    def _start_options(self) -> Dict[str, Any]:
        """
        Per-word decisions, drawn once per word after the syllable count.

        Returned keywords are passed to the first synthesize_syllable call.
        """
        return {}

    def build_word(self, min_syllables: int, max_syllables: int) -> GeneratedWord:
        """
        Build one word of min_syllables..max_syllables syllables (inclusive).

        Raises
        ------
        ConfigurationError
            If the range is invalid. Nothing is drawn in that case.
        """
        span = SyllableRange(min_syllables, max_syllables)
        total = self._rng.randint(span.minimum, span.maximum)
        options = self._start_options()

        syllables = [self.synthesize_syllable(is_word_start=True, **options)]
        syllables.extend(self.synthesize_syllable(is_word_start=False) for _ in range(total - 1))
        return GeneratedWord(text=''.join(syllables), syllables=syllables, language=self.language)

    def synthesize_word(self, min_syllables: int, max_syllables: int) -> str:
        """Build one word and return its text."""
        return self.build_word(min_syllables, max_syllables).text

    def generate(self,
                 count: int = None,
                 min_syllables: int = None,
                 max_syllables: int = None,
                 needed: Optional[str] = None) -> List[str]:
        """
        Generate a batch of words.

        Parameters
        ----------
        count : int
            Number of words; defaults to generation.count from settings
        min_syllables, max_syllables : int
            Syllable range per word; defaults from settings
        needed : str, optional
            Characters the caller would like to see. Accepted for
            compatibility but not enforced.

        Returns
        -------
        list[str]
            Words in generation order. Duplicates are kept.
        """
        if count is None:
            count = get_setting('generation.count', 10)
        if min_syllables is None:
            min_syllables = get_setting('generation.min_syllables', 2)
        if max_syllables is None:
            max_syllables = get_setting('generation.max_syllables', 3)

        # Validate everything before the first draw so errors leave no partial output
        validate_count(count)
        SyllableRange(min_syllables, max_syllables)

        if needed:
            logger.debug("Ignoring needed characters %r: not enforced by %s",
                         needed, type(self).__name__)

        words = [self.synthesize_word(min_syllables, max_syllables) for _ in range(count)]
        logger.debug("Generated %d %s words (%d-%d syllables)",
                     len(words), self.language, min_syllables, max_syllables)
        return words


__all__ = [
    'SyllablePattern',
    'GeneratedWord',
    'SyllableRange',
    'validate_count',
    'WordModel',
]
