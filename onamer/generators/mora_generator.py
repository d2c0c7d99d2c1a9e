#!/usr/bin/env python3
"""
Unit-Based (Mora) Word Models
=============================
Syllables are drawn whole from a fixed catalog of units ("ka", "shi",
"kyo", ...). Units that only make sense after another mora, such as the
geminates "kka" or "ppo", are start-restricted: the first syllable of a
word is drawn from the remaining units only.
"""

from onamer.errors import ConfigurationError
from .base_generator import WordModel
from .entropy import RandomSource
from .phonemes import PhonemeInventory, load_japanese


class UnitBasedModel(WordModel):
    """Word model that draws each syllable uniformly from a unit catalog."""

    def _check_inventory(self, inventory: PhonemeInventory):
        if inventory.is_letter_based:
            raise ConfigurationError(
                f"{type(self).__name__} needs a mora inventory, '{inventory.name}' is {inventory.model}"
            )

    def synthesize_syllable(self, is_word_start: bool = False) -> str:
        # start_unit_pool is pre-filtered and never empty (checked by the inventory)
        if is_word_start:
            return self._rng.choice(self.inventory.start_unit_pool)
        return self._rng.choice(self.inventory.unit_pool)


class JapaneseGenerator(UnitBasedModel):
    """
    Japanese-like words from romaji morae.

    Covers the basic syllabary, voiced and contracted sounds and the
    geminate (small tsu) units, which never open a word.
    """

    def __init__(self, seed: int = None, rng: RandomSource = None):
        super().__init__(load_japanese(), seed=seed, rng=rng)


__all__ = [
    'UnitBasedModel',
    'JapaneseGenerator',
]
