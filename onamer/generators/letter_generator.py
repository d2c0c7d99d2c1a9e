#!/usr/bin/env python3
"""
Letter-Based Word Models
========================
Syllables assembled slot by slot from a vowel set and a consonant set:

- CV  (consonant + vowel)
- VC  (vowel + consonant)
- CVC (consonant + vowel + consonant)

The pattern is picked uniformly for every syllable. Inventories that
carry cluster-start tokens (bl, st, ...) flip one coin per word; on
heads, the leading consonant of the first syllable becomes a cluster.
"""

from typing import Any, Dict

from onamer.errors import ConfigurationError
from onamer.settings import get_setting
from .base_generator import SyllablePattern, WordModel
from .entropy import RandomSource
from .phonemes import PhonemeInventory, load_english, load_phonotactic


LETTER_PATTERNS = (SyllablePattern.CV, SyllablePattern.VC, SyllablePattern.CVC)


class LetterBasedModel(WordModel):
    """
    Word model that assembles syllables from consonant/vowel slots.

    Parameters
    ----------
    inventory : PhonemeInventory
        Letter inventory (vowels, consonants, optional cluster starts).
    cluster_start_probability : float, optional
        Chance per word that the first syllable may open with a cluster.
        Defaults to phonotactic.cluster_start_probability from settings.
        Ignored when the inventory has no clusters.
    """

    def __init__(self,
                 inventory: PhonemeInventory,
                 seed: int = None,
                 rng: RandomSource = None,
                 cluster_start_probability: float = None):
        if cluster_start_probability is None:
            cluster_start_probability = get_setting('phonotactic.cluster_start_probability', 0.5)
        cluster_start_probability = float(cluster_start_probability)
        if not 0.0 <= cluster_start_probability <= 1.0:
            raise ConfigurationError(
                f"cluster_start_probability must be within [0, 1], got {cluster_start_probability}"
            )
        self.cluster_start_probability = cluster_start_probability
        super().__init__(inventory, seed=seed, rng=rng)

    def _check_inventory(self, inventory: PhonemeInventory):
        if not inventory.is_letter_based:
            raise ConfigurationError(
                f"{type(self).__name__} needs a letter inventory, '{inventory.name}' is {inventory.model}"
            )

    def _start_options(self) -> Dict[str, Any]:
        if not self.inventory.has_clusters:
            return {}
        return {'cluster_onset': self._rng.random() < self.cluster_start_probability}

    def synthesize_syllable(self,
                            is_word_start: bool = False,
                            cluster_onset: bool = False,
                            pattern: SyllablePattern = None) -> str:
        """
        Produce one syllable.

        Parameters
        ----------
        is_word_start : bool
            Whether the syllable opens the word.
        cluster_onset : bool
            Draw the leading consonant from the cluster-start tokens. Only
            honored on the first syllable of a word.
        pattern : SyllablePattern, optional
            Force a pattern instead of drawing one.
        """
        if pattern is None:
            pattern = self._rng.choice(LETTER_PATTERNS)
        elif pattern not in LETTER_PATTERNS:
            raise ConfigurationError(f"{pattern} is not a letter syllable pattern")

        use_cluster = is_word_start and cluster_onset and self.inventory.has_clusters
        parts = []
        for position, slot in enumerate(pattern.value):
            if slot == 'V':
                parts.append(self._rng.choice(self.inventory.vowel_pool))
            elif position == 0 and use_cluster:
                parts.append(self._rng.choice(self.inventory.cluster_pool))
            else:
                parts.append(self._rng.choice(self.inventory.consonant_pool))
        return ''.join(parts)


class EnglishGenerator(LetterBasedModel):
    """English-like words: plain CV/VC/CVC syllables, no clusters."""

    def __init__(self, seed: int = None, rng: RandomSource = None):
        super().__init__(load_english(), seed=seed, rng=rng)


class PhonotacticGenerator(LetterBasedModel):
    """
    Generic phonotactic words with onset clusters.

    A word like "stoben" opens with the cluster "st"; clusters never
    appear after the first syllable.
    """

    def __init__(self,
                 seed: int = None,
                 rng: RandomSource = None,
                 cluster_start_probability: float = None):
        super().__init__(load_phonotactic(), seed=seed, rng=rng,
                         cluster_start_probability=cluster_start_probability)


__all__ = [
    'LETTER_PATTERNS',
    'LetterBasedModel',
    'EnglishGenerator',
    'PhonotacticGenerator',
]
