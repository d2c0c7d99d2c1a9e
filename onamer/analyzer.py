#!/usr/bin/env python3
"""
Word analysis for generated names.

Classifies words by the characters at each adjacent position:

- hand balance: every adjacent pair is typed with alternating hands on a
  QWERTY keyboard (one key from each half)
- smoothness: phonetic smoothness of a pair. Not implemented yet, so no
  pair satisfies it (see SMOOTHNESS_SUPPORTED)

With both criteria selected a pair passes if it meets either one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List

logger = logging.getLogger(__name__)

LEFT_HAND = frozenset("qwertasdfgzxcvb")
RIGHT_HAND = frozenset("yuiophjklnm")

# The smoothness predicate is a stub that rejects every pair.
SMOOTHNESS_SUPPORTED = False


def is_left_hand(c: str) -> bool:
    return c in LEFT_HAND


def is_right_hand(c: str) -> bool:
    return c in RIGHT_HAND


def is_hand_balanced_pair(a: str, b: str) -> bool:
    """True if the two characters are typed with different hands."""
    return (is_left_hand(a) and is_right_hand(b)) or (is_right_hand(a) and is_left_hand(b))


def is_smooth_pair(a: str, b: str) -> bool:
    """Phonetic smoothness of a pair. Always False until rules are defined."""
    return False


@dataclass(frozen=True)
class AnalysisFlags:
    """Which pair predicates a word must satisfy."""
    hand_balance: bool = False
    smoothness: bool = False

    @property
    def any(self) -> bool:
        return self.hand_balance or self.smoothness


class WordAnalyzer:
    """
    Accepts or rejects words by their adjacent character pairs.

    A word is accepted iff every adjacent pair passes the selected
    predicates. Words shorter than two characters have no pairs and are
    always accepted, as is every word when no predicate is selected.
    """

    def __init__(self, flags: AnalysisFlags = None):
        self.flags = flags or AnalysisFlags()
        if self.flags.smoothness and not SMOOTHNESS_SUPPORTED:
            logger.warning("Smoothness analysis is not implemented; no character pair will pass it")

    def pair_ok(self, a: str, b: str) -> bool:
        if self.flags.hand_balance and is_hand_balanced_pair(a, b):
            return True
        if self.flags.smoothness and is_smooth_pair(a, b):
            return True
        return False

    def accepts(self, word: str) -> bool:
        if not self.flags.any:
            return True
        # all() stops at the first failing pair
        return all(self.pair_ok(a, b) for a, b in zip(word, word[1:]))

    def analyze_batch(self, words: Iterable[str]) -> Dict[str, bool]:
        """Map each word to its verdict. Repeated words share one entry."""
        verdicts = {word: self.accepts(word) for word in words}
        logger.debug("Analyzed %d distinct words: %d accepted (%s)",
                     len(verdicts), sum(verdicts.values()), self.flags)
        return verdicts

    def filter_words(self, words: Iterable[str]) -> List[str]:
        """Accepted words in input order, duplicates kept."""
        return [word for word in words if self.accepts(word)]


def analyze_batch(words: Iterable[str],
                  hand_balance: bool = False,
                  smoothness: bool = False) -> Dict[str, bool]:
    """Classify a batch of words; see WordAnalyzer."""
    return WordAnalyzer(AnalysisFlags(hand_balance, smoothness)).analyze_batch(words)


def filter_words(words: Iterable[str], flags: AnalysisFlags) -> List[str]:
    """Keep the words accepted under flags, in input order."""
    return WordAnalyzer(flags).filter_words(words)


__all__ = [
    "LEFT_HAND",
    "RIGHT_HAND",
    "SMOOTHNESS_SUPPORTED",
    "is_left_hand",
    "is_right_hand",
    "is_hand_balanced_pair",
    "is_smooth_pair",
    "AnalysisFlags",
    "WordAnalyzer",
    "analyze_batch",
    "filter_words",
]
