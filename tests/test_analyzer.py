"""
Tests for Word Analysis
=======================
Tests for the hand-balance and smoothness predicates in onamer/analyzer.py.
"""

import logging

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from onamer.analyzer import (
    LEFT_HAND,
    RIGHT_HAND,
    SMOOTHNESS_SUPPORTED,
    AnalysisFlags,
    WordAnalyzer,
    analyze_batch,
    filter_words,
    is_hand_balanced_pair,
    is_left_hand,
    is_right_hand,
    is_smooth_pair,
)
from onamer.generators import create_model


HAND = AnalysisFlags(hand_balance=True)
SMOOTH = AnalysisFlags(smoothness=True)
BOTH = AnalysisFlags(hand_balance=True, smoothness=True)
NONE = AnalysisFlags()


class TestHandSets:
    """Tests for the keyboard hand sets."""

    def test_sets_are_disjoint(self):
        assert not LEFT_HAND & RIGHT_HAND

    def test_members(self):
        assert is_left_hand('q') and is_left_hand('b')
        assert is_right_hand('y') and is_right_hand('m')
        assert not is_left_hand('p')
        assert is_right_hand('p')

    def test_vowels_split(self):
        # a and e are left-hand keys; i, o, u are right-hand keys
        assert {'a', 'e'} <= LEFT_HAND
        assert {'i', 'o', 'u'} <= RIGHT_HAND

    def test_outside_both(self):
        for c in ('1', '-', 'A', ' '):
            assert not is_left_hand(c) and not is_right_hand(c)


class TestPairPredicates:
    """Tests for pair predicates."""

    def test_left_then_right(self):
        assert is_hand_balanced_pair('f', 'u')

    def test_right_then_left(self):
        assert is_hand_balanced_pair('u', 'f')

    def test_same_hand(self):
        assert not is_hand_balanced_pair('f', 'a')
        assert not is_hand_balanced_pair('k', 'o')

    def test_unknown_character(self):
        assert not is_hand_balanced_pair('f', '1')
        assert not is_hand_balanced_pair('1', 'u')

    def test_smoothness_stub(self):
        assert SMOOTHNESS_SUPPORTED is False
        assert not is_smooth_pair('a', 'b')
        assert not is_smooth_pair('m', 'a')


class TestWordAnalyzer:
    """Tests for whole-word verdicts."""

    def test_single_character_always_accepted(self):
        for flags in (HAND, SMOOTH, BOTH, NONE):
            assert WordAnalyzer(flags).accepts('a')

    def test_empty_word_accepted(self):
        assert WordAnalyzer(HAND).accepts('')

    def test_pat_rejected(self):
        # p-a alternates, a-t are both left-hand keys
        assert not WordAnalyzer(HAND).accepts('pat')

    def test_fu_accepted(self):
        assert WordAnalyzer(HAND).accepts('fu')

    def test_alternating_word(self):
        assert WordAnalyzer(HAND).accepts('tiro')
        assert WordAnalyzer(HAND).accepts('kaje')

    def test_fails_on_late_pair(self):
        assert not WordAnalyzer(HAND).accepts('tirok')
        assert not WordAnalyzer(HAND).accepts('tiroo')

    def test_no_flags_accepts_everything(self):
        analyzer = WordAnalyzer(NONE)
        for word in ('pat', 'zzzz', 'a1b2', 'xylophone'):
            assert analyzer.accepts(word)

    def test_smoothness_only_rejects_multi_char(self):
        analyzer = WordAnalyzer(SMOOTH)
        assert not analyzer.accepts('fu')
        assert analyzer.accepts('f')

    def test_both_flags_is_or(self):
        # Smoothness never passes, so OR reduces to hand balance
        analyzer = WordAnalyzer(BOTH)
        assert analyzer.accepts('fu')
        assert not analyzer.accepts('pat')

    def test_uppercase_not_folded(self):
        assert not WordAnalyzer(HAND).accepts('Fu')

    def test_default_flags(self):
        assert WordAnalyzer().flags == NONE

    def test_smoothness_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger='onamer.analyzer'):
            WordAnalyzer(SMOOTH)
        assert 'not implemented' in caplog.text

    def test_no_warning_for_hand_balance(self, caplog):
        with caplog.at_level(logging.WARNING, logger='onamer.analyzer'):
            WordAnalyzer(HAND)
        assert caplog.text == ''


class TestAnalyzeBatch:
    """Tests for batch analysis."""

    def test_mapping(self):
        result = analyze_batch(['fu', 'pat', 'a'], hand_balance=True)
        assert result == {'fu': True, 'pat': False, 'a': True}

    def test_duplicates_collapse(self):
        result = analyze_batch(['fu', 'fu', 'pat'], hand_balance=True)
        assert len(result) == 2

    def test_no_flags(self):
        words = ['pat', 'zzz', 'qwerty']
        assert analyze_batch(words) == {w: True for w in words}

    def test_idempotent(self):
        words = create_model('english', seed=11).generate(count=50, min_syllables=1, max_syllables=3)
        first = analyze_batch(words, hand_balance=True)
        second = analyze_batch(words, hand_balance=True)
        assert first == second

    def test_input_not_mutated(self):
        words = ['fu', 'pat']
        analyze_batch(words, hand_balance=True)
        assert words == ['fu', 'pat']

    def test_accepts_generator(self):
        result = analyze_batch((w for w in ['fu', 'pat']), hand_balance=True)
        assert result == {'fu': True, 'pat': False}

    @pytest.mark.parametrize('language', ['english', 'japanese', 'phonotactic'])
    def test_generated_words_consistent(self, language):
        words = create_model(language, seed=3).generate(count=40, min_syllables=1, max_syllables=3)
        verdicts = analyze_batch(words, hand_balance=True)
        for word, ok in verdicts.items():
            expected = all(is_hand_balanced_pair(a, b) for a, b in zip(word, word[1:]))
            assert ok == expected


class TestFilterWords:
    """Tests for filter_words()."""

    def test_keeps_order_and_duplicates(self):
        words = ['fu', 'pat', 'fu', 'ki']
        assert filter_words(words, HAND) == ['fu', 'fu']

    def test_no_flags_keeps_all(self):
        words = ['pat', 'pat']
        assert filter_words(words, NONE) == words
