#!/usr/bin/env python3
"""
onamer - Pronounceable Name Generator
=====================================

Generates pronounceable pseudo-words for an English-like, Japanese-like or
generic phonotactic language model, and optionally classifies them by
typing ergonomics.

Quick Start
-----------
    from onamer import Onamer

    namer = Onamer(language="japanese", seed=7)
    words = namer.generate(count=10, min_syllables=2, max_syllables=3)
    verdicts = namer.analyze(words, hand_balance=True)

Modules
-------
    onamer.generators - Phoneme inventories and word models
    onamer.analyzer   - Hand-balance / smoothness word analysis
    onamer.settings   - YAML settings (configs/app.yaml)
    onamer.cli        - Command-line interface

CLI Usage
---------
    python -m onamer -L japanese -c 5 --min 2 --max 4
    python -m onamer --hand-balance --only-accepted -c 20
"""

__version__ = "0.2.0"

from typing import Dict, Iterable, List, Optional, Union

from .errors import OnamerError, ConfigurationError
from .settings import get_setting
from .analyzer import AnalysisFlags, WordAnalyzer, analyze_batch
from .generators import (
    Language,
    RandomSource,
    SeededRandom,
    WordModel,
    create_model,
)


class Onamer:
    """
    Main interface for word generation and analysis.

    Parameters
    ----------
    language : str or Language
        Language model; defaults to generation.language from settings.
    seed : int, optional
        Seed for reproducible output.
    rng : RandomSource, optional
        Explicit random source (takes precedence over seed).

    Examples
    --------
        >>> namer = Onamer("english", seed=1)
        >>> words = namer.generate(count=3)
        >>> len(words)
        3
    """

    def __init__(self,
                 language: Union[str, Language] = None,
                 seed: int = None,
                 rng: RandomSource = None):
        if language is None:
            language = get_setting('generation.language', 'english')
        self._language = Language.parse(language)
        self._model = create_model(self._language, seed=seed, rng=rng)

    @property
    def language(self) -> Language:
        return self._language

    @property
    def model(self) -> WordModel:
        return self._model

    def generate(self,
                 count: int = None,
                 min_syllables: int = None,
                 max_syllables: int = None,
                 needed: Optional[str] = None) -> List[str]:
        """Generate words; see WordModel.generate."""
        return self._model.generate(count=count,
                                    min_syllables=min_syllables,
                                    max_syllables=max_syllables,
                                    needed=needed)

    def analyze(self,
                words: Iterable[str],
                hand_balance: bool = False,
                smoothness: bool = False) -> Dict[str, bool]:
        """Map each word to whether it passes the selected predicates."""
        return analyze_batch(words, hand_balance=hand_balance, smoothness=smoothness)


__all__ = [
    "__version__",
    "Onamer",
    "OnamerError",
    "ConfigurationError",
    "Language",
    "RandomSource",
    "SeededRandom",
    "WordModel",
    "create_model",
    "AnalysisFlags",
    "WordAnalyzer",
    "analyze_batch",
]
