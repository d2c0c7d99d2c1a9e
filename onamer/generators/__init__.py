#!/usr/bin/env python3
"""
Word Generators
===============
Provides one word model per language:
- english: letter-based CV/VC/CVC syllables
- japanese: mora units with start-restricted geminates
- phonotactic: letter-based syllables with word-initial clusters

Select a model by name with create_model('japanese', seed=42).
"""

from enum import Enum
from typing import Union

from onamer.errors import ConfigurationError
from .entropy import (
    RandomSource,
    TrueRandom,
    SeededRandom,
    get_rng,
)
from .phonemes import (
    PhonemeInventory,
    build_inventory,
    get_inventory,
    list_inventories,
    reload_configs,
)
from .base_generator import (
    GeneratedWord,
    SyllablePattern,
    SyllableRange,
    WordModel,
)
from .letter_generator import (
    LETTER_PATTERNS,
    LetterBasedModel,
    EnglishGenerator,
    PhonotacticGenerator,
)
from .mora_generator import (
    UnitBasedModel,
    JapaneseGenerator,
)


class Language(Enum):
    """Supported language models."""
    ENGLISH = "english"
    JAPANESE = "japanese"
    PHONOTACTIC = "phonotactic"

    @classmethod
    def parse(cls, value: Union[str, 'Language']) -> 'Language':
        """Parse a language selector, ignoring case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            available = ', '.join(lang.value for lang in cls)
            raise ConfigurationError(
                f"Provided language not supported: '{value}'. Available: {available}"
            ) from None


_MODELS = {
    Language.ENGLISH: EnglishGenerator,
    Language.JAPANESE: JapaneseGenerator,
    Language.PHONOTACTIC: PhonotacticGenerator,
}


def create_model(language: Union[str, Language] = Language.ENGLISH,
                 seed: int = None,
                 rng: RandomSource = None) -> WordModel:
    """Build the word model for a language selector."""
    return _MODELS[Language.parse(language)](seed=seed, rng=rng)


__all__ = [
    # Randomness
    'RandomSource',
    'TrueRandom',
    'SeededRandom',
    'get_rng',
    # Inventories
    'PhonemeInventory',
    'build_inventory',
    'get_inventory',
    'list_inventories',
    'reload_configs',
    # Base
    'GeneratedWord',
    'SyllablePattern',
    'SyllableRange',
    'WordModel',
    # Models
    'LETTER_PATTERNS',
    'LetterBasedModel',
    'EnglishGenerator',
    'PhonotacticGenerator',
    'UnitBasedModel',
    'JapaneseGenerator',
    # Selection
    'Language',
    'create_model',
]
