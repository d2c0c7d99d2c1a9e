#!/usr/bin/env python3
"""
Phoneme Inventory Loader
========================
Loads per-language phoneme inventories from YAML files for the word models.

Usage:
    from onamer.generators.phonemes import (
        load_english, load_japanese, load_phonotactic, get_inventory
    )

    english = load_english()
    english.vowel_pool        # ('a', 'e', 'i', 'o', 'u')
    japanese = get_inventory('japanese')
    japanese.start_unit_pool  # units allowed to open a word
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

import yaml

from onamer.errors import ConfigurationError

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Path
# =============================================================================

PHONEMES_DIR = Path(__file__).parent

LETTER_MODEL = 'letter'
MORA_MODEL = 'mora'
MODEL_KINDS = (LETTER_MODEL, MORA_MODEL)


# =============================================================================
# Inventory
# =============================================================================

@dataclass(frozen=True)
class PhonemeInventory:
    """
    Immutable phoneme inventory for one language model.

    Letter models need vowels and consonants (single characters) and may
    carry cluster-start tokens. Mora models need syllable units; a subset
    of them may be start-restricted, but at least one unit must remain
    eligible to open a word.
    """
    name: str
    model: str = LETTER_MODEL
    vowels: FrozenSet[str] = frozenset()
    consonants: FrozenSet[str] = frozenset()
    syllable_units: FrozenSet[str] = frozenset()
    start_restricted_units: FrozenSet[str] = frozenset()
    cluster_starts: FrozenSet[str] = frozenset()

    # Sorted draw pools; random draws index into these so seeded runs
    # do not depend on set iteration order.
    vowel_pool: Tuple[str, ...] = field(init=False, repr=False)
    consonant_pool: Tuple[str, ...] = field(init=False, repr=False)
    unit_pool: Tuple[str, ...] = field(init=False, repr=False)
    start_unit_pool: Tuple[str, ...] = field(init=False, repr=False)
    cluster_pool: Tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self):
        if self.model not in MODEL_KINDS:
            raise ConfigurationError(
                f"{self.name}: unknown model '{self.model}' "
                f"(expected one of: {', '.join(MODEL_KINDS)})"
            )
        if self.model == LETTER_MODEL:
            self._check_letters('vowels', self.vowels)
            self._check_letters('consonants', self.consonants)
        else:
            if not self.syllable_units:
                raise ConfigurationError(f"{self.name}: syllable units must not be empty")
            if '' in self.syllable_units:
                raise ConfigurationError(f"{self.name}: empty string is not a syllable unit")

        unknown = self.start_restricted_units - self.syllable_units
        if unknown:
            raise ConfigurationError(
                f"{self.name}: start-restricted units not in unit set: "
                f"{', '.join(sorted(unknown))}"
            )
        if self.syllable_units and self.start_restricted_units >= self.syllable_units:
            raise ConfigurationError(
                f"{self.name}: every syllable unit is start-restricted, "
                f"no unit can open a word"
            )
        if self.cluster_starts:
            self._check_clusters()

        # Frozen dataclass: derived fields go through object.__setattr__
        object.__setattr__(self, 'vowel_pool', tuple(sorted(self.vowels)))
        object.__setattr__(self, 'consonant_pool', tuple(sorted(self.consonants)))
        object.__setattr__(self, 'unit_pool', tuple(sorted(self.syllable_units)))
        object.__setattr__(self, 'start_unit_pool', tuple(
            sorted(self.syllable_units - self.start_restricted_units)))
        object.__setattr__(self, 'cluster_pool', tuple(sorted(self.cluster_starts)))

    def _check_letters(self, label: str, letters: FrozenSet[str]):
        if not letters:
            raise ConfigurationError(f"{self.name}: {label} must not be empty")
        bad = [c for c in letters if len(c) != 1]
        if bad:
            raise ConfigurationError(
                f"{self.name}: {label} must be single characters, got {', '.join(sorted(bad))}"
            )

    def _check_clusters(self):
        """Cluster starts are consonant groups of two or more letters, for letter models only."""
        if self.model != LETTER_MODEL:
            raise ConfigurationError(f"{self.name}: cluster starts need a letter model, not {self.model}")
        short = [c for c in self.cluster_starts if len(c) < 2]
        if short:
            raise ConfigurationError(
                f"{self.name}: cluster tokens need at least two letters, got "
                f"{', '.join(repr(c) for c in sorted(short))}"
            )
        voweled = [c for c in self.cluster_starts if set(c) & self.vowels]
        if voweled:
            raise ConfigurationError(
                f"{self.name}: cluster tokens must not contain vowels, got {', '.join(sorted(voweled))}"
            )

    @property
    def is_letter_based(self) -> bool:
        return self.model == LETTER_MODEL

    @property
    def has_clusters(self) -> bool:
        return bool(self.cluster_starts)


# =============================================================================
# Builders
# =============================================================================

def _as_list(value: Any, context: str) -> List[Any]:
    """A YAML list field; None means empty. A bare string is not split into letters."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigurationError(f"{context} must be a list, got {type(value).__name__}")
    return value


def _as_mapping(value: Any, context: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"{context} must be a mapping, got {type(value).__name__}")
    return value


def _unique(items: Iterable[Any], context: str) -> FrozenSet[str]:
    """Collapse a YAML list into a frozenset, rejecting duplicates and non-strings."""
    seen: List[str] = []
    for item in items or []:
        if not isinstance(item, str):
            # YAML 1.1 loads bare yes/no/on/off as booleans
            raise ConfigurationError(f"{context}: entry {item!r} is not a string (quote it in YAML)")
        if item in seen:
            raise ConfigurationError(f"{context}: duplicate entry '{item}'")
        seen.append(item)
    return frozenset(seen)


def build_inventory(name: str, raw: Dict[str, Any]) -> PhonemeInventory:
    """
    Build a validated inventory from a raw config mapping.

    The mapping has the layout of the bundled YAML files:

        model: letter | mora
        phonetics: {vowels: [...], consonants: [...]}
        clusters: {start: [...]}
        units: {group: [...], ...}
        not_for_start: [group, ...]
    """
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{name}: phoneme config must be a mapping")

    model = raw.get('model', LETTER_MODEL)
    phonetics = _as_mapping(raw.get('phonetics'), f"{name}.phonetics")
    clusters = _as_mapping(raw.get('clusters'), f"{name}.clusters")

    units: List[str] = []
    restricted: List[str] = []
    unit_groups = _as_mapping(raw.get('units'), f"{name}.units")
    restricted_groups = set(_as_list(raw.get('not_for_start'), f"{name}.not_for_start"))
    missing = restricted_groups - set(unit_groups)
    if missing:
        raise ConfigurationError(
            f"{name}.not_for_start names unknown unit groups: {', '.join(sorted(missing))}"
        )
    for group, group_units in unit_groups.items():
        group_units = _as_list(group_units, f"{name}.units.{group}")
        units.extend(group_units)
        if group in restricted_groups:
            restricted.extend(group_units)

    inventory = PhonemeInventory(
        name=raw.get('name', name),
        model=model,
        vowels=_unique(_as_list(phonetics.get('vowels'), f"{name}.phonetics.vowels"),
                       f"{name}.phonetics.vowels"),
        consonants=_unique(_as_list(phonetics.get('consonants'), f"{name}.phonetics.consonants"),
                           f"{name}.phonetics.consonants"),
        syllable_units=_unique(units, f"{name}.units"),
        start_restricted_units=_unique(restricted, f"{name}.not_for_start"),
        cluster_starts=_unique(_as_list(clusters.get('start'), f"{name}.clusters.start"),
                               f"{name}.clusters.start"),
    )
    logger.debug(
        "Built %s inventory '%s': %d vowels, %d consonants, %d units (%d start-eligible), %d clusters",
        inventory.model, inventory.name, len(inventory.vowels), len(inventory.consonants),
        len(inventory.syllable_units), len(inventory.start_unit_pool), len(inventory.cluster_starts),
    )
    return inventory


# =============================================================================
# Loader Functions
# =============================================================================

def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from the phonemes directory."""
    filepath = PHONEMES_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Phoneme config not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=1)
def load_english() -> PhonemeInventory:
    """Load the English-like letter inventory."""
    return build_inventory('english', _load_yaml('english.yaml'))


@lru_cache(maxsize=1)
def load_japanese() -> PhonemeInventory:
    """Load the Japanese-like mora inventory."""
    return build_inventory('japanese', _load_yaml('japanese.yaml'))


@lru_cache(maxsize=1)
def load_phonotactic() -> PhonemeInventory:
    """Load the generic phonotactic inventory with onset clusters."""
    return build_inventory('phonotactic', _load_yaml('phonotactic.yaml'))


_LOADERS = {
    'english': load_english,
    'japanese': load_japanese,
    'phonotactic': load_phonotactic,
}


def reload_configs():
    """Clear cached inventories and reload from disk."""
    load_english.cache_clear()
    load_japanese.cache_clear()
    load_phonotactic.cache_clear()


def list_inventories() -> List[str]:
    """Names of the bundled inventories."""
    return sorted(_LOADERS)


def get_inventory(name: str) -> Optional[PhonemeInventory]:
    """Load a bundled inventory by name, or None if there is no such inventory."""
    loader = _LOADERS.get(name.lower())
    return loader() if loader else None


__all__ = [
    'PHONEMES_DIR',
    'LETTER_MODEL',
    'MORA_MODEL',
    'PhonemeInventory',
    'build_inventory',
    'load_english',
    'load_japanese',
    'load_phonotactic',
    'reload_configs',
    'list_inventories',
    'get_inventory',
]
