#!/usr/bin/env python3
"""Exceptions raised by onamer."""


class OnamerError(Exception):
    """Base class for all onamer errors."""


class ConfigurationError(OnamerError, ValueError):
    """
    Invalid generation parameters or phoneme inventory.

    Raised before any word is generated: bad syllable ranges, negative
    word counts, unsupported language selectors and inventories that
    cannot produce a word (empty sets, every unit start-restricted).
    """


__all__ = [
    "OnamerError",
    "ConfigurationError",
]
