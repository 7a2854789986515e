#!/usr/bin/env python3
"""
Namesmith Errors
================
Exceptions raised by phonology loading and word generation.

Configuration problems are detected when a phonology or affix list is
built, never halfway through a batch.
"""


class NamesmithError(Exception):
    """Base class for all namesmith errors."""


class ConfigError(NamesmithError, ValueError):
    """A phonology file or descriptor is unusable."""


class EmptyInventory(ConfigError):
    """An inventory needed for a draw is empty."""


class MalformedTemplate(ConfigError):
    """A syllable template is not a c/v pattern with exactly one vowel."""


class AffixTagMismatch(NamesmithError, ValueError):
    """An affix has a '+'/'-' tag but no phonemes, or is parsed without a tag."""


class MalformedAffix(NamesmithError, ValueError):
    """An affix body cannot be parsed into phoneme tokens."""


__all__ = [
    "NamesmithError",
    "ConfigError",
    "EmptyInventory",
    "MalformedTemplate",
    "AffixTagMismatch",
    "MalformedAffix",
]
