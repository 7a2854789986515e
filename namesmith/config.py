#!/usr/bin/env python3
"""
Phonology Configuration
=======================
Loads phonology files into PhonologyDescriptor objects and parses
affix lists given on the command line.

A phonology reference is either a path to a YAML/JSON file or the name of
a bundled phonology (see ``namesmith.phonologies``). ``.json`` files are
read with the json module, ``.yaml``/``.yml`` files with PyYAML.

File format (YAML shown; the same keys work in JSON):

    consonants: [p, t, k, s, m, n]
    onsets: ["@"]          # "@" = every consonant
    codas: [n, s]
    vowels: [a, i, u, a͡i]
    structures: [cv, cvc]
    stressed: -1           # negative counts from the end
    max_syllable_count: 3
    romanization:
      a͡i: ai
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .errors import ConfigError
from .generators.phonology import PhonologyDescriptor
from .phonologies import load_bundled, parse_phonology_text

logger = logging.getLogger(__name__)

ALL_CONSONANTS = "@"

REQUIRED_KEYS = (
    'consonants', 'onsets', 'codas', 'vowels',
    'structures', 'stressed', 'romanization', 'max_syllable_count',
)

KEY_ALIASES = {
    'maxSyllableCount': 'max_syllable_count',
}


# =============================================================================
# Phonology Loading
# =============================================================================

def read_phonology_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a phonology file into a raw mapping."""
    path = Path(path).expanduser()
    if not path.exists():
        raise ConfigError(f"Phonology file not found: {path}")
    try:
        data = parse_phonology_text(path.read_text(encoding='utf-8'), path.suffix)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot parse phonology file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read phonology file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Phonology file {path} must contain a mapping")
    return data


def resolve_inventory(values: List[str], consonants: List[str]) -> List[str]:
    """Expand the ``["@"]`` sentinel to the full consonant inventory."""
    if len(values) == 1 and values[0] == ALL_CONSONANTS:
        return list(consonants)
    return list(values)


def descriptor_from_dict(data: Dict[str, Any], source: str = "<dict>") -> PhonologyDescriptor:
    """
    Build a descriptor from a raw phonology mapping.

    Raises
    ------
    ConfigError
        If a key is missing or has the wrong type, or the phonology fails
        validation (EmptyInventory and MalformedTemplate are ConfigErrors).
    """
    data = {KEY_ALIASES.get(k, k): v for k, v in data.items()}
    missing = [k for k in REQUIRED_KEYS if k not in data]
    if missing:
        raise ConfigError(f"{source}: missing required key(s): {', '.join(missing)}")

    for key in ('consonants', 'onsets', 'codas', 'vowels', 'structures'):
        if not isinstance(data[key], list):
            raise ConfigError(f"{source}: '{key}' must be a list")
    if not isinstance(data['romanization'], dict):
        raise ConfigError(f"{source}: 'romanization' must be a mapping")

    consonants = [str(c) for c in data['consonants']]
    try:
        descriptor = PhonologyDescriptor(
            consonants=consonants,
            onsets=resolve_inventory([str(o) for o in data['onsets']], consonants),
            codas=resolve_inventory([str(c) for c in data['codas']], consonants),
            vowels=[str(v) for v in data['vowels']],
            structures=[str(s) for s in data['structures']],
            stressed=data['stressed'],
            romanization={str(k): str(v) for k, v in data['romanization'].items()},
            max_syllable_count=data['max_syllable_count'],
            name=str(data.get('name') or Path(source).stem),
        )
    except ConfigError as e:
        raise type(e)(f"{source}: {e}") from e
    logger.debug("Loaded phonology '%s' from %s", descriptor.name, source)
    return descriptor


def load_phonology(reference: Union[str, Path]) -> PhonologyDescriptor:
    """
    Load a phonology by file path or bundled name.

    Parameters
    ----------
    reference : str or Path
        A path to a ``.yaml``/``.yml``/``.json`` file, or the name of a
        bundled phonology such as ``english``.
    """
    ref = str(reference)
    path = Path(ref).expanduser()
    if path.suffix or path.exists():
        return descriptor_from_dict(read_phonology_file(path), source=str(path))

    try:
        data = load_bundled(ref)
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot parse bundled phonology '{ref}': {e}") from e
    return descriptor_from_dict(data, source=ref)


# =============================================================================
# Affix Lists
# =============================================================================

def parse_affix_list(text: str) -> List[str]:
    """
    Split a comma-separated affix list.

    Quote characters are discarded and empty entries dropped, so
    ``"'+ka', -a͡i"`` becomes ``['+ka', '-a͡i']``. Tags are checked later by
    ``AffixSet``.
    """
    if not text:
        return []
    cleaned = text.replace('"', '').replace("'", '')
    return [entry.strip() for entry in cleaned.split(',') if entry.strip()]


__all__ = [
    'load_phonology',
    'descriptor_from_dict',
    'read_phonology_file',
    'resolve_inventory',
    'parse_affix_list',
]
