#!/usr/bin/env python3
"""
Namesmith - Constructed-Language Word Generator
===============================================

Generates pronounceable words from a declarative phonology: consonant and
vowel inventories, syllable templates, a stress rule, optional affixes and
a phoneme-to-spelling table. Each word comes back as a phonetic string
and a romanized spelling.

Quick Start
-----------
    from namesmith import load_phonology, NameGenerator, RandomSource

    phonology = load_phonology("english")
    gen = NameGenerator(phonology, affixes=["-ən"], rng=RandomSource(seed=1))

    for word in gen.generate(count=5):
        print(word.romanized, f"/{word.phonetic}/")

Modules
-------
    namesmith.generators  - Syllable, word, affix and romanization pipeline
    namesmith.config      - Phonology file loading and affix-list parsing
    namesmith.phonologies - Bundled phonologies
    namesmith.cli         - Command-line interface

CLI Usage
---------
    python -m namesmith generate -n 10
    python -m namesmith generate -p sylvan -a "+ka,-a͡i"
    python -m namesmith phonology english
"""

__version__ = "0.4.0"
__author__ = "Namesmith"

from .config import load_phonology, descriptor_from_dict, parse_affix_list
from .errors import (
    NamesmithError,
    ConfigError,
    EmptyInventory,
    MalformedTemplate,
    AffixTagMismatch,
    MalformedAffix,
)
from .generators import (
    AffixSet,
    GeneratedWord,
    NameGenerator,
    PhonologyDescriptor,
    RandomSource,
)
from .phonologies import list_phonologies


def generate(phonology="english", count: int = 5, affixes=None, seed: int = None):
    """
    Generate words in one call.

    Parameters
    ----------
    phonology : str, Path or PhonologyDescriptor
        Phonology file, bundled phonology name, or a loaded descriptor.
    count : int
        Number of words.
    affixes : list of str, optional
        Tagged affixes (``+`` prefix, ``-`` suffix).
    seed : int, optional
        Seed for a reproducible batch.
    """
    if not isinstance(phonology, PhonologyDescriptor):
        phonology = load_phonology(phonology)
    gen = NameGenerator(phonology, affixes=affixes, rng=RandomSource(seed))
    return gen.generate(count)


__all__ = [
    '__version__',
    'generate',
    'load_phonology',
    'descriptor_from_dict',
    'parse_affix_list',
    'list_phonologies',
    'PhonologyDescriptor',
    'NameGenerator',
    'GeneratedWord',
    'AffixSet',
    'RandomSource',
    'NamesmithError',
    'ConfigError',
    'EmptyInventory',
    'MalformedTemplate',
    'AffixTagMismatch',
    'MalformedAffix',
]
