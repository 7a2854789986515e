#!/usr/bin/env python3
"""
Word Generators
===============
The generation pipeline:
- SyllableBuilder: template -> bracketed phonemes
- WordAssembler: syllable count, templates, stress placement
- AffixProcessor: optional prefix/suffix attachment
- Romanizer: phonetic and romanized renderings
- NameGenerator: runs the pipeline once per requested word
"""

from .affixes import (
    Affix,
    AffixProcessor,
    AffixSet,
)
from .entropy import RandomSource
from .generator import (
    GeneratedWord,
    NameGenerator,
)
from .phonology import (
    PhonologyDescriptor,
    template_slots,
    validate_template,
)
from .romanizer import Romanizer
from .syllable import SyllableBuilder
from .tokens import (
    BOUNDARY_MARKER,
    STRESS_MARKER,
    TIE_BAR,
    parse_affix,
)
from .word import (
    Word,
    WordAssembler,
)

__all__ = [
    # Phonology
    'PhonologyDescriptor',
    'template_slots',
    'validate_template',
    # Pipeline
    'SyllableBuilder',
    'Word',
    'WordAssembler',
    'Affix',
    'AffixSet',
    'AffixProcessor',
    'Romanizer',
    'NameGenerator',
    'GeneratedWord',
    # Randomness
    'RandomSource',
    # Tokens
    'BOUNDARY_MARKER',
    'STRESS_MARKER',
    'TIE_BAR',
    'parse_affix',
]
