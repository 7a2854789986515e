#!/usr/bin/env python3
"""
Word Assembly
=============
Chooses how many syllables a word has, which template each syllable uses,
and where the stress marker goes.

Draw order per word: syllable count, then for each syllable its template
followed by its slot phonemes. Affix draws (see ``affixes``) come after.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .affixes import AffixProcessor, AffixSet
from .phonology import PhonologyDescriptor
from .syllable import SyllableBuilder
from .tokens import BOUNDARY_MARKER, STRESS_MARKER, is_marker

logger = logging.getLogger(__name__)


@dataclass
class Word:
    """An assembled word as an ordered list of tokens."""
    tokens: List[str] = field(default_factory=list)
    syllable_count: int = 0
    prefix: Optional[str] = None
    suffix: Optional[str] = None

    def insert(self, index: int, token: str):
        self.tokens.insert(index, token)

    def append(self, token: str):
        self.tokens.append(token)

    @property
    def ends_with_boundary(self) -> bool:
        return bool(self.tokens) and self.tokens[-1] == BOUNDARY_MARKER

    @property
    def stress_count(self) -> int:
        return self.tokens.count(STRESS_MARKER)

    def segments(self) -> List[str]:
        """Tokens with stress and boundary markers removed."""
        return [t for t in self.tokens if not is_marker(t)]

    def __str__(self) -> str:
        return ''.join(self.tokens)


class WordAssembler:
    """
    Assembles words from syllable templates.

    Parameters
    ----------
    descriptor : PhonologyDescriptor
        Phonology to draw from.
    builder : SyllableBuilder, optional
        Syllable builder to use; one is created for the descriptor if omitted.
    log : logging.Logger, optional
        Diagnostic sink for trace lines.
    """

    def __init__(self,
                 descriptor: PhonologyDescriptor,
                 builder: SyllableBuilder = None,
                 log: Optional[logging.Logger] = None):
        self.descriptor = descriptor
        self.log = log or logger
        self.builder = builder or SyllableBuilder(descriptor, log=self.log)

    def assemble(self, rng, affixes: AffixSet = None) -> Word:
        """
        Build one word.

        The stress marker precedes the stressed syllable; boundary markers
        separate syllables and never sit at either edge unless an affix is
        attached.

        Parameters
        ----------
        rng : RandomSource
            Shared random source.
        affixes : AffixSet, optional
            Affixes to draw from after the stem is built.
        """
        syllable_count = rng.randint(1, self.descriptor.max_syllable_count)
        self.log.debug("syllable_count:\t%d", syllable_count)

        word = Word(syllable_count=syllable_count)
        for i in range(syllable_count):
            if self.descriptor.is_stressed(i, syllable_count):
                word.append(STRESS_MARKER)

            template = rng.choice(self.descriptor.structures)
            self.log.debug("syllable:\t%s", template)
            word.append(self.builder.build(template, rng))

            if i != syllable_count - 1:
                word.append(BOUNDARY_MARKER)

        if affixes:
            AffixProcessor(affixes, log=self.log).apply(word, rng)
        return word
