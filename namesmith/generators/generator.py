#!/usr/bin/env python3
"""
Name Generator
==============
Runs the full pipeline for each requested word:

    WordAssembler (SyllableBuilder per syllable) -> AffixProcessor -> Romanizer

Every word of a batch shares one random source, so a seeded batch is
reproducible as long as the draw order stays the same.

Usage:
    from namesmith.generators import NameGenerator, RandomSource

    gen = NameGenerator(descriptor, affixes=['+ka'], rng=RandomSource(seed=7))
    for word in gen.generate(count=5):
        print(word.format())
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Dict, Iterable, List, Optional, Union

from .affixes import AffixSet
from .entropy import RandomSource
from .phonology import PhonologyDescriptor
from .romanizer import Romanizer
from .word import WordAssembler

logger = logging.getLogger(__name__)

DEFAULT_LINE_FORMAT = "{romanized} /{phonetic}/"


@dataclass
class GeneratedWord:
    """A generated word with its renderings."""
    romanized: str
    phonetic: str
    transcription: str = ""
    syllables: int = 0
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    tokens: List[str] = field(default_factory=list)

    def format(self, line_format: str = DEFAULT_LINE_FORMAT) -> str:
        return line_format.format(**self.to_dict())

    def to_dict(self) -> Dict:
        return asdict(self)


class NameGenerator:
    """
    Generates words for one phonology.

    Parameters
    ----------
    descriptor : PhonologyDescriptor
        Phonology to generate from.
    affixes : AffixSet or iterable of str, optional
        Tagged affixes (``+`` prefix, ``-`` suffix). Strings are validated
        immediately, so a bad list fails before any word is generated.
    rng : RandomSource, optional
        Shared random source. Defaults to an unseeded source.
    log : logging.Logger, optional
        Diagnostic sink for generation trace lines.
    """

    def __init__(self,
                 descriptor: PhonologyDescriptor,
                 affixes: Union[AffixSet, Iterable[str], None] = None,
                 rng: RandomSource = None,
                 log: Optional[logging.Logger] = None):
        self.descriptor = descriptor
        self.log = log or logger
        if affixes is None:
            affixes = AffixSet()
        elif not isinstance(affixes, AffixSet):
            affixes = AffixSet.from_strings(affixes)
        self.affixes = affixes
        self.rng = rng if rng is not None else RandomSource()
        self.assembler = WordAssembler(descriptor, log=self.log)
        self.romanizer = Romanizer(descriptor)

    def generate_one(self) -> GeneratedWord:
        word = self.assembler.assemble(self.rng, self.affixes)
        phonetic, romanized = self.romanizer.render(word)
        self.log.debug("word:\t%s", word)
        return GeneratedWord(
            romanized=romanized,
            phonetic=phonetic,
            transcription=self.romanizer.transcription(word),
            syllables=word.syllable_count,
            prefix=word.prefix,
            suffix=word.suffix,
            tokens=list(word.tokens),
        )

    def generate(self, count: int = 5) -> List[GeneratedWord]:
        """
        Generate ``count`` words in order.

        Raises
        ------
        ValueError
            If count is negative.
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return [self.generate_one() for _ in range(count)]
