#!/usr/bin/env python3
"""
Romanizer
=========
Renders an assembled word as a phonetic string and a romanized spelling.

Romanization replaces whole bracketed phonemes, so a key never matches
inside a longer phoneme (``[t]`` does not touch ``[tʃ]``) and the order in
which keys are applied does not change the result. Phonemes without an
entry keep their phonetic spelling.
"""

from typing import Mapping, Tuple

from .phonology import PhonologyDescriptor
from .tokens import BOUNDARY_MARKER, STRESS_MARKER, bracket, strip_brackets

IPA_STRESS = 'ˈ'
IPA_SYLLABLE_BREAK = '.'


class Romanizer:
    """
    Renders words for one romanization table.

    Usage:
        romanizer = Romanizer(descriptor)
        phonetic, romanized = romanizer.render(word)
    """

    def __init__(self, descriptor: PhonologyDescriptor):
        self.descriptor = descriptor
        self._replacements = self._compile(descriptor.romanization)

    @staticmethod
    def _compile(romanization: Mapping[str, str]) -> Tuple[Tuple[str, str], ...]:
        return tuple((bracket(key), value) for key, value in romanization.items())

    def phonetic(self, word) -> str:
        """Phonemes only: markers and brackets removed."""
        return strip_brackets(''.join(word.segments()))

    def romanized(self, word) -> str:
        """Spelling from the romanization table, markers and brackets removed."""
        return ''.join(self.romanize_token(token) for token in word.segments())

    def romanize_token(self, token: str) -> str:
        for key, grapheme in self._replacements:
            if key in token:
                token = token.replace(key, grapheme)
        return strip_brackets(token)

    def transcription(self, word) -> str:
        """Phonetic form keeping stress (ˈ) and boundaries (.)."""
        parts = []
        for token in word.tokens:
            if token == STRESS_MARKER:
                parts.append(IPA_STRESS)
            elif token == BOUNDARY_MARKER:
                parts.append(IPA_SYLLABLE_BREAK)
            else:
                parts.append(strip_brackets(token))
        return ''.join(parts)

    def render(self, word) -> Tuple[str, str]:
        """
        Render a word.

        Returns
        -------
        tuple[str, str]
            (phonetic, romanized)
        """
        return self.phonetic(word), self.romanized(word)
