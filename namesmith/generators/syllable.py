#!/usr/bin/env python3
"""
Syllable Builder
================
Expands one syllable template (e.g. ``ccvc``) into bracketed phonemes.

Slots before the vowel draw from the onset inventory, the vowel slot from
the vowels, and slots after it from the coda inventory. Draws happen left
to right, are independent, and may repeat.

Onset ordering
--------------
Each onset draw is inserted at the *front* of the syllable, so in a
cluster the last onset drawn ends up first: for ``ccv`` with onset draws
``s`` then ``t`` the syllable reads ``[t][s][a]``. This matches the
established output of the generator and is kept as-is.
"""

import logging
from typing import List, Optional, Sequence

from ..errors import EmptyInventory
from .phonology import PhonologyDescriptor, template_slots
from .tokens import bracket

logger = logging.getLogger(__name__)


class SyllableBuilder:
    """
    Builds syllables for one phonology.

    Usage:
        builder = SyllableBuilder(descriptor)
        builder.build('cvc', rng)   # -> '[k][a][n]'
    """

    def __init__(self, descriptor: PhonologyDescriptor, log: Optional[logging.Logger] = None):
        self.descriptor = descriptor
        self.log = log or logger

    def build_tokens(self, template: str, rng) -> List[str]:
        """
        Expand a template into its bracketed phoneme tokens.

        Only the first 'v' is the nucleus; any later 'v' is treated as a
        coda slot. Descriptors reject such templates, so this only matters
        for templates passed in directly.

        Raises
        ------
        MalformedTemplate
            If the template has no 'v'.
        EmptyInventory
            If an inventory a slot needs is empty.
        """
        normalized = template.lower()
        vowel_index, _ = template_slots(normalized)
        self.log.debug("vowel_index:\t%d", vowel_index)

        tokens = []
        for index in range(len(normalized)):
            if index == vowel_index:
                vowel = self._draw(self.descriptor.vowels, 'vowels', rng)
                self.log.debug("vowel:\t%s", vowel)
                tokens.append(bracket(vowel))
            elif index < vowel_index:
                onset = self._draw(self.descriptor.onsets, 'onsets', rng)
                self.log.debug("onset:\t%s", onset)
                tokens.insert(0, bracket(onset))
            else:
                coda = self._draw(self.descriptor.codas, 'codas', rng)
                self.log.debug("coda:\t%s", coda)
                tokens.append(bracket(coda))
        return tokens

    def build(self, template: str, rng) -> str:
        """Expand a template into one syllable string."""
        return ''.join(self.build_tokens(template, rng))

    @staticmethod
    def _draw(pool: Sequence[str], inventory: str, rng) -> str:
        if not pool:
            raise EmptyInventory(f"Cannot draw from empty {inventory} inventory")
        return rng.choice(pool)

