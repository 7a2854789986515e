#!/usr/bin/env python3
"""
Phonology Descriptor
====================
The immutable description of a constructed language's sound system:
inventories, syllable templates, stress rule and romanization table.

Every check that would otherwise fail in the middle of a batch (a
template without a vowel, an empty inventory a template needs) runs once
when the descriptor is built.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from ..errors import ConfigError, EmptyInventory, MalformedTemplate

logger = logging.getLogger(__name__)


# =============================================================================
# Template Alphabet
# =============================================================================

CONSONANT_SLOT = 'c'
VOWEL_SLOT = 'v'
TEMPLATE_ALPHABET = frozenset((CONSONANT_SLOT, VOWEL_SLOT))


def template_slots(template: str) -> Tuple[int, int]:
    """
    Count the onset and coda slots of a template.

    Returns
    -------
    tuple[int, int]
        (slots before the vowel, slots after the vowel)

    Raises
    ------
    MalformedTemplate
        If the template has no vowel slot.
    """
    normalized = template.lower()
    vowel_index = normalized.find(VOWEL_SLOT)
    if vowel_index < 0:
        raise MalformedTemplate(f"Syllable template '{template}' has no vowel slot 'v'")
    return vowel_index, len(normalized) - vowel_index - 1


def validate_template(template: str) -> str:
    """Check that a template is a c/v pattern with exactly one 'v'."""
    if not isinstance(template, str) or not template:
        raise MalformedTemplate(f"Syllable template must be a non-empty string, got {template!r}")
    normalized = template.lower()
    unknown = sorted(set(normalized) - TEMPLATE_ALPHABET)
    if unknown:
        raise MalformedTemplate(
            f"Syllable template '{template}' contains {', '.join(unknown)}; "
            f"only 'c' and 'v' are allowed"
        )
    vowels = normalized.count(VOWEL_SLOT)
    if vowels != 1:
        raise MalformedTemplate(
            f"Syllable template '{template}' must contain exactly one 'v' (found {vowels})"
        )
    return template


# =============================================================================
# Descriptor
# =============================================================================

@dataclass(frozen=True)
class PhonologyDescriptor:
    """
    Read-only phonology shared by every word of a batch.

    ``onsets`` and ``codas`` are already resolved: the ``"@"`` sentinel is
    expanded to ``consonants`` by the loader before this object exists.
    A negative ``stressed`` index counts syllables from the end of the word.
    """
    consonants: Tuple[str, ...]
    onsets: Tuple[str, ...]
    codas: Tuple[str, ...]
    vowels: Tuple[str, ...]
    structures: Tuple[str, ...]
    stressed: int
    romanization: Mapping[str, str]
    max_syllable_count: int
    name: str = ""

    def __post_init__(self):
        # Normalize containers so the descriptor cannot be mutated through them
        for attr in ('consonants', 'onsets', 'codas', 'vowels', 'structures'):
            object.__setattr__(self, attr, _as_tuple(attr, getattr(self, attr)))
        object.__setattr__(self, 'romanization', MappingProxyType(dict(self.romanization)))
        self._validate()

    def _validate(self):
        if isinstance(self.stressed, bool) or not isinstance(self.stressed, int):
            raise ConfigError(f"stressed must be an integer, got {self.stressed!r}")
        if isinstance(self.max_syllable_count, bool) or not isinstance(self.max_syllable_count, int):
            raise ConfigError(
                f"max_syllable_count must be an integer, got {self.max_syllable_count!r}"
            )
        if self.max_syllable_count < 1:
            raise ConfigError(
                f"max_syllable_count must be at least 1, got {self.max_syllable_count}"
            )

        if not self.vowels:
            raise EmptyInventory("vowels must not be empty")
        if not self.structures:
            raise EmptyInventory("structures must list at least one syllable template")

        for template in self.structures:
            validate_template(template)

        if self.max_onset_slots and not self.onsets:
            raise EmptyInventory("onsets must not be empty when a template has an onset slot")
        if self.max_coda_slots and not self.codas:
            raise EmptyInventory("codas must not be empty when a template has a coda slot")

        for key, value in self.romanization.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ConfigError(f"romanization entries must map strings to strings: {key!r}: {value!r}")

        unstressed = self.unstressed_lengths()
        if unstressed:
            logger.warning(
                "stressed=%d is out of range for words of %s syllable(s); they get no stress marker",
                self.stressed, ', '.join(str(n) for n in unstressed),
            )

    @property
    def max_onset_slots(self) -> int:
        return max(template_slots(t)[0] for t in self.structures)

    @property
    def max_coda_slots(self) -> int:
        return max(template_slots(t)[1] for t in self.structures)

    def unstressed_lengths(self) -> Tuple[int, ...]:
        """Word lengths (in syllables) that the stress index never reaches."""
        return tuple(
            n for n in range(2, self.max_syllable_count + 1)
            if not -n <= self.stressed < n
        )

    def is_stressed(self, index: int, syllable_count: int) -> bool:
        """
        Whether syllable ``index`` of a ``syllable_count``-syllable word takes
        the stress marker.

        A positive index matches directly, a negative one counts from the
        end, and a single-syllable word is always stressed.
        """
        return (
            index == self.stressed
            or index == syllable_count + self.stressed
            or syllable_count == 1
        )


def _as_tuple(attr: str, values: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(values, str):
        raise ConfigError(f"{attr} must be a list of strings, got a single string {values!r}")
    try:
        items = tuple(values)
    except TypeError:
        raise ConfigError(f"{attr} must be a list of strings, got {values!r}") from None
    for item in items:
        if not isinstance(item, str) or not item:
            raise ConfigError(f"{attr} entries must be non-empty strings, got {item!r}")
    return items
