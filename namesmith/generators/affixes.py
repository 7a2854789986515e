#!/usr/bin/env python3
"""
Affixes
=======
Optional prefixes and suffixes attached to an assembled word.

Affixes are given as tagged strings: ``+ka`` is a prefix, ``-a͡i`` a
suffix. The list is split into a prefix bucket and a suffix bucket once,
up front; each word then gets one uniform draw from every non-empty
bucket (prefix first, then suffix).

Usage:
    affixes = AffixSet.from_strings(['+ka', '-a͡i'])
    AffixProcessor(affixes).apply(word, rng)
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..errors import AffixTagMismatch
from .tokens import BOUNDARY_MARKER, parse_affix

logger = logging.getLogger(__name__)

PREFIX_TAG = '+'
SUFFIX_TAG = '-'


@dataclass(frozen=True)
class Affix:
    """A validated affix: its source text, position and parsed token."""
    text: str
    body: str
    is_prefix: bool
    token: str

    @classmethod
    def parse(cls, text: str) -> 'Affix':
        """
        Parse one tagged affix string.

        Raises
        ------
        AffixTagMismatch
            If the entry is not tagged with '+' or '-', or has no body.
        MalformedAffix
            If the body has a dangling tie-bar.
        """
        if not text or text[0] not in (PREFIX_TAG, SUFFIX_TAG):
            raise AffixTagMismatch(
                f"Affix '{text}' must start with '{PREFIX_TAG}' (prefix) or '{SUFFIX_TAG}' (suffix)"
            )
        body = text[1:]
        if not body:
            raise AffixTagMismatch(f"Affix '{text}' has a tag but no phonemes")
        return cls(
            text=text,
            body=body,
            is_prefix=text[0] == PREFIX_TAG,
            token=''.join(parse_affix(body)),
        )


@dataclass(frozen=True)
class AffixSet:
    """Affixes partitioned by position, in the order they were given."""
    prefixes: Tuple[Affix, ...] = ()
    suffixes: Tuple[Affix, ...] = ()

    @classmethod
    def from_strings(cls, entries: Iterable[str]) -> 'AffixSet':
        """
        Partition tagged affix strings.

        Entries without a '+' or '-' tag are never drawn, so they are
        dropped here. Tagged entries that cannot be parsed raise.
        """
        prefixes = []
        suffixes = []
        for entry in entries:
            if not entry or entry[0] not in (PREFIX_TAG, SUFFIX_TAG):
                logger.debug("ignoring untagged affix:\t%s", entry)
                continue
            affix = Affix.parse(entry)
            (prefixes if affix.is_prefix else suffixes).append(affix)
        return cls(prefixes=tuple(prefixes), suffixes=tuple(suffixes))

    @property
    def has_prefixes(self) -> bool:
        return bool(self.prefixes)

    @property
    def has_suffixes(self) -> bool:
        return bool(self.suffixes)

    def __bool__(self) -> bool:
        return self.has_prefixes or self.has_suffixes

    def __len__(self) -> int:
        return len(self.prefixes) + len(self.suffixes)


class AffixProcessor:
    """Attaches one drawn prefix and/or suffix to a word in place."""

    def __init__(self, affixes: AffixSet, log: Optional[logging.Logger] = None):
        self.affixes = affixes
        self.log = log or logger

    def apply(self, word, rng):
        """
        Attach affixes to ``word`` and return it.

        A prefix goes at position 0 followed by a boundary marker. A suffix
        is appended after a boundary marker, adding one only if the word
        does not already end with one.
        """
        if self.affixes.has_prefixes:
            prefix = rng.choice(self.affixes.prefixes)
            self.log.debug("prefix:\t%s", prefix.body)
            word.insert(0, prefix.token)
            word.insert(1, BOUNDARY_MARKER)
            word.prefix = prefix.body

        if self.affixes.has_suffixes:
            suffix = rng.choice(self.affixes.suffixes)
            self.log.debug("suffix:\t%s", suffix.body)
            if not word.ends_with_boundary:
                word.append(BOUNDARY_MARKER)
            word.append(suffix.token)
            word.suffix = suffix.body

        return word
