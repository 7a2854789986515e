#!/usr/bin/env python3
"""
Phoneme Tokens
==============
String-level building blocks of an assembled word.

A word is a list of tokens, each one of:

- a bracketed phoneme, ``[p]``
- a diphthong, ``[a͡i]`` (two codepoints joined by the combining tie-bar)
- a syllable made of bracketed phonemes, ``[p][a]``
- the stress marker ``'``
- the boundary marker, a single space

Brackets delimit phonemes so romanization can match whole phonemes only;
they are stripped when a word is rendered.
"""

from typing import List

from ..errors import MalformedAffix


TIE_BAR = '͡'
OPEN = '['
CLOSE = ']'
STRESS_MARKER = "'"
BOUNDARY_MARKER = ' '
MARKERS = (STRESS_MARKER, BOUNDARY_MARKER)


def bracket(phoneme: str) -> str:
    """Wrap a phoneme in token brackets."""
    return f"{OPEN}{phoneme}{CLOSE}"


def strip_brackets(text: str) -> str:
    return text.replace(OPEN, '').replace(CLOSE, '')


def is_marker(token: str) -> bool:
    return token in MARKERS


def parse_affix(body: str) -> List[str]:
    """
    Split an untagged affix into bracketed phoneme tokens.

    Each codepoint becomes its own token except where a tie-bar joins two
    codepoints into one diphthong: ``a͡i`` yields ``[a͡i]``, not ``[a][i]``.

    Parameters
    ----------
    body : str
        Affix text with its ``+``/``-`` tag already removed.

    Returns
    -------
    list[str]
        Bracketed tokens in order.

    Raises
    ------
    MalformedAffix
        If the body is empty or a tie-bar has nothing to join.
    """
    if not body:
        raise MalformedAffix("Affix has no phonemes")
    if body[0] == TIE_BAR or body[-1] == TIE_BAR:
        raise MalformedAffix(f"Affix '{body}' has a tie-bar with nothing to join")

    tokens = []
    pending = ''
    for i, char in enumerate(body):
        nxt = body[i + 1] if i + 1 < len(body) else None
        prev = body[i - 1] if i > 0 else None
        if char == TIE_BAR:
            if nxt == TIE_BAR:
                raise MalformedAffix(f"Affix '{body}' has consecutive tie-bars")
            pending += char
        elif nxt == TIE_BAR:
            # Opens a diphthong, or extends one (a͡i͡ə) without closing it
            pending += char if prev == TIE_BAR else OPEN + char
        elif prev == TIE_BAR:
            tokens.append(pending + char + CLOSE)
            pending = ''
        else:
            tokens.append(bracket(char))
    return tokens
