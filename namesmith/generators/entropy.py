#!/usr/bin/env python3
"""
Random Source
=============
The single random source threaded through every draw of a batch.

A seeded source replays a batch exactly; an unseeded one draws from the
operating system's CSPRNG. Anything with ``choice`` and ``randint`` can
stand in for it (tests use a scripted source).

Usage:
    from namesmith.generators.entropy import RandomSource

    rng = RandomSource(seed=42)
    rng.randint(1, 3)
    rng.choice(['a', 'e', 'i'])
"""

import random
import secrets
from typing import Any, Optional, Sequence


class RandomSource:
    """
    Uniform draws for syllable counts, templates, phonemes and affixes.

    Parameters
    ----------
    seed : int, optional
        Seed for a reproducible ``random.Random``. When omitted the source
        is backed by ``secrets.SystemRandom`` and cannot be replayed.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        if seed is None:
            self._rng = secrets.SystemRandom()
        else:
            self._rng = random.Random(seed)

    @property
    def reproducible(self) -> bool:
        return self.seed is not None

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return self._rng.choice(seq)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r})"
