"""
Shared fixtures for namesmith tests.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namesmith.generators import PhonologyDescriptor


class ScriptedRandom:
    """
    Random source that replays a fixed script of draws.

    ``randint`` returns the next scripted integer; ``choice`` returns the
    element equal to the next scripted value (affixes match on their text).
    Every call is recorded in ``calls`` so tests can check draw order.
    """

    def __init__(self, script):
        self.script = list(script)
        self.calls = []

    def _next(self):
        if not self.script:
            raise AssertionError("random script exhausted")
        return self.script.pop(0)

    def randint(self, a, b):
        value = self._next()
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        self.calls.append(('randint', value))
        return value

    def choice(self, seq):
        value = self._next()
        for item in seq:
            if item == value or getattr(item, 'text', None) == value:
                self.calls.append(('choice', value))
                return item
        raise AssertionError(f"scripted {value!r} not in {list(seq)!r}")

    @property
    def exhausted(self):
        return not self.script


def make_descriptor(**overrides):
    """Descriptor with small inventories; any field can be overridden."""
    fields = dict(
        consonants=['p', 't', 'k', 's'],
        onsets=['p', 't', 'k', 's'],
        codas=['n', 's'],
        vowels=['a', 'i', 'a͡i'],
        structures=['cv', 'cvc'],
        stressed=0,
        romanization={'p': 'p', 'a': 'a', 'a͡i': 'ai'},
        max_syllable_count=3,
    )
    fields.update(overrides)
    return PhonologyDescriptor(**fields)


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def pa_descriptor():
    """Single CV syllable phonology: always yields 'pa'."""
    return make_descriptor(
        consonants=['p'],
        onsets=['p'],
        codas=[],
        vowels=['a'],
        structures=['cv'],
        stressed=0,
        romanization={'p': 'p', 'a': 'a'},
        max_syllable_count=1,
    )


@pytest.fixture
def descriptor():
    return make_descriptor()
