"""
Tests for the Generation Pipeline
=================================
End-to-end scenarios, determinism and the diagnostic logger.
"""

import logging

import pytest

import namesmith
from conftest import make_descriptor
from namesmith.errors import AffixTagMismatch
from namesmith.generators import AffixSet, GeneratedWord, NameGenerator, RandomSource


class TestScenarios:
    """Fixed scenarios with a one-word phonology."""

    def test_plain_word(self, pa_descriptor):
        gen = NameGenerator(pa_descriptor, rng=RandomSource(seed=1))
        word = gen.generate_one()
        assert (word.phonetic, word.romanized) == ('pa', 'pa')
        assert word.tokens == ["'", '[p][a]']
        assert word.syllables == 1

    def test_every_word_is_pa(self, pa_descriptor):
        gen = NameGenerator(pa_descriptor)
        assert {(w.phonetic, w.romanized) for w in gen.generate(10)} == {('pa', 'pa')}

    def test_prefix(self, pa_descriptor):
        gen = NameGenerator(pa_descriptor, affixes=['+t'], rng=RandomSource(seed=1))
        word = gen.generate_one()
        assert word.tokens == ['[t]', ' ', "'", '[p][a]']
        assert word.phonetic == 'tpa'
        assert word.romanized == 'tpa'
        assert word.prefix == 't'

    def test_diphthong_suffix(self, pa_descriptor):
        gen = NameGenerator(pa_descriptor, affixes=['-a͡i'], rng=RandomSource(seed=1))
        word = gen.generate_one()
        assert word.tokens == ["'", '[p][a]', ' ', '[a͡i]']
        assert word.phonetic == 'paa͡i'
        assert word.transcription == 'ˈpa.a͡i'

    def test_affix_set_accepted(self, pa_descriptor):
        affixes = AffixSet.from_strings(['+t'])
        gen = NameGenerator(pa_descriptor, affixes=affixes)
        assert gen.affixes is affixes

    def test_untagged_affix_ignored(self, pa_descriptor):
        word = NameGenerator(pa_descriptor, affixes=['ka'], rng=RandomSource(seed=1)).generate_one()
        assert (word.phonetic, word.romanized) == ('pa', 'pa')
        assert word.prefix is None and word.suffix is None

    def test_untagged_mixed_with_prefix(self, pa_descriptor):
        word = NameGenerator(pa_descriptor, affixes=['+t', 'ka'], rng=RandomSource(seed=1)).generate_one()
        assert word.phonetic == 'tpa'
        assert word.romanized == 'tpa'

    def test_tag_without_body_fails_at_construction(self, pa_descriptor):
        with pytest.raises(AffixTagMismatch):
            NameGenerator(pa_descriptor, affixes=['+'])


class TestGenerate:
    """Tests for batch generation."""

    def test_count(self, descriptor):
        gen = NameGenerator(descriptor, rng=RandomSource(seed=4))
        assert len(gen.generate(7)) == 7
        assert gen.generate(0) == []

    def test_negative_count(self, descriptor):
        with pytest.raises(ValueError):
            NameGenerator(descriptor).generate(-1)

    def test_seeded_batches_repeat(self, descriptor):
        first = NameGenerator(descriptor, affixes=['+ka', '-a͡i'], rng=RandomSource(seed=99))
        second = NameGenerator(descriptor, affixes=['+ka', '-a͡i'], rng=RandomSource(seed=99))
        assert first.generate(20) == second.generate(20)

    def test_words_depend_on_previous_draws(self, descriptor):
        """Word k of a batch equals word k of a replay, not a fresh first word."""
        batch = NameGenerator(descriptor, rng=RandomSource(seed=8)).generate(5)
        replay = NameGenerator(descriptor, rng=RandomSource(seed=8))
        assert [replay.generate_one() for _ in range(5)] == batch

    def test_default_rng(self, descriptor):
        gen = NameGenerator(descriptor)
        assert not gen.rng.reproducible


class TestGeneratedWord:
    """Tests for GeneratedWord output helpers."""

    def test_format_default(self):
        word = GeneratedWord(romanized='shah', phonetic='ʃa')
        assert word.format() == 'shah /ʃa/'

    def test_format_custom(self):
        word = GeneratedWord(romanized='pa', phonetic='pa', transcription='ˈpa', syllables=1)
        assert word.format('{transcription} ({syllables})') == 'ˈpa (1)'

    def test_to_dict(self):
        word = GeneratedWord(romanized='pa', phonetic='pa')
        data = word.to_dict()
        assert data['romanized'] == 'pa'
        assert data['prefix'] is None


class TestDiagnostics:
    """Tests for the injected diagnostic logger."""

    def test_trace_goes_to_given_logger(self, pa_descriptor, caplog):
        log = logging.getLogger('test.namesmith.trace')
        gen = NameGenerator(pa_descriptor, affixes=['+t'], rng=RandomSource(seed=1), log=log)
        with caplog.at_level(logging.DEBUG, logger='test.namesmith.trace'):
            gen.generate_one()
        messages = [r.getMessage() for r in caplog.records if r.name == 'test.namesmith.trace']
        assert 'syllable_count:\t1' in messages
        assert 'syllable:\tcv' in messages
        assert 'onset:\tp' in messages
        assert 'vowel:\ta' in messages
        assert 'prefix:\tt' in messages

    def test_logging_does_not_change_output(self, descriptor, caplog):
        quiet = NameGenerator(descriptor, rng=RandomSource(seed=2)).generate(10)
        with caplog.at_level(logging.DEBUG):
            traced = NameGenerator(descriptor, rng=RandomSource(seed=2)).generate(10)
        assert quiet == traced


class TestPackageGenerate:
    """Tests for the namesmith.generate shortcut."""

    def test_with_descriptor(self, pa_descriptor):
        words = namesmith.generate(pa_descriptor, count=3, seed=1)
        assert [w.romanized for w in words] == ['pa', 'pa', 'pa']

    def test_with_bundled_name(self):
        words = namesmith.generate('english', count=4, seed=12)
        assert len(words) == 4
        assert all(w.romanized for w in words)

    def test_seed_reproducible(self):
        a = namesmith.generate('sylvan', count=5, seed=3)
        b = namesmith.generate('sylvan', count=5, seed=3)
        assert a == b
