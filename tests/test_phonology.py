"""
Tests for Phonology Descriptors
===============================
Construction-time validation, template slot counting and the stress rule.
"""

import logging

import pytest

from conftest import make_descriptor
from namesmith.errors import ConfigError, EmptyInventory, MalformedTemplate
from namesmith.generators.phonology import template_slots, validate_template


class TestTemplateSlots:
    """Tests for onset/coda slot counting."""

    @pytest.mark.parametrize("template,expected", [
        ('v', (0, 0)),
        ('cv', (1, 0)),
        ('vc', (0, 1)),
        ('cvc', (1, 1)),
        ('ccvcc', (2, 2)),
        ('CCV', (2, 0)),
    ])
    def test_slots(self, template, expected):
        assert template_slots(template) == expected

    def test_missing_vowel(self):
        with pytest.raises(MalformedTemplate):
            template_slots('cc')


class TestValidateTemplate:
    """Tests for template validation."""

    def test_accepts_mixed_case(self):
        assert validate_template('CvC') == 'CvC'

    def test_rejects_two_vowels(self):
        with pytest.raises(MalformedTemplate, match="exactly one"):
            validate_template('cvv')

    def test_rejects_unknown_characters(self):
        with pytest.raises(MalformedTemplate, match="only 'c' and 'v'"):
            validate_template('cvx')

    def test_rejects_empty(self):
        with pytest.raises(MalformedTemplate):
            validate_template('')


class TestPhonologyDescriptor:
    """Tests for descriptor construction."""

    def test_inventories_become_tuples(self):
        d = make_descriptor()
        assert d.vowels == ('a', 'i', 'a͡i')
        assert isinstance(d.structures, tuple)

    def test_romanization_is_read_only(self):
        d = make_descriptor()
        with pytest.raises(TypeError):
            d.romanization['k'] = 'c'

    def test_frozen(self):
        d = make_descriptor()
        with pytest.raises(AttributeError):
            d.stressed = 1

    def test_source_mapping_is_copied(self):
        table = {'p': 'p'}
        d = make_descriptor(romanization=table)
        table['t'] = 't'
        assert 't' not in d.romanization

    def test_empty_vowels(self):
        with pytest.raises(EmptyInventory):
            make_descriptor(vowels=[])

    def test_empty_structures(self):
        with pytest.raises(EmptyInventory):
            make_descriptor(structures=[])

    def test_empty_onsets_with_onset_slot(self):
        with pytest.raises(EmptyInventory, match="onsets"):
            make_descriptor(onsets=[])

    def test_empty_codas_with_coda_slot(self):
        with pytest.raises(EmptyInventory, match="codas"):
            make_descriptor(codas=[], structures=['cv', 'cvc'])

    def test_empty_codas_without_coda_slot(self):
        d = make_descriptor(codas=[], structures=['cv', 'ccv'])
        assert d.codas == ()

    def test_template_without_vowel(self):
        with pytest.raises(MalformedTemplate):
            make_descriptor(structures=['cv', 'cc'])

    def test_errors_are_config_errors(self):
        with pytest.raises(ConfigError):
            make_descriptor(vowels=[])
        with pytest.raises(ConfigError):
            make_descriptor(structures=['ccc'])

    def test_max_syllable_count_positive(self):
        with pytest.raises(ConfigError, match="at least 1"):
            make_descriptor(max_syllable_count=0)

    def test_stressed_must_be_int(self):
        with pytest.raises(ConfigError):
            make_descriptor(stressed='0')
        with pytest.raises(ConfigError):
            make_descriptor(stressed=True)

    def test_inventory_must_be_list(self):
        with pytest.raises(ConfigError, match="single string"):
            make_descriptor(vowels='aeiou')

    def test_inventory_entries_non_empty(self):
        with pytest.raises(ConfigError):
            make_descriptor(vowels=['a', ''])


class TestStressRule:
    """Tests for is_stressed."""

    def test_positive_index(self):
        d = make_descriptor(stressed=1)
        assert [d.is_stressed(i, 3) for i in range(3)] == [False, True, False]

    def test_negative_index(self):
        d = make_descriptor(stressed=-1)
        assert [d.is_stressed(i, 3) for i in range(3)] == [False, False, True]

    def test_penultimate(self):
        d = make_descriptor(stressed=-2)
        assert [d.is_stressed(i, 4) for i in range(4)] == [False, False, True, False]

    def test_single_syllable_always_stressed(self):
        d = make_descriptor(stressed=-3)
        assert d.is_stressed(0, 1)

    def test_index_beyond_word(self):
        d = make_descriptor(stressed=2)
        assert not any(d.is_stressed(i, 2) for i in range(2))


class TestStressRange:
    """Tests for stress indices that some word lengths never reach."""

    def test_unstressed_lengths(self):
        assert make_descriptor(stressed=2, max_syllable_count=3).unstressed_lengths() == (2,)
        assert make_descriptor(stressed=-3, max_syllable_count=4).unstressed_lengths() == (2,)
        assert make_descriptor(stressed=5, max_syllable_count=3).unstressed_lengths() == (2, 3)

    @pytest.mark.parametrize("stressed", [0, 1, -1, -2])
    def test_reachable_index(self, stressed):
        assert make_descriptor(stressed=stressed, max_syllable_count=4).unstressed_lengths() == ()

    def test_single_syllable_words_only(self):
        assert make_descriptor(stressed=7, max_syllable_count=1).unstressed_lengths() == ()

    def test_warning_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger='namesmith'):
            make_descriptor(stressed=2, max_syllable_count=3)
        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert 'stressed=2' in record.getMessage()
        assert 'words of 2 syllable' in record.getMessage()

    def test_no_warning_in_range(self, caplog):
        with caplog.at_level(logging.WARNING, logger='namesmith'):
            make_descriptor(stressed=-1, max_syllable_count=3)
        assert not caplog.records
