"""
Tests for syllable.py - Syllabification of romanized words.
"""

import pytest

from ainconv import separate
from ainconv.syllable import syllable_groups


class TestSeparate:
    """Tests for separate()."""

    def test_reference_words(self, reference_word):
        assert separate(reference_word.latn) == reference_word.syllables

    def test_docstring_example(self):
        assert separate("eyaykosiramsuypa") == ["e", "yay", "ko", "si", "ram", "suy", "pa"]

    def test_empty(self):
        assert separate("") == []

    def test_single_vowel(self):
        assert separate("a") == ["a"]

    def test_consonant_before_vowel_is_onset(self):
        assert separate("aka") == ["a", "ka"]

    def test_word_initial_consonant_is_onset(self):
        assert separate("kamuy") == ["ka", "muy"]

    def test_only_one_consonant_becomes_onset(self):
        """The first of two consonants closes the previous syllable."""
        assert separate("pirka") == ["pir", "ka"]

    def test_vowel_hiatus(self):
        assert separate("ruunpe") == ["ru", "un", "pe"]

    def test_glottal_apostrophe_is_removed(self):
        assert separate("kor'a") == ["kor", "a"]
        assert separate("hioy’oy") == ["hi", "oy", "oy"]

    def test_leading_consonant_cluster(self):
        """Consonants that no vowel can take as onset stand alone."""
        assert separate("ska") == ["s", "ka"]

    def test_no_vowels(self):
        assert separate("nn") == ["nn"]

    @pytest.mark.parametrize("word", [
        "aynu", "itak", "eramuskare", "irankarapte", "keyaykosiramsuypa",
        "hioy’oy", "kor'a", "ska", "wenkur", "cise", "tt",
    ])
    def test_concatenation_gives_word_without_apostrophes(self, word):
        assert ''.join(separate(word)) == word.replace("'", "").replace("’", "")


class TestSyllableGroups:
    """Tests for syllable_groups()."""

    def test_groups(self):
        assert syllable_groups("aynu") == [1, 1, 2, 2]

    def test_leading_consonants_are_group_zero(self):
        assert syllable_groups("ska") == [0, 1, 1]

    def test_empty(self):
        assert syllable_groups("") == []
