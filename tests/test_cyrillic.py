"""
Tests for cyrillic.py - Latin <-> Cyrillic conversion.
"""

import pytest

from ainconv import convert_cyrl_to_latn, convert_latn_to_cyrl
from ainconv.constants import GLOTTAL_MARK
from ainconv.cyrillic import match_case


class TestLatnToCyrl:
    """Tests for convert_latn_to_cyrl()."""

    def test_reference_words(self, reference_word):
        assert convert_latn_to_cyrl(reference_word.latn) == reference_word.cyrl

    def test_iotated_vowels(self):
        assert convert_latn_to_cyrl("yu") == "ю"
        assert convert_latn_to_cyrl("ya") == "я"
        assert convert_latn_to_cyrl("yo") == "ё"
        assert convert_latn_to_cyrl("ye") == "е"

    def test_y_before_i_or_consonant(self):
        assert convert_latn_to_cyrl("yi") == "йи"
        assert convert_latn_to_cyrl("kamuy") == "камуй"

    def test_case_is_kept(self):
        assert convert_latn_to_cyrl("Aynu") == "Айну"
        assert convert_latn_to_cyrl("AYNU") == "АЙНУ"
        assert convert_latn_to_cyrl("Yukar") == "Юкар"
        assert convert_latn_to_cyrl("YA") == "Я"

    def test_apostrophe_is_hard_sign(self):
        assert convert_latn_to_cyrl("a'e") == "аъэ"

    def test_right_quote_is_dropped(self):
        assert convert_latn_to_cyrl("a’e") == "аэ"

    def test_unknown_characters_are_kept(self):
        assert convert_latn_to_cyrl("aynu itak, 2") == "айну итак, 2"
        assert convert_latn_to_cyrl("Fa") == "Fа"


class TestCyrlToLatn:
    """Tests for convert_cyrl_to_latn()."""

    def test_reference_words(self, reference_word):
        assert convert_cyrl_to_latn(reference_word.cyrl) == reference_word.latn

    def test_iotated_vowels(self):
        assert convert_cyrl_to_latn("юкар") == "yukar"
        assert convert_cyrl_to_latn("я") == "ya"
        assert convert_cyrl_to_latn("ё") == "yo"
        assert convert_cyrl_to_latn("е") == "ye"

    def test_y_before_vowel_is_split(self):
        assert convert_cyrl_to_latn("йа") == "y’a"
        assert convert_cyrl_to_latn("хиойой") == "hioy’oy"

    def test_split_uses_glottal_mark(self):
        assert convert_cyrl_to_latn("йо") == "y" + GLOTTAL_MARK + "o"

    def test_case_is_kept(self):
        assert convert_cyrl_to_latn("Айну") == "Aynu"
        assert convert_cyrl_to_latn("Юкар") == "YUkar"
        assert convert_cyrl_to_latn("Йа") == "Y’A"

    def test_hard_sign_is_apostrophe(self):
        assert convert_cyrl_to_latn("аъэ") == "a'e"

    def test_markers_are_dropped(self):
        assert convert_cyrl_to_latn("ань") == "an"
        assert convert_cyrl_to_latn("а’э") == "ae"
        assert convert_cyrl_to_latn("айну итак") == "aynuitak"

    def test_unknown_characters_are_kept(self):
        assert convert_cyrl_to_latn("итак!") == "itak!"
        assert convert_cyrl_to_latn("щ") == "щ"


class TestRoundTrip:
    """Latin -> Cyrillic -> Latin gives back words without apostrophes."""

    @pytest.mark.parametrize("word", [
        "aynu", "itak", "sinep", "wenkur", "yayrayke", "keyaykosiramsuypa",
        "iyairaykere", "yukar", "cise", "Kamuy", "YUKAR", "",
    ])
    def test_round_trip(self, word):
        assert convert_cyrl_to_latn(convert_latn_to_cyrl(word)) == word

    def test_title_case_iotation_is_uppercased(self):
        # Ю stands for two letters, both uppercased on the way back
        assert convert_latn_to_cyrl("Yukar") == "Юкар"
        assert convert_cyrl_to_latn(convert_latn_to_cyrl("Yukar")) == "YUkar"


class TestMatchCase:
    """Tests for match_case()."""

    def test_lower(self):
        assert match_case("a", "ya") == "ya"

    def test_upper(self):
        assert match_case("Y", "y’u") == "Y’U"

    def test_uncased_source(self):
        assert match_case("'", "ъ") == "ъ"
