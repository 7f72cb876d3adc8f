"""
Tests for detection.py - Script detection.
"""

import pytest

from ainconv import Script, detect


class TestDetect:
    """Tests for detect()."""

    @pytest.mark.parametrize("text,expected", [
        ("aynu", Script.LATN),
        ("アイヌ", Script.KANA),
        ("айну", Script.CYRL),
        ("Aynuイタㇰ", Script.MIXED),
        ("愛努", Script.UNKNOWN),
    ])
    def test_scripts(self, text, expected):
        assert detect(text) == expected

    def test_case_does_not_matter(self):
        assert detect("AYNU") == detect("aynu") == Script.LATN
        assert detect("АЙНУ") == Script.CYRL

    def test_small_coda_kana(self):
        assert detect("ㇰ") == Script.KANA

    def test_single_stray_letter_makes_it_mixed(self):
        assert detect("айну itak айну") == Script.MIXED
        assert detect("アイヌ a") == Script.MIXED

    def test_all_three(self):
        assert detect("aynu айну アイヌ") == Script.MIXED

    def test_non_letters_are_ignored(self):
        assert detect("aynu, 123!") == Script.LATN
        assert detect("アイヌ。") == Script.KANA
        assert detect("123 ・!") == Script.UNKNOWN

    def test_empty(self):
        assert detect("") == Script.UNKNOWN

    def test_hiragana_is_unknown(self):
        assert detect("あいぬ") == Script.UNKNOWN
