"""
Shared fixtures for the ainconv test suite.
"""

from dataclasses import dataclass
from typing import List

import pytest


@dataclass
class ReferenceWord:
    """A word with its expected form in every script."""
    latn: str
    syllables: List[str]
    kana: str
    cyrl: str
    latn_from_kana: str


REFERENCE_WORDS = [
    ReferenceWord("", [], "", "", ""),
    ReferenceWord("aynu", ["ay", "nu"], "アイヌ", "айну", "ainu"),
    ReferenceWord("itak", ["i", "tak"], "イタㇰ", "итак", "itak"),
    ReferenceWord("aynuitak", ["ay", "nu", "i", "tak"], "アイヌイタㇰ", "айнуитак", "ainuitak"),
    ReferenceWord("sinep", ["si", "nep"], "シネㇷ゚", "синэп", "sinep"),
    ReferenceWord("ruunpe", ["ru", "un", "pe"], "ルウンペ", "руунпэ", "ruunpe"),
    ReferenceWord("wenkur", ["wen", "kur"], "ウェンクㇽ", "вэнкур", "wenkur"),
    ReferenceWord("pekanke", ["pe", "kan", "ke"], "ペカンケ", "пэканкэ", "pekanke"),
    ReferenceWord("eramuskare", ["e", "ra", "mus", "ka", "re"], "エラムㇱカレ", "эрамускарэ", "eramuskare"),
    ReferenceWord("hioy’oy", ["hi", "oy", "oy"], "ヒオイオイ", "хиойой", "hioioi"),
    ReferenceWord("irankarapte", ["i", "ran", "ka", "rap", "te"], "イランカラㇷ゚テ", "иранкараптэ", "irankarapte"),
    ReferenceWord("iyairaykere", ["i", "ya", "i", "ray", "ke", "re"], "イヤイライケレ", "ияирайкэрэ", "iyairaikere"),
    ReferenceWord("yayrayke", ["yay", "ray", "ke"], "ヤイライケ", "яйрайкэ", "yairaike"),
    ReferenceWord(
        "keyaykosiramsuypa",
        ["ke", "yay", "ko", "si", "ram", "suy", "pa"],
        "ケヤイコシラㇺスイパ",
        "кэяйкосирамсуйпа",
        "keyaikosiramsuipa",
    ),
]


@pytest.fixture(params=REFERENCE_WORDS, ids=lambda w: w.latn or "<empty>")
def reference_word(request) -> ReferenceWord:
    """Each word of the reference table in turn."""
    return request.param
