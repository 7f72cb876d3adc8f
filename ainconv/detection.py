"""
Script detection for ainconv.
"""

from ainconv.characters import is_cyrillic, is_katakana
from ainconv.constants import Script


def detect(text: str) -> Script:
    """
    Detect the script an Ainu text is written in.

    Only letters are looked at. A single letter from a second script
    is enough to make the text mixed.

    Args:
        text: Text to analyze.

    Returns:
        Script.LATN, Script.CYRL or Script.KANA; Script.MIXED if letters
        of more than one of them are present, Script.UNKNOWN if none are.

    Example:
        >>> detect("アイヌ")
        <Script.KANA: 'Kana'>
    """
    has_latin = any(c.isalpha() and c.isascii() for c in text)
    has_cyrillic = any(c.isalpha() and is_cyrillic(c) for c in text)
    has_kana = any(c.isalpha() and is_katakana(c) for c in text)

    if [has_latin, has_cyrillic, has_kana].count(True) > 1:
        return Script.MIXED
    if has_kana:
        return Script.KANA
    if has_cyrillic:
        return Script.CYRL
    if has_latin:
        return Script.LATN
    return Script.UNKNOWN
