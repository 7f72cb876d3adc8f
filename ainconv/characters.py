"""
Character handling for ainconv.

Provides character classification, accent and kana normalization,
punctuation re-spacing and the word/non-word text splitter shared by
the converters.
"""

import unicodedata
from itertools import groupby
from typing import Callable, Dict, List, Tuple

from ainconv.constants import ACUTE_ACCENT, GLOTTAL_MARKS

# ============================================================================
# Kana Character Tables
# ============================================================================

# Combining voicing (dakuten) and semi-voicing (handakuten) marks
COMBINING_DAKUTEN = "\u3099"
COMBINING_HANDAKUTEN = "\u309a"

# Spacing and half-width forms of the same marks, folded before decoding
LEGACY_VOICING_MARKS = {
    "゛": COMBINING_DAKUTEN,
    "゜": COMBINING_HANDAKUTEN,
    "ﾞ": COMBINING_DAKUTEN,
    "ﾟ": COMBINING_HANDAKUTEN,
}

VOICING_MARKS = frozenset(LEGACY_VOICING_MARKS) | {COMBINING_DAKUTEN, COMBINING_HANDAKUTEN}

# Half-width to full-width kana mapping
HALF_WIDTH_KANA = "･ｦｧｨｩｪｫｬｭｮｯｰｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜﾝﾞﾟ"
FULL_WIDTH_KANA = "・ヲァィゥェォャュョッーアイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワン゛゜"

_WIDTH_FOLD = str.maketrans(HALF_WIDTH_KANA, FULL_WIDTH_KANA)
_MARK_FOLD = str.maketrans(LEGACY_VOICING_MARKS)

# Punctuation normalization
PUNCTUATION_MARKS = {
    "【": " [", "】": "] ",
    "、": ", ", "，": ", ",
    "。": ". ", "・・・": "... ", "・": " ", "　": " ",
    "「": ' "', "」": '" ',
    "『": " «", "』": "» ",
    "〜": " - ", "：": ": ", "！": "! ", "？": "? ", "；": "; "
}


# ============================================================================
# Character Testing Functions
# ============================================================================

def is_cyrillic(char: str) -> bool:
    """Check if a character lies in the Cyrillic block."""
    return "Ѐ" <= char <= "ӿ"


def is_katakana(char: str) -> bool:
    """
    Check if a character lies in the Katakana range.

    The range runs through the Katakana Phonetic Extensions block, which
    holds the small kana (ㇰ, ㇱ, ㇽ...) Ainu uses for syllable codas.
    """
    return "ァ" <= char <= "ㇿ"


def is_hiragana(char: str) -> bool:
    """Check if a character lies in the Hiragana block."""
    return "ぁ" <= char <= "ゟ"


def is_half_width_kana(char: str) -> bool:
    """Check if a character is a half-width katakana form."""
    return "ｦ" <= char <= "ﾟ"


def is_ainu_letter(char: str) -> bool:
    """
    Check if a character can be part of an Ainu word in any script.

    Letters of every script count, as do glottal stop apostrophes and the
    kana voicing marks, which are not letters to Unicode.
    """
    return char.isalpha() or char in GLOTTAL_MARKS or char in VOICING_MARKS


def is_latin_letter(char: str) -> bool:
    """Check if a character is an ASCII letter or a glottal stop apostrophe."""
    return (char.isascii() and char.isalpha()) or char in GLOTTAL_MARKS


def is_kana_letter(char: str) -> bool:
    """Check if a character is a kana letter, voicing mark or prolonged sound mark."""
    if not (is_katakana(char) or is_hiragana(char) or is_half_width_kana(char)):
        return False
    return char.isalpha() or char in VOICING_MARKS


# ============================================================================
# Text Normalization
# ============================================================================

def remove_acute_accent(text: str) -> str:
    """
    Remove stress marks from text.

    The text is decomposed so that precomposed letters such as á expose
    their combining acute accent, the accent is dropped and the result
    is recomposed.
    """
    decomposed = unicodedata.normalize("NFD", text)
    return unicodedata.normalize("NFC", decomposed.replace(ACUTE_ACCENT, ""))


def normalize_kana(text: str) -> str:
    """
    Normalize kana text before decoding.

    - Converts half-width katakana to full width
    - Replaces spacing and half-width voicing marks with combining ones
    - Applies canonical composition, so カ + ゛ becomes ガ

    Args:
        text: Text to normalize.

    Returns:
        Normalized text.
    """
    text = text.translate(_WIDTH_FOLD)
    text = text.translate(_MARK_FOLD)
    return unicodedata.normalize("NFC", text)


def simplify_ngrams(text: str, mapping: Dict[str, str]) -> str:
    """
    Apply n-gram replacements to text.

    Args:
        text: Text to process.
        mapping: Dictionary of patterns to replacements.

    Returns:
        Processed text.
    """
    if not mapping:
        return text

    # Longest first, so that ・・・ wins over ・
    patterns = sorted(mapping.keys(), key=len, reverse=True)
    result = text
    for pattern in patterns:
        result = result.replace(pattern, mapping[pattern])
    return result


def normalize_punctuation(text: str) -> str:
    """Replace CJK punctuation with spaced ASCII equivalents."""
    return simplify_ngrams(text, PUNCTUATION_MARKS)


# ============================================================================
# Kana Conversion
# ============================================================================

def as_hiragana(text: str) -> str:
    """
    Convert katakana to hiragana.

    Only characters with a hiragana counterpart (ァ to ヶ) are shifted;
    small Ainu kana and everything else are left alone.
    """
    return ''.join(
        chr(ord(c) - 0x60) if 'ァ' <= c <= 'ヶ' else c
        for c in text
    )


# ============================================================================
# Text Splitting
# ============================================================================

def basic_split(text: str,
                is_letter: Callable[[str], bool] = is_ainu_letter) -> List[Tuple[str, str]]:
    """
    Split text into runs of word characters and everything else.

    Concatenating the returned runs in order gives back the input.

    Args:
        text: Text to split.
        is_letter: Predicate deciding which characters belong to words.

    Returns:
        List of (type, text) tuples where type is 'word' or 'misc'.
    """
    return [
        ('word' if is_word else 'misc', ''.join(run))
        for is_word, run in groupby(text, key=is_letter)
    ]
