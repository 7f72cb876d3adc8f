"""
Katakana module for ainconv.

Converts romanized Ainu to Katakana and back.

Latin text is syllabified first and every syllable is written as a kana
for its onset and vowel, followed by a small kana for its coda. Katakana
is decoded unit by unit, reading the palatalized and extended kana
pairs as digraphs.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from ainconv.characters import (
    as_hiragana, basic_split, is_kana_letter, is_latin_letter,
    normalize_kana, normalize_punctuation, remove_acute_accent,
)
from ainconv.constants import (
    CONSONANTS, GLOTTAL_MARK, GLOTTAL_MARKS, MORPHEME_BOUNDARY, VOWELS,
)
from ainconv.syllable import separate

logger = logging.getLogger(__name__)


# ============================================================================
# Latin to Katakana Tables
# ============================================================================

# Onset + vowel ("remains" of a syllable once its coda is split off)
SYLLABLE_KANA: Dict[str, str] = {
    'a': 'ア',     'i': 'イ',     'u': 'ウ',     'e': 'エ',     'o': 'オ',
    'ka': 'カ',    'ki': 'キ',    'ku': 'ク',    'ke': 'ケ',    'ko': 'コ',
    'sa': 'サ',    'si': 'シ',    'su': 'ス',    'se': 'セ',    'so': 'ソ',
    'ta': 'タ',                   'tu': 'ト\u309a', 'te': 'テ',  'to': 'ト',
    'ca': 'チャ',  'ci': 'チ',    'cu': 'チュ',  'ce': 'チェ',  'co': 'チョ',
    'na': 'ナ',    'ni': 'ニ',    'nu': 'ヌ',    'ne': 'ネ',    'no': 'ノ',
    'ha': 'ハ',    'hi': 'ヒ',    'hu': 'フ',    'he': 'ヘ',    'ho': 'ホ',
    'pa': 'パ',    'pi': 'ピ',    'pu': 'プ',    'pe': 'ペ',    'po': 'ポ',
    'ma': 'マ',    'mi': 'ミ',    'mu': 'ム',    'me': 'メ',    'mo': 'モ',
    'ya': 'ヤ',    'yi': 'イ',    'yu': 'ユ',    'ye': 'イェ',  'yo': 'ヨ',
    'ra': 'ラ',    'ri': 'リ',    'ru': 'ル',    're': 'レ',    'ro': 'ロ',
    'wa': 'ワ',    'wi': 'ヰ',                   'we': 'ヱ',    'wo': 'ヲ',
    # Reached only by direct lookups; separate() never yields these remains
    'nn': 'ン',
    'tt': 'ッ',
}

# Glottal onsets are not written in kana. separate() strips apostrophes,
# so these are only reached by direct lookups
SYLLABLE_KANA.update({
    mark + vowel: SYLLABLE_KANA[vowel]
    for mark in GLOTTAL_MARKS
    for vowel in VOWELS
})

# Codas spelled the same whatever follows
CODA_KANA: Dict[str, str] = {
    'w': 'ゥ',
    'y': 'ィ',
    'm': 'ㇺ',
    'n': 'ㇴ',
    's': 'ㇱ',
    'p': 'ㇷ\u309a',
    't': 'ッ',
    'T': 'ㇳ',  # input is lowercased, so only direct coda_to_kana() calls reach this
    'k': 'ㇰ',
}

# Codas whose kana takes the color of the next syllable's vowel
_H_ROW = {'a': 'ㇵ', 'i': 'ㇶ', 'u': 'ㇷ', 'e': 'ㇸ', 'o': 'ㇹ'}

COLORED_CODA_KANA: Dict[str, Dict[str, str]] = {
    'r': {'a': 'ㇻ', 'i': 'ㇼ', 'u': 'ㇽ', 'e': 'ㇾ', 'o': 'ㇿ'},
    'h': _H_ROW,
    'x': _H_ROW,
}

DEFAULT_CODA_COLOR = 'u'

# Applied in order to every converted word. Small イ/ウ and the coda
# nasal are written full size; ヰ/ヱ/ヲ are spelled with two kana.
KANA_SIMPLIFICATIONS: List[Tuple[str, str]] = [
    ('ィ', 'イ'),
    ('ゥ', 'ウ'),
    ('ㇴ', 'ン'),
    ('ヱ', 'ウェ'),
    ('ヰ', 'ウィ'),
    ('ヲ', 'ウォ'),
]


# ============================================================================
# Katakana to Latin Tables
# ============================================================================

KANA_DIGRAPHS: Dict[str, str] = {
    'イェ': 'ye',
    'ウェ': 'we',
    'ウィ': 'wi',
    'ウォ': 'wo',
    'トゥ': 'tu',
    'ト\u309a': 'tu',
    'ㇷ\u309a': 'p',
    'チャ': 'ca',
    'チュ': 'cu',
    'チェ': 'ce',
    'チョ': 'co',
}

# Only read as digraphs on request: アイヌ is "ainu", not "aynu"
DIPHTHONG_DIGRAPHS: Dict[str, str] = {
    'オイ': 'oy',
    'エイ': 'ey',
    'ウイ': 'uy',
}

KANA_LATN: Dict[str, str] = {
    'ア': 'a',     'イ': 'i',     'ウ': 'u',     'エ': 'e',     'オ': 'o',
    'カ': 'ka',    'キ': 'ki',    'ク': 'ku',    'ケ': 'ke',    'コ': 'ko',
    'サ': 'sa',    'シ': 'si',    'ス': 'su',    'セ': 'se',    'ソ': 'so',
    'タ': 'ta',    'チ': 'ci',                   'テ': 'te',    'ト': 'to',
    'ナ': 'na',    'ニ': 'ni',    'ヌ': 'nu',    'ネ': 'ne',    'ノ': 'no',
    'ハ': 'ha',    'ヒ': 'hi',    'フ': 'hu',    'ヘ': 'he',    'ホ': 'ho',
    'パ': 'pa',    'ピ': 'pi',    'プ': 'pu',    'ペ': 'pe',    'ポ': 'po',
    'マ': 'ma',    'ミ': 'mi',    'ム': 'mu',    'メ': 'me',    'モ': 'mo',
    'ヤ': 'ya',                   'ユ': 'yu',                   'ヨ': 'yo',
    'ラ': 'ra',    'リ': 'ri',    'ル': 'ru',    'レ': 're',    'ロ': 'ro',
    'ワ': 'wa',    'ヰ': 'wi',                   'ヱ': 'we',    'ヲ': 'wo',
    'ン': 'n',
    # Small vowels
    'ァ': 'a',     'ィ': 'y',     'ゥ': 'w',     'ェ': 'e',     'ォ': 'o',
    # Codas
    'ㇰ': 'k',     'ㇱ': 's',     'ッ': 't',     'ㇳ': 't',     'ㇴ': 'n',
    'ㇷ': 'h',     'ㇺ': 'm',
    'ㇵ': 'x',     'ㇶ': 'x',     'ㇸ': 'x',     'ㇹ': 'x',
    'ㇻ': 'r',     'ㇼ': 'r',     'ㇽ': 'r',     'ㇾ': 'r',     'ㇿ': 'r',
}


def _with_hiragana(table: Dict[str, str]) -> Dict[str, str]:
    """Extend a katakana-keyed table with the hiragana spelling of each key."""
    extended = dict(table)
    for kana, latn in table.items():
        extended.setdefault(as_hiragana(kana), latn)
    return extended


KANA_DIGRAPHS = _with_hiragana(KANA_DIGRAPHS)
DIPHTHONG_DIGRAPHS = _with_hiragana(DIPHTHONG_DIGRAPHS)
KANA_LATN = _with_hiragana(KANA_LATN)


# ============================================================================
# Latin to Katakana
# ============================================================================

def split_coda(syllable: str) -> Tuple[str, str]:
    """
    Split a syllable into its onset and vowel, and its coda.

    Args:
        syllable: A syllable as returned by separate().

    Returns:
        Tuple of (remains, coda); coda is '' for open syllables.
    """
    if syllable and syllable[-1] in CONSONANTS:
        return syllable[:-1], syllable[-1]
    return syllable, ''


def coda_to_kana(coda: str, next_syllable: Optional[str] = None) -> str:
    """
    Write a syllable coda in kana.

    r, h and x are colored by the first letter of the next syllable; with
    no next syllable, or one that starts with a consonant, the u-colored
    kana is used.

    Args:
        coda: A single consonant, or ''.
        next_syllable: The syllable that follows, if any.

    Returns:
        The kana for the coda. Unknown codas are returned unchanged.
    """
    colors = COLORED_CODA_KANA.get(coda)
    if colors is None:
        return CODA_KANA.get(coda, coda)

    color = next_syllable[0] if next_syllable else DEFAULT_CODA_COLOR
    return colors.get(color, colors[DEFAULT_CODA_COLOR])


def word_to_kana(word: str) -> str:
    """
    Convert a single lowercase romanized word to Katakana.

    Args:
        word: Lowercase romanized Ainu word without accents.

    Returns:
        Katakana string.
    """
    syllables = separate(word)
    result = []

    for i, syllable in enumerate(syllables):
        remains, coda = split_coda(syllable)

        kana = SYLLABLE_KANA.get(remains)
        if kana is None:
            logger.debug("No kana for %r in %r, keeping it", remains, word)
            kana = remains
        result.append(kana)

        next_syllable = syllables[i + 1] if i + 1 < len(syllables) else None
        result.append(coda_to_kana(coda, next_syllable))

    text = ''.join(result)
    for small, full in KANA_SIMPLIFICATIONS:
        text = text.replace(small, full)
    return text


def convert_latn_to_kana(latn: str) -> str:
    """
    Convert romanized Ainu to Katakana.

    Morpheme boundaries (=) and stress accents are dropped and the text is
    lowercased. Only runs of Latin letters are converted; spaces,
    punctuation, digits and letters of other scripts are kept as they are.

    Args:
        latn: Romanized Ainu text.

    Returns:
        The Katakana representation of the input string.

    Example:
        >>> convert_latn_to_kana("aynu")
        'アイヌ'
    """
    latn = latn.replace(MORPHEME_BOUNDARY, "")
    latn = remove_acute_accent(latn).lower()

    parts = []
    for seg_type, seg_text in basic_split(latn, is_letter=is_latin_letter):
        if seg_type == 'word':
            parts.append(word_to_kana(seg_text))
        else:
            parts.append(seg_text)

    return ''.join(parts)


# ============================================================================
# Katakana to Latin
# ============================================================================

def scan_kana(word: str, digraphs: Dict[str, str]) -> Iterator[Tuple[str, bool]]:
    """
    Read a kana word unit by unit.

    A unit is either a digraph from `digraphs` (two characters) or a
    single character. Characters with no romanization are yielded as
    they are.

    Args:
        word: Normalized kana word.
        digraphs: Two-character sequences read as one unit.

    Yields:
        Tuples of (text, mapped) where mapped is False for characters
        passed through literally.
    """
    i = 0
    while i < len(word):
        pair = word[i:i + 2]
        if len(pair) == 2 and pair in digraphs:
            yield digraphs[pair], True
            i += 2
            continue

        char = word[i]
        latn = KANA_LATN.get(char)
        if latn is None:
            logger.debug("No romanization for %r, keeping it", char)
            yield char, False
        else:
            yield latn, True
        i += 1


def drop_glottal_marks(text: str) -> str:
    """
    Remove the glottal marks that do not separate a consonant from a vowel.

    A mark is dropped if it follows a vowel, or if it is not followed by
    one. What is left marks a coda that must not be read as the onset
    of the next syllable.
    """
    result = []
    last = len(text) - 1

    for i, char in enumerate(text):
        if char == GLOTTAL_MARK:
            if i > 0 and text[i - 1] in VOWELS:
                continue
            if i < last and text[i + 1] not in VOWELS:
                continue
        result.append(char)

    return ''.join(result)


def kana_word_to_latn(word: str, digraphs: Dict[str, str] = KANA_DIGRAPHS) -> str:
    """
    Convert a single normalized kana word to romanized Ainu.

    Decoded units are joined with a glottal mark, which is then kept only
    where it is needed.
    """
    pieces = []
    prev_mapped = False

    for text, mapped in scan_kana(word, digraphs):
        if mapped and prev_mapped:
            pieces.append(GLOTTAL_MARK)
        pieces.append(text)
        prev_mapped = mapped

    return drop_glottal_marks(''.join(pieces))


def convert_kana_to_latn(kana: str, diphthongs: bool = False) -> str:
    """
    Convert Katakana to romanized Ainu.

    Hiragana, half-width katakana and spacing voicing marks are accepted
    too. Text outside kana runs is kept, with CJK punctuation replaced by
    spaced ASCII punctuation.

    The conversion is lossy: glottal stops after vowels are not written
    in kana and cannot be recovered.

    Args:
        kana: Katakana text.
        diphthongs: Read オイ, エイ and ウイ as oy, ey and uy.

    Returns:
        The romanized Ainu representation of the input string.

    Example:
        >>> convert_kana_to_latn("アイヌ")
        'ainu'
    """
    digraphs = KANA_DIGRAPHS
    if diphthongs:
        digraphs = {**KANA_DIGRAPHS, **DIPHTHONG_DIGRAPHS}

    text = normalize_kana(kana)

    parts = []
    for seg_type, seg_text in basic_split(text, is_letter=is_kana_letter):
        if seg_type == 'word':
            parts.append(kana_word_to_latn(seg_text, digraphs))
        else:
            parts.append(normalize_punctuation(seg_text))

    return ''.join(parts)
