"""
Cyrillic module for ainconv.

Converts romanized Ainu to Cyrillic and back, letter by letter. The only
context rule is y before a vowel, written with a single iotated vowel
letter in Cyrillic.
"""

from typing import Dict

from ainconv.constants import GLOTTAL_MARK


# ============================================================================
# Latin to Cyrillic Tables
# ============================================================================

LATN_CYRL: Dict[str, str] = {
    'a': 'а',    'i': 'и',    'u': 'у',    'e': 'э',    'o': 'о',
    'k': 'к',    's': 'с',    't': 'т',    'c': 'ц',    'h': 'х',
    'm': 'м',    'n': 'н',    'p': 'п',    'r': 'р',    'w': 'в',
    'y': 'й',
    "'": 'ъ',
    '’': '',
}

# y + vowel
IOTATED_CYRL: Dict[str, str] = {
    'u': 'ю',
    'a': 'я',
    'o': 'ё',
    'e': 'е',
}


# ============================================================================
# Cyrillic to Latin Tables
# ============================================================================

CYRL_LATN: Dict[str, str] = {
    'ю': 'yu',   'я': 'ya',   'ё': 'yo',   'е': 'ye',
    'а': 'a',    'и': 'i',    'у': 'u',    'э': 'e',    'о': 'o',
    'к': 'k',    'с': 's',    'т': 't',    'ц': 'c',    'х': 'h',
    'м': 'm',    'н': 'n',    'п': 'p',    'р': 'r',    'в': 'w',
    'й': 'y',
    'ъ': "'",
    # Dropped
    'ь': '',
    '’': '',
    ' ': '',
}

# й + vowel is kept apart from the iotated letters with a glottal mark
SPLIT_IOTATION: Dict[str, str] = {
    'у': 'y' + GLOTTAL_MARK + 'u',
    'а': 'y' + GLOTTAL_MARK + 'a',
    'о': 'y' + GLOTTAL_MARK + 'o',
    'э': 'y' + GLOTTAL_MARK + 'e',
}


def match_case(source: str, converted: str) -> str:
    """Uppercase the whole conversion if its source letter is uppercase."""
    if source.isupper():
        return converted.upper()
    return converted


def _convert(text: str, table: Dict[str, str],
             glide: str, glide_table: Dict[str, str]) -> str:
    """
    Convert text letter by letter.

    `glide` followed by a key of `glide_table` is converted as one unit.
    Letters missing from `table` are kept unchanged.
    """
    result = []
    i = 0

    while i < len(text):
        char = text[i]
        lower = char.lower()

        if lower == glide and i + 1 < len(text):
            converted = glide_table.get(text[i + 1].lower())
            if converted is not None:
                result.append(match_case(char, converted))
                i += 2
                continue

        converted = table.get(lower)
        if converted is None:
            result.append(char)
        else:
            result.append(match_case(char, converted))
        i += 1

    return ''.join(result)


def convert_latn_to_cyrl(latn: str) -> str:
    """
    Convert romanized Ainu to Cyrillic.

    Case is kept. An apostrophe becomes the hard sign, a right single
    quotation mark is dropped.

    Args:
        latn: Romanized Ainu text.

    Returns:
        The Cyrillic representation of the input string.

    Example:
        >>> convert_latn_to_cyrl("aynu")
        'айну'
    """
    return _convert(latn, LATN_CYRL, 'y', IOTATED_CYRL)


def convert_cyrl_to_latn(cyrl: str) -> str:
    """
    Convert Cyrillic to romanized Ainu.

    Case is kept. The soft sign, right single quotation marks and spaces
    are dropped, and й before a vowel is written y’.

    Args:
        cyrl: Cyrillic text.

    Returns:
        The romanized Ainu representation of the input string.

    Example:
        >>> convert_cyrl_to_latn("айну")
        'aynu'
    """
    return _convert(cyrl, CYRL_LATN, 'й', SPLIT_IOTATION)
