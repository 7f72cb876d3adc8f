"""
ainconv: Ainu script converter
Transliterates Ainu between Latin, Cyrillic and Katakana, and detects
which of them a text is written in.
"""

import logging
from typing import Optional, Union

from ainconv.constants import SCRIPT_ALIASES, WRITING_SYSTEMS, Script
from ainconv.cyrillic import convert_cyrl_to_latn, convert_latn_to_cyrl
from ainconv.detection import detect
from ainconv.katakana import convert_kana_to_latn, convert_latn_to_kana
from ainconv.syllable import separate

__version__ = "0.1.0"

__all__ = [
    "Script",
    "UnsupportedScriptError",
    "convert",
    "convert_cyrl_to_kana",
    "convert_cyrl_to_latn",
    "convert_kana_to_cyrl",
    "convert_kana_to_latn",
    "convert_latn_to_cyrl",
    "convert_latn_to_kana",
    "detect",
    "get_script",
    "separate",
]

logger = logging.getLogger(__name__)


class UnsupportedScriptError(ValueError):
    """Raised when asked to convert from or to a script that has no converter."""


def convert_cyrl_to_kana(cyrl: str) -> str:
    """
    Convert Cyrillic to Katakana, by way of the Latin spelling.

    Cyrillic decoding drops spaces, so a multi-word text comes out as a
    single word. Convert such text one word at a time.
    """
    return convert_latn_to_kana(convert_cyrl_to_latn(cyrl))


def convert_kana_to_cyrl(kana: str) -> str:
    """Convert Katakana to Cyrillic, by way of the Latin spelling."""
    return convert_latn_to_cyrl(convert_kana_to_latn(kana))


# Converters by (source, target)
CONVERTERS = {
    (Script.LATN, Script.CYRL): convert_latn_to_cyrl,
    (Script.LATN, Script.KANA): convert_latn_to_kana,
    (Script.CYRL, Script.LATN): convert_cyrl_to_latn,
    (Script.CYRL, Script.KANA): convert_cyrl_to_kana,
    (Script.KANA, Script.LATN): convert_kana_to_latn,
    (Script.KANA, Script.CYRL): convert_kana_to_cyrl,
}


def get_script(name: Union[str, Script]) -> Script:
    """
    Get a script by name.

    Args:
        name: A Script, or a case-insensitive code or alias such as
              'Latn', 'latin', 'cyrillic' or 'katakana'.

    Returns:
        Script member.

    Raises:
        UnsupportedScriptError: If the name is not known.
    """
    if isinstance(name, Script):
        return name

    script = SCRIPT_ALIASES.get(name.strip().lower())
    if script is None:
        raise UnsupportedScriptError(f"Unknown script: {name!r}")
    return script


def convert(text: str,
            to: Union[str, Script],
            source: Optional[Union[str, Script]] = None) -> str:
    """
    Convert Ainu text to another script.

    This is the main high-level API for conversion.

    Args:
        text: Text to convert.
        to: Target script.
        source: Script of the text. If None, it is detected.

    Returns:
        Converted text.

    Raises:
        UnsupportedScriptError: If the source is mixed or unknown, or
            either script has no converter.

    Example:
        >>> import ainconv
        >>> ainconv.convert("aynu", to="kana")
        'アイヌ'
    """
    target = get_script(to)
    if target not in WRITING_SYSTEMS:
        raise UnsupportedScriptError(f"Cannot convert to {target.value}")

    if not text:
        return ""

    origin = detect(text) if source is None else get_script(source)
    if origin not in WRITING_SYSTEMS:
        raise UnsupportedScriptError(f"Cannot convert from {origin.value} text")

    if origin == target:
        return text

    logger.debug("Converting %s -> %s: %r", origin.value, target.value, text)
    return CONVERTERS[(origin, target)](text)
