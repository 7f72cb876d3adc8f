"""
Consolidated constants for ainconv.

This module provides a single source of truth for:
- The Script tag returned by detection and accepted by the dispatcher
- Latin letter classes used by syllabification and the converters
- Glottal stop marks

All other modules should import from here to avoid duplication.
"""

from enum import Enum
from typing import Dict, FrozenSet


# ============================================================================
# Script Tags
# ============================================================================

class Script(Enum):
    """Writing systems recognised by the library."""
    LATN = "Latn"        # Latin romanization
    CYRL = "Cyrl"        # Cyrillic
    KANA = "Kana"        # Katakana
    MIXED = "Mixed"      # two or more of the above
    UNKNOWN = "Unknown"  # none of the above

    def __str__(self) -> str:
        return self.value


# Scripts that can be converted to and from
WRITING_SYSTEMS = (Script.LATN, Script.CYRL, Script.KANA)

# Name aliases accepted by get_script()
SCRIPT_ALIASES: Dict[str, Script] = {
    'latn': Script.LATN,
    'latin': Script.LATN,
    'roman': Script.LATN,
    'cyrl': Script.CYRL,
    'cyrillic': Script.CYRL,
    'kana': Script.KANA,
    'katakana': Script.KANA,
    'mixed': Script.MIXED,
    'unknown': Script.UNKNOWN,
}


# ============================================================================
# Latin Letter Classes
# ============================================================================

VOWELS: FrozenSet[str] = frozenset("aiueo")

# Apostrophes mark a glottal onset and count as a consonant when syllabifying
GLOTTAL_MARKS: FrozenSet[str] = frozenset("'’")

# Placeholder inserted between decoded kana units, and the boundary mark
# written between y and a vowel when decoding Cyrillic iotation
GLOTTAL_MARK = "’"

CONSONANTS: FrozenSet[str] = frozenset("kstcnhmpyrwxT") | GLOTTAL_MARKS

# Morpheme boundary marker, irrelevant to pronunciation
MORPHEME_BOUNDARY = "="

# Combining acute accent, used to mark stress
ACUTE_ACCENT = "\u0301"
