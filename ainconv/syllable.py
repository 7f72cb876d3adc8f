"""
Syllabification of romanized Ainu words.

Ainu syllables take the shapes V, CV and CVC. Every vowel starts a new
syllable and takes the consonant directly before it as its onset; any
other character closes the syllable opened by the last vowel.
"""

import logging
from typing import List

from ainconv.constants import CONSONANTS, GLOTTAL_MARKS, VOWELS

logger = logging.getLogger(__name__)


def syllable_groups(latn: str) -> List[int]:
    """
    Assign a syllable number to each character of a word.

    Group 0 holds whatever comes before the first syllable onset; the
    syllables themselves are numbered from 1.

    Args:
        latn: Lowercase romanized word.

    Returns:
        A list with one group number per character.
    """
    groups = [0] * len(latn)
    count = 0

    for i, char in enumerate(latn):
        if char in VOWELS:
            count += 1
            if i > 0 and latn[i - 1] in CONSONANTS:
                groups[i - 1] = count
            groups[i] = count
        else:
            # Coda candidate; a following vowel may still claim it as onset
            groups[i] = count

    return groups


def separate(latn: str) -> List[str]:
    """
    Syllabify an Ainu word.

    Divide a romanized Ainu word into syllables. Glottal stop apostrophes
    are dropped from the syllables they belong to.

    Args:
        latn: Lowercase romanized Ainu word.

    Returns:
        The syllables in order.

    Example:
        >>> separate("eyaykosiramsuypa")
        ['e', 'yay', 'ko', 'si', 'ram', 'suy', 'pa']
    """
    groups = syllable_groups(latn)

    syllables = []
    head = 0
    for i in range(1, len(latn) + 1):
        if i == len(latn) or groups[i] != groups[head]:
            syllable = ''.join(c for c in latn[head:i] if c not in GLOTTAL_MARKS)
            if syllable:
                syllables.append(syllable)
            head = i

    logger.debug("separate(%r) -> %s", latn, syllables)
    return syllables
