"""Spelling based syllable estimation.

The counts here come from vowel groups in the written word, not from a
pronunciation. Irregular spellings ("queue", "fire") are counted the way the
heuristic counts them; callers that know a dictionary pronunciation should use
:func:`syllables_in_pronunciation` instead.
"""
from __future__ import annotations

import re
from typing import Sequence

from .phonetics import Pronunciation, to_pronunciation
from .text import split_words

NON_LETTER_RE = re.compile(r"[^a-z]")
VOWEL_GROUP_RE = re.compile(r"[aeiou]+")


def clean_word(word: str) -> str:
    """Lower-case ``word`` and drop everything outside ``a-z``."""

    return NON_LETTER_RE.sub("", word.lower())


def syllables_in_word(word: str) -> int:
    """Estimate the syllables in a single word.

    >>> syllables_in_word("alone")
    2
    >>> syllables_in_word("rhythm")
    1
    >>> syllables_in_word("")
    0
    """

    cleaned = clean_word(word)
    if not cleaned:
        return 0
    groups = len(VOWEL_GROUP_RE.findall(cleaned.replace("y", "i")))
    # silent final e
    if cleaned.endswith("e") and groups > 1:
        groups -= 1
    return max(groups, 1)


def syllables_in_line(line: str) -> int:
    """Estimate the syllables in a line; every token counts at least once."""

    if not line or not line.strip():
        return 0
    return sum(max(syllables_in_word(word), 1) for word in split_words(line.lower()))


def syllables_in_pronunciation(pronunciation: Pronunciation | Sequence[str] | str) -> int:
    """Count syllables from a dictionary pronunciation, one per vowel phoneme."""

    return to_pronunciation(pronunciation).syllable_count
