"""Word and line extraction from freeform lyric text."""
from __future__ import annotations

import re
from typing import List

# Any line-break sequence, with CRLF treated as a single break.
LINE_BREAK_RE = re.compile(r"\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]")


def split_words(text: str) -> List[str]:
    """Split ``text`` on runs of whitespace."""

    return text.split()


def word_count(text: str) -> int:
    """Return the number of whitespace separated words in ``text``."""

    if not text or not text.strip():
        return 0
    return len(split_words(text))


def last_non_empty_line(text: str) -> str:
    """Return the last line of ``text`` that is not blank, untrimmed."""

    if not text:
        return ""
    for line in reversed(LINE_BREAK_RE.split(text)):
        if line.strip():
            return line
    return ""


def last_word(line: str) -> str:
    """Return the lower-cased final word of ``line`` without edge punctuation."""

    stripped = line.strip() if line else ""
    if not stripped:
        return ""
    final = split_words(stripped)[-1]
    return strip_non_letters(final).lower()


def target_word(text: str) -> str:
    """Return the word a writer most recently finished a line with."""

    return last_word(last_non_empty_line(text))


def strip_non_letters(token: str) -> str:
    """Trim characters outside the Unicode letter categories from both ends."""

    start, end = 0, len(token)
    while start < end and not token[start].isalpha():
        start += 1
    while end > start and not token[end - 1].isalpha():
        end -= 1
    return token[start:end]
