"""Dataclasses handed back to the host application."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Analysis:
    word_count: int
    syllable_count: int
    target_word: str
    line: str = ""
