"""Lyric writing assistant: line statistics, rhyme suggestions and a recall queue."""

from .dictionary import PhoneticDictionary
from .index import RhymeIndex, load_rhyme_index
from .models import Analysis
from .recall import RecallQueue
from .rhymes import RhymeEngine, RhymeMode
from .session import LyricSession, analyze
from .syllables import syllables_in_line, syllables_in_word

__all__ = [
    "Analysis",
    "LyricSession",
    "PhoneticDictionary",
    "RecallQueue",
    "RhymeEngine",
    "RhymeIndex",
    "RhymeMode",
    "analyze",
    "load_rhyme_index",
    "syllables_in_line",
    "syllables_in_word",
]
