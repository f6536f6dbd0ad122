"""Utilities for working with ARPABET pronunciations and stresses."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

ARPABET_VOWELS = {
    "AA",
    "AE",
    "AH",
    "AO",
    "AW",
    "AY",
    "EH",
    "ER",
    "EY",
    "IH",
    "IY",
    "OW",
    "OY",
    "UH",
    "UW",
}

NO_STRESS = "0"
PRIMARY_STRESS = "1"
SECONDARY_STRESS = "2"

RhymeKey = Tuple[str, ...]


@dataclass(frozen=True)
class Pronunciation:
    """Structured representation of a pronunciation."""

    phonemes: Tuple[str, ...]

    @property
    def text(self) -> str:
        """Return the pronunciation as a space separated string."""

        return " ".join(self.phonemes)

    @property
    def syllable_count(self) -> int:
        """Number of syllables in the pronunciation."""

        return sum(1 for p in self.phonemes if is_vowel(p))

    def rhyme_key(self) -> Optional[RhymeKey]:
        """Return the stress-free tail starting at the last primary stress.

        Pronunciations without a primary stress produce ``None``.
        """

        last_stressed: Optional[int] = None
        for index in range(len(self.phonemes) - 1, -1, -1):
            if stress_of(self.phonemes[index]) == PRIMARY_STRESS:
                last_stressed = index
                break
        if last_stressed is None:
            return None
        return tuple(strip_stress(p) for p in self.phonemes[last_stressed:])


def tokens(pronunciation: str) -> List[str]:
    """Split a CMU pronunciation string into tokens."""

    return [part for part in pronunciation.strip().split() if part]


def is_vowel(phoneme: str) -> bool:
    """Return ``True`` if the phoneme represents a vowel."""

    return strip_stress(phoneme) in ARPABET_VOWELS


def stress_of(phoneme: str) -> Optional[str]:
    """Return the stress digit carried by ``phoneme`` or ``None``."""

    if phoneme and phoneme[-1] in (NO_STRESS, PRIMARY_STRESS, SECONDARY_STRESS):
        return phoneme[-1]
    return None


def strip_stress(phoneme: str) -> str:
    """Remove stress digits from a phoneme."""

    return phoneme.rstrip("0123456789")


def rhyme_key(pronunciation: Pronunciation | Sequence[str] | str) -> Optional[RhymeKey]:
    """Return the rhyme key of ``pronunciation`` or ``None`` without a primary stress."""

    return to_pronunciation(pronunciation).rhyme_key()


def format_key(key: Optional[RhymeKey]) -> str:
    """Render a rhyme key as space separated phonemes; empty for no key."""

    return " ".join(key) if key else ""


def to_pronunciation(pronunciation: Pronunciation | Iterable[str] | str) -> Pronunciation:
    """Create a :class:`Pronunciation` instance from input."""

    if isinstance(pronunciation, Pronunciation):
        return pronunciation
    if isinstance(pronunciation, str):
        phonemes = tokens(pronunciation)
    else:
        phonemes = list(pronunciation)
    return Pronunciation(tuple(phonemes))
