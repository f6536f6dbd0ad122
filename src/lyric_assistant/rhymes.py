"""Rhyme and phrase suggestions for the word a line ends on."""
from __future__ import annotations

import enum
import logging
import re
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Dict, Iterable, List, Optional, Union

from .index import RhymeIndex

LOGGER = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

# Endings glued onto a word's tail when no dictionary can vouch for a rhyme.
# The results are spelling-alikes, not checked rhymes.
FALLBACK_ENDINGS = ("ay", "en", "end", "in", "ing")
FALLBACK_TAIL = 3

COMPOUND_BANK = (
    "midnight",
    "goodnight",
    "tonight",
    "moonlight",
    "daylight",
    "firelight",
    "starlight",
    "heartbreak",
    "daybreak",
    "someday",
    "yesterday",
    "runaway",
    "anyway",
    "highway",
    "doorway",
    "evermore",
    "forevermore",
    "downpour",
    "seashore",
    "sunrise",
    "moonrise",
    "nightfall",
    "rainfall",
    "downfall",
    "heartbeat",
    "drumbeat",
    "somewhere",
    "nowhere",
    "everywhere",
    "sundown",
    "breakdown",
    "hometown",
    "campfire",
    "wildfire",
    "gunfire",
    "heartache",
    "lifetime",
    "bedtime",
    "overtime",
    "milestone",
    "headstone",
    "cornerstone",
)

CONSONANT_SLOP_BANK = (
    "home",
    "alone",
    "stone",
    "phone",
    "bone",
    "gone",
    "done",
    "sun",
    "run",
    "one",
    "love",
    "enough",
    "rough",
    "night",
    "ride",
    "time",
    "mind",
    "fine",
    "line",
    "day",
    "rain",
    "name",
    "same",
    "heart",
    "hard",
    "part",
    "fire",
    "tired",
    "door",
    "four",
    "more",
    "war",
    "sky",
    "high",
    "cold",
    "gold",
    "soul",
    "roll",
    "free",
    "sea",
    "dream",
    "seem",
    "believe",
    "leave",
    "down",
    "town",
    "around",
    "sound",
    "ground",
)

ASSONANCE_BANK = (
    "light",
    "night",
    "mind",
    "time",
    "fine",
    "fire",
    "ride",
    "home",
    "alone",
    "above",
    "atone",
    "road",
    "cold",
    "soul",
    "rain",
    "day",
    "fade",
    "way",
    "heart",
    "far",
    "star",
    "dark",
    "love",
    "run",
    "sun",
    "blood",
    "dream",
    "deep",
    "free",
    "moon",
    "blue",
    "true",
    "door",
    "more",
    "floor",
    "open",
    "broken",
    "golden",
    "over",
    "forever",
    "never",
    "together",
)

PHRASE_BANK = (
    "open the door",
    "into the night",
    "under the stars",
    "one more time",
    "say it again",
    "all that remains",
)

PHRASE_TEMPLATES = (
    "open the {word}",
    "into the {word}",
    "chasing the {word}",
    "all of the {word}",
    "{word} in the dark",
    "nothing but {word}",
)

NON_VOWEL_RE = re.compile(r"[^aeiou]")


class RhymeMode(str, enum.Enum):
    """Matching strategies understood by :class:`RhymeEngine`."""

    EXACT = "exact"
    COMPOUND = "compound"
    CONSONANT_SLOP = "consonant-slop"
    ASSONANCE = "assonance"
    PHRASE = "phrase"


def vowel_skeleton(word: str) -> str:
    """Return only the a/e/i/o/u letters of ``word``, lower-cased."""

    return NON_VOWEL_RE.sub("", word.lower())


def fallback_rhymes(word: str) -> List[str]:
    """Fabricate rhyme-like strings from the last letters of ``word``."""

    if len(word) < 2:
        return []
    tail = word[-FALLBACK_TAIL:]
    return [tail + ending for ending in FALLBACK_ENDINGS]


class RhymeEngine:
    """Suggest rhymes for a target word using one of the :class:`RhymeMode` strategies.

    The engine starts without an index unless one is given; until an index is
    attached, exact rhymes come from :func:`fallback_rhymes`.
    """

    def __init__(self, index: Optional[RhymeIndex] = None):
        self._index = index
        self._strategies: Dict[RhymeMode, Callable[[str], Iterable[str]]] = {
            RhymeMode.EXACT: self._exact,
            RhymeMode.COMPOUND: self._compound,
            RhymeMode.CONSONANT_SLOP: self._consonant_slop,
            RhymeMode.ASSONANCE: self._assonance,
            RhymeMode.PHRASE: self._phrase,
        }

    @property
    def index(self) -> Optional[RhymeIndex]:
        return self._index

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    def attach(self, index: Optional[RhymeIndex]) -> None:
        """Replace the current index wholesale (``None`` detaches it)."""

        self._index = index

    def load_in_background(
        self,
        loader: Callable[[], RhymeIndex],
        executor: Optional[Executor] = None,
    ) -> "Future[RhymeIndex]":
        """Build an index off the calling thread and attach it when done.

        Suggestions requested before the build finishes use the fallback
        path. A failing loader attaches the seed index instead.
        """

        owned = executor is None
        if executor is None:
            executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="rhyme-index")
        future = executor.submit(self._build_and_attach, loader)
        if owned:
            executor.shutdown(wait=False)
        return future

    def _build_and_attach(self, loader: Callable[[], RhymeIndex]) -> RhymeIndex:
        try:
            index = loader()
        except Exception:
            LOGGER.warning("Rhyme index build failed; using seed words", exc_info=True)
            index = RhymeIndex.seed()
        self.attach(index)
        LOGGER.info("Rhyme index ready with %s keys", len(index))
        return index

    def suggest(
        self,
        target_word: str,
        mode: Union[RhymeMode, str] = RhymeMode.EXACT,
        limit: int = DEFAULT_LIMIT,
    ) -> List[str]:
        """Return at most ``limit`` suggestions for ``target_word``."""

        mode = RhymeMode(mode)
        if limit <= 0:
            return []
        word = (target_word or "").strip().lower()
        candidates = self._strategies[mode](word)
        return _finalize(candidates, word, limit)

    def suggest_all(self, target_word: str, limit: int = DEFAULT_LIMIT) -> Dict[RhymeMode, List[str]]:
        return {mode: self.suggest(target_word, mode, limit) for mode in RhymeMode}

    # ------------------------------------------------------------------
    # strategies
    # ------------------------------------------------------------------
    def _exact(self, word: str) -> Iterable[str]:
        if self._index is not None and self._index.key_for(word) is not None:
            return self._index.candidates_for(word)
        return fallback_rhymes(word)

    def _compound(self, word: str) -> Iterable[str]:
        if not word:
            return []
        return [candidate for candidate in COMPOUND_BANK if candidate.lower().endswith(word)]

    def _consonant_slop(self, word: str) -> Iterable[str]:
        if not word:
            return []
        tail = word[-2:]
        return [
            candidate
            for candidate in CONSONANT_SLOP_BANK
            if candidate.lower().endswith(word) or tail in candidate.lower()
        ]

    def _assonance(self, word: str) -> Iterable[str]:
        skeleton = vowel_skeleton(word)
        if not skeleton:
            return []
        return [candidate for candidate in ASSONANCE_BANK if vowel_skeleton(candidate) == skeleton]

    def _phrase(self, word: str) -> Iterable[str]:
        if not word:
            return PHRASE_BANK
        return [template.format(word=word) for template in PHRASE_TEMPLATES]


def _finalize(candidates: Iterable[str], target: str, limit: int) -> List[str]:
    results: List[str] = []
    seen = {target} if target else set()
    for candidate in candidates:
        folded = candidate.lower()
        if not candidate or folded in seen:
            continue
        seen.add(folded)
        results.append(candidate)
        if len(results) >= limit:
            break
    return results
