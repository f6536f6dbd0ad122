"""Rhyme index keyed by the stressed tail of each pronunciation."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

from tqdm import tqdm

from .dictionary import PhoneticDictionary, load_nltk_cmudict
from .phonetics import RhymeKey

LOGGER = logging.getLogger(__name__)


class RhymeIndex:
    """Map rhyme keys to the words that share them.

    Buckets keep first-insertion order. The index is built in one pass and is
    never updated afterwards; reloading a dictionary means building a new one.
    """

    def __init__(self, dictionary: PhoneticDictionary, buckets: Dict[RhymeKey, Dict[str, None]]):
        self.dictionary = dictionary
        self._buckets = buckets

    @classmethod
    def build(cls, dictionary: PhoneticDictionary, progress: bool = False) -> "RhymeIndex":
        buckets: Dict[RhymeKey, Dict[str, None]] = {}
        items = tqdm(dictionary.items(), total=len(dictionary), desc="Index", disable=not progress)
        for word, pronunciations in items:
            for pronunciation in pronunciations:
                key = pronunciation.rhyme_key()
                if key is None:
                    continue
                buckets.setdefault(key, {}).setdefault(word, None)
        LOGGER.debug("Indexed %s words under %s rhyme keys", len(dictionary), len(buckets))
        return cls(dictionary, buckets)

    @classmethod
    def seed(cls) -> "RhymeIndex":
        return cls.build(PhoneticDictionary.seed())

    def key_for(self, word: str) -> Optional[RhymeKey]:
        """Return the key of the first pronunciation of ``word`` that has one."""

        for pronunciation in self.dictionary.pronunciations(word):
            key = pronunciation.rhyme_key()
            if key is not None:
                return key
        return None

    def bucket(self, key: RhymeKey) -> Tuple[str, ...]:
        return tuple(self._buckets.get(tuple(key), ()))

    def candidates_for(self, word: str) -> Tuple[str, ...]:
        """Return the words rhyming with ``word``, excluding ``word`` itself."""

        key = self.key_for(word)
        if key is None:
            return ()
        query = word.strip().lower()
        return tuple(candidate for candidate in self._buckets.get(key, {}) if candidate.lower() != query)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, tuple) and key in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)


def load_rhyme_index(
    path: Optional[Path | str] = None,
    use_nltk: bool = False,
    progress: bool = False,
    fallback: bool = True,
) -> RhymeIndex:
    """Load a dictionary source and index it.

    A missing or unreadable source, or one without a single usable rhyme key,
    yields the embedded seed index when ``fallback`` is enabled.
    """

    dictionary: Optional[PhoneticDictionary] = None
    try:
        if path is not None:
            dict_path = Path(path)
            if not dict_path.exists():
                raise FileNotFoundError(dict_path)
            LOGGER.info("Loading pronunciations from %s", dict_path)
            dictionary = PhoneticDictionary.from_file(dict_path, progress=progress)
        elif use_nltk:
            LOGGER.info("Loading pronunciations from the NLTK cmudict corpus")
            dictionary = load_nltk_cmudict(progress=progress)
    except (OSError, LookupError) as exc:
        if not fallback:
            raise
        LOGGER.warning("Could not load pronunciation dictionary (%s); using seed words", exc)
        return RhymeIndex.seed()

    if dictionary is None:
        LOGGER.info("No pronunciation dictionary configured; using seed words")
        return RhymeIndex.seed()

    index = RhymeIndex.build(dictionary, progress=progress)
    if not len(index):
        if not fallback:
            raise ValueError("Pronunciation dictionary contains no usable rhyme keys")
        LOGGER.warning("Pronunciation dictionary yielded no rhyme keys; using seed words")
        return RhymeIndex.seed()
    LOGGER.info("Loaded %s unique words", len(dictionary))
    return index
