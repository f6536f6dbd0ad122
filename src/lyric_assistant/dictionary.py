"""Pronunciation dictionary loading for the lyric assistant."""
from __future__ import annotations

import logging
import re
import tempfile
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

import nltk
from tqdm import tqdm

from .phonetics import Pronunciation, to_pronunciation

LOGGER = logging.getLogger(__name__)

CMU_URL = "https://svn.code.sf.net/p/cmusphinx/code/trunk/cmudict/cmudict-0.7b"
COMMENT_MARKER = ";"

ENTRY_RE = re.compile(r"^(?P<word>\S+?)(?:\((?P<variant>\d+)\))?\s+(?P<phones>\S.*)$")

# Hand-picked entries covering a few common rhyme families. Used whenever no
# real dictionary can be loaded.
SEED_ENTRIES = """\
;;; embedded seed pronunciations
DOOR  D AO1 R
MORE  M AO1 R
FLOOR  F L AO1 R
SHORE  SH AO1 R
BEFORE  B IH0 F AO1 R
NIGHT  N AY1 T
LIGHT  L AY1 T
BRIGHT  B R AY1 T
SIGHT  S AY1 T
TONIGHT  T AH0 N AY1 T
DAY  D EY1
WAY  W EY1
STAY  S T EY1
AWAY  AH0 W EY1
HEART  HH AA1 R T
START  S T AA1 R T
APART  AH0 P AA1 R T
FIRE  F AY1 ER0
FIRE(1)  F AY1 R
DESIRE  D IH0 Z AY1 ER0
HIGHER  HH AY1 ER0
LOVE  L AH1 V
ABOVE  AH0 B AH1 V
OF  AH1 V
TIME  T AY1 M
RHYME  R AY1 M
CLIMB  K L AY1 M
ALONE  AH0 L OW1 N
HOME  HH OW1 M
STONE  S T OW1 N
KNOWN  N OW1 N
RAIN  R EY1 N
PAIN  P EY1 N
AGAIN  AH0 G EH1 N
AGAIN(1)  AH0 G EY1 N
"""


class PhoneticDictionary:
    """Word to pronunciations table, in source order per word."""

    def __init__(self, entries: Optional[Mapping[str, Sequence[Pronunciation]]] = None):
        self._entries: Dict[str, Tuple[Pronunciation, ...]] = {}
        if entries:
            for word, pronunciations in entries.items():
                for pronunciation in pronunciations:
                    self.add(word, pronunciation)

    def add(self, word: str, pronunciation: Pronunciation | Sequence[str] | str) -> None:
        """Append a pronunciation to ``word``; empty pronunciations are ignored."""

        pron = to_pronunciation(pronunciation)
        key = word.strip().lower()
        if not key or not pron.phonemes:
            return
        self._entries[key] = self._entries.get(key, ()) + (pron,)

    def pronunciations(self, word: str) -> Tuple[Pronunciation, ...]:
        return self._entries.get(word.strip().lower(), ())

    def preferred(self, word: str) -> Optional[Pronunciation]:
        prons = self.pronunciations(word)
        return prons[0] if prons else None

    def items(self) -> Iterator[Tuple[str, Tuple[Pronunciation, ...]]]:
        return iter(self._entries.items())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip().lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    @classmethod
    def from_entries(cls, entries: Iterable[Tuple[str, Sequence[str]]]) -> "PhoneticDictionary":
        dictionary = cls()
        for word, phones in entries:
            dictionary.add(word, phones)
        return dictionary

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "PhoneticDictionary":
        return cls.from_entries(parse_lines(lines))

    @classmethod
    def from_file(cls, path: Path | str, progress: bool = False) -> "PhoneticDictionary":
        return cls.from_entries(parse_cmudict(Path(path), progress=progress))

    @classmethod
    def seed(cls) -> "PhoneticDictionary":
        return cls.from_lines(SEED_ENTRIES.splitlines())


def parse_entry(line: str) -> Optional[Tuple[str, List[str]]]:
    """Parse one dictionary record into ``(word, phonemes)``.

    Comments and records without a word/phoneme separator give ``None``.
    """

    entry = line.strip()
    if not entry or entry.startswith(COMMENT_MARKER):
        return None
    match = ENTRY_RE.match(entry)
    if not match:
        return None
    return match.group("word").lower(), match.group("phones").split()


def parse_lines(lines: Iterable[str]) -> Iterator[Tuple[str, List[str]]]:
    """Yield ``(word, phonemes)`` for every well-formed record in ``lines``."""

    skipped = 0
    for line in lines:
        parsed = parse_entry(line)
        if parsed is None:
            if line.strip() and not line.lstrip().startswith(COMMENT_MARKER):
                skipped += 1
            continue
        yield parsed
    if skipped:
        LOGGER.debug("Skipped %s malformed dictionary lines", skipped)


def parse_cmudict(path: Path, progress: bool = False) -> Iterator[Tuple[str, List[str]]]:
    """Yield ``(word, phonemes)`` from a CMU dictionary file."""

    # cmudict-0.7b carries latin-1 bytes in a few comment lines
    with path.open("r", encoding="latin-1") as handle:
        yield from parse_lines(tqdm(handle, desc="CMU", unit=" lines", disable=not progress))


def ensure_nltk_data() -> None:
    """Ensure the NLTK copy of the CMU dictionary is available."""

    try:
        nltk.data.find("corpora/cmudict")
    except LookupError:
        LOGGER.info("Downloading CMU dictionary corpus via NLTK…")
        nltk.download("cmudict", quiet=True)
        nltk.data.find("corpora/cmudict")


def load_nltk_cmudict(progress: bool = False) -> PhoneticDictionary:
    """Build a dictionary from the NLTK ``cmudict`` corpus."""

    from nltk.corpus import cmudict

    ensure_nltk_data()
    entries = cmudict.entries()
    return PhoneticDictionary.from_entries(tqdm(entries, desc="cmudict", disable=not progress))


def download_cmudict(destination: Path | None = None) -> Path:
    """Download the CMU pronouncing dictionary to the destination path."""

    import urllib.request

    if destination is None:
        destination = Path(tempfile.gettempdir()) / "cmudict-0.7b"
    destination.parent.mkdir(parents=True, exist_ok=True)
    LOGGER.info("Downloading CMU Pronouncing Dictionary…")
    urllib.request.urlretrieve(CMU_URL, destination)
    return destination
