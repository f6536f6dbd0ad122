"""Host-facing operations: live statistics and the recall queue commands."""
from __future__ import annotations

import logging
from typing import List, MutableMapping, Optional, Tuple, Union

from .models import Analysis
from .recall import RecallQueue
from .rhymes import DEFAULT_LIMIT, RhymeEngine, RhymeMode
from .syllables import syllables_in_line
from .text import last_non_empty_line, last_word, word_count

LOGGER = logging.getLogger(__name__)

KEY_PROJECT = "projectName"
KEY_QUEUE = "activeQueue"


def analyze(text: str) -> Analysis:
    """Word count of ``text`` plus syllables and target word of its last line."""

    line = last_non_empty_line(text or "")
    return Analysis(
        word_count=word_count(text or ""),
        syllable_count=syllables_in_line(line),
        target_word=last_word(line),
        line=line,
    )


class LyricSession:
    """One editing session: project name, recall queue and rhyme engine.

    State is read from and written back to ``store`` under the
    ``projectName`` and ``activeQueue`` keys.
    """

    def __init__(self, store: Optional[MutableMapping[str, str]] = None, engine: Optional[RhymeEngine] = None):
        self.store = store if store is not None else {}
        self.engine = engine if engine is not None else RhymeEngine()
        self.queue = RecallQueue.from_serialized(self.store.get(KEY_QUEUE, ""))
        self._project_name = self.store.get(KEY_PROJECT, "")
        LOGGER.debug("Restored %s queued lines for project %r", len(self.queue), self._project_name)

    @property
    def project_name(self) -> str:
        return self._project_name

    @project_name.setter
    def project_name(self, name: str) -> None:
        self._project_name = name or ""
        self.store[KEY_PROJECT] = self._project_name

    def persist(self) -> None:
        self.store[KEY_PROJECT] = self._project_name
        self.store[KEY_QUEUE] = self.queue.serialize()

    def _persist_queue(self) -> None:
        self.store[KEY_QUEUE] = self.queue.serialize()

    def save_active(self, active: str) -> str:
        """Push the active line onto the top of the queue and clear it."""

        if self.queue.push_top(active):
            self._persist_queue()
        return ""

    def recall_next(self, active: str = "") -> Optional[str]:
        """Send the active line to the bottom and bring back the top line.

        Returns ``None`` when there was nothing to recall.
        """

        self.queue.push_bottom(active)
        recalled = self.queue.pop_top()
        self._persist_queue()
        return recalled

    @staticmethod
    def apply_active(body: str, active: str) -> str:
        """Append the active line to ``body`` as its own line."""

        line = (active or "").strip()
        if not line:
            return body
        if not body or body.endswith("\n"):
            return body + line
        return body + "\n" + line

    def update(
        self,
        text: str,
        mode: Union[RhymeMode, str] = RhymeMode.EXACT,
        limit: int = DEFAULT_LIMIT,
    ) -> Tuple[Analysis, List[str]]:
        """Return statistics and suggestions for the text as typed so far."""

        analysis = analyze(text)
        if not analysis.target_word and RhymeMode(mode) is not RhymeMode.PHRASE:
            return analysis, []
        return analysis, self.engine.suggest(analysis.target_word, mode, limit)
