"""Queue of set-aside lines that can be recalled into the active line."""
from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional

# Never typed by a user, so it is safe as a join character.
SEPARATOR = "\x01"


class RecallQueue:
    """Double-ended list of lines; the top is recalled first.

    Blank lines are never stored and stored lines are always trimmed.
    """

    def __init__(self) -> None:
        self._lines: Deque[str] = deque()

    def push_top(self, line: Optional[str]) -> bool:
        text = (line or "").strip()
        if not text:
            return False
        self._lines.appendleft(text)
        return True

    def push_bottom(self, line: Optional[str]) -> bool:
        text = (line or "").strip()
        if not text:
            return False
        self._lines.append(text)
        return True

    def pop_top(self) -> Optional[str]:
        """Remove and return the top line, or ``None`` when the queue is empty."""

        if not self._lines:
            return None
        return self._lines.popleft()

    def entries(self) -> List[str]:
        """Return the lines from top to bottom."""

        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def serialize(self) -> str:
        return SEPARATOR.join(self._lines)

    def restore(self, packed: Optional[str]) -> None:
        """Replace the contents with lines previously produced by :meth:`serialize`."""

        self._lines.clear()
        if not packed:
            return
        for fragment in packed.split(SEPARATOR):
            if fragment:
                self.push_bottom(fragment)

    @classmethod
    def from_serialized(cls, packed: Optional[str]) -> "RecallQueue":
        queue = cls()
        queue.restore(packed)
        return queue

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)

    def __repr__(self) -> str:
        return f"RecallQueue({self.entries()!r})"
