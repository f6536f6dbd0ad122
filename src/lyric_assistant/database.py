"""SQLite persistence for session state."""
from __future__ import annotations

import sqlite3
from collections.abc import MutableMapping
from pathlib import Path
from typing import Iterator

SCHEMA = """
CREATE TABLE IF NOT EXISTS state (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class StateDatabase(MutableMapping):
    """String key-value store backed by a single SQLite table."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(self.path)
        self.conn.row_factory = sqlite3.Row

    def close(self) -> None:
        self.conn.close()

    def initialize(self) -> None:
        """Create schema if it does not already exist."""

        with self.conn:
            self.conn.executescript(SCHEMA)

    def __enter__(self) -> "StateDatabase":
        self.initialize()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __getitem__(self, key: str) -> str:
        row = self.conn.execute("SELECT value FROM state WHERE key = ?", (key,)).fetchone()
        if row is None:
            raise KeyError(key)
        return row["value"]

    def __setitem__(self, key: str, value: str) -> None:
        with self.conn:
            self.conn.execute(
                "INSERT OR REPLACE INTO state(key, value) VALUES (?, ?)",
                (key, str(value)),
            )

    def __delitem__(self, key: str) -> None:
        with self.conn:
            cur = self.conn.execute("DELETE FROM state WHERE key = ?", (key,))
        if cur.rowcount == 0:
            raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        rows = self.conn.execute("SELECT key FROM state ORDER BY key").fetchall()
        return iter([row["key"] for row in rows])

    def __len__(self) -> int:
        return int(self.conn.execute("SELECT COUNT(*) FROM state").fetchone()[0])
