"""In-memory key-value store."""

from __future__ import annotations

from pathlib import Path


class MemoryKeyValueStore:
    """Key-value store that never touches disk.

    Useful for tests and for embedding the handlers where persistence is
    not wanted. Records the path it was built for and how many times it
    was opened and synced.
    """

    def __init__(self, path: Path | None = None, initial: dict[str, str] | None = None):
        self.path = path
        self.data: dict[str, str] = dict(initial or {})
        self.open_count = 0
        self.sync_count = 0

    def open(self) -> None:
        self.open_count += 1

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)

    def sync(self) -> None:
        self.sync_count += 1
