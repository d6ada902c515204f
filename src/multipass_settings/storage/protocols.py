# src/multipass_settings/storage/protocols.py
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol defining the interface for a file-backed string store.

    Implementations bind to a single path. ``open`` must be called before
    any other method; changes made with ``set``/``remove`` are visible to
    ``get`` straight away and reach the file on ``sync``.
    """

    def open(self) -> None:
        """Load the backing file, creating an empty store if it is missing."""
        ...

    def get(self, key: str) -> str | None:
        """Return the stored value for key, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value for key."""
        ...

    def remove(self, key: str) -> None:
        """Drop key from the store if present."""
        ...

    def sync(self) -> None:
        """Flush pending changes to the backing file."""
        ...


# Builds an unopened store for a file path
StoreFactory = Callable[[Path], KeyValueStore]
