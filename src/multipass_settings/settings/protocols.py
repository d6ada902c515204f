# src/multipass_settings/settings/protocols.py
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SettingsHandler(Protocol):
    """Protocol defining the interface for settings handlers.

    A handler owns a slice of the key space. For keys outside that slice,
    ``get`` and ``set`` must raise ``UnrecognizedSettingError`` so that the
    registry can move on to the next handler.
    """

    def keys(self) -> frozenset[str]:
        """Return every key this handler recognizes."""
        ...

    def recognizes(self, key: str) -> bool:
        """Check whether key belongs to this handler."""
        ...

    def get(self, key: str) -> str:
        """Return the effective value for key.

        Raises:
            UnrecognizedSettingError: If key is not recognized
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Validate and store a value for key.

        Raises:
            UnrecognizedSettingError: If key is not recognized
            InvalidSettingValueError: If value has the wrong format for key
        """
        ...
