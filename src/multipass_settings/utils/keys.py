"""Keyboard shortcut (key sequence) parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

# Canonical modifier order, and the spellings accepted for each
MODIFIERS: Final[tuple[str, ...]] = ("Ctrl", "Alt", "Shift", "Meta")
_MODIFIER_ALIASES: Final[dict[str, str]] = {
    "ctrl": "Ctrl",
    "control": "Ctrl",
    "alt": "Alt",
    "option": "Alt",
    "opt": "Alt",
    "shift": "Shift",
    "meta": "Meta",
    "cmd": "Meta",
    "command": "Meta",
    "super": "Meta",
    "win": "Meta",
}

_NAMED_KEYS: Final[dict[str, str]] = {
    name.lower(): name
    for name in (
        "Space",
        "Tab",
        "Enter",
        "Return",
        "Esc",
        "Backspace",
        "Delete",
        "Insert",
        "Home",
        "End",
        "PgUp",
        "PgDown",
        "Up",
        "Down",
        "Left",
        "Right",
        "Print",
        "Pause",
    )
}
_NAMED_KEYS.update({"escape": "Esc", "del": "Delete", "ins": "Insert"})

_FUNCTION_KEY = re.compile(r"[Ff]([1-9]|[12][0-9]|3[0-5])")


@dataclass(frozen=True)
class KeySequence:
    """A single keyboard shortcut: a set of modifiers plus one key.

    Equality is on the normalized form, so ``Ctrl+Alt+U`` equals
    ``alt+control+u``. The empty sequence represents a disabled shortcut.
    """

    modifiers: tuple[str, ...] = ()
    key: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.key

    @classmethod
    def parse(cls, text: str) -> KeySequence:
        """Parse a textual shortcut such as ``Ctrl+Alt+U``.

        Args:
            text: Shortcut text, ``+``-separated, modifiers first

        Returns:
            The normalized key sequence

        Raises:
            ValueError: If the text is not a valid single shortcut
        """
        stripped = text.strip()
        if not stripped:
            return cls()

        # A trailing "++" means the key itself is "+"
        if stripped == "+" or stripped.endswith("++"):
            head = stripped[:-1]
            parts = (head[:-1].split("+") if head else []) + ["+"]
        else:
            parts = stripped.split("+")

        *mods, key = [p.strip() for p in parts]
        modifiers: set[str] = set()
        for mod in mods:
            canonical = _MODIFIER_ALIASES.get(mod.lower())
            if canonical is None:
                raise ValueError(f"unknown modifier '{mod}'")
            if canonical in modifiers:
                raise ValueError(f"repeated modifier '{mod}'")
            modifiers.add(canonical)

        return cls(
            modifiers=tuple(m for m in MODIFIERS if m in modifiers),
            key=cls._normalize_key(key),
        )

    @staticmethod
    def _normalize_key(key: str) -> str:
        if not key:
            raise ValueError("missing key")
        if len(key) == 1 and key.isprintable() and not key.isspace():
            return key.upper()
        if _FUNCTION_KEY.fullmatch(key):
            return key.upper()
        named = _NAMED_KEYS.get(key.lower())
        if named is None:
            raise ValueError(f"unknown key '{key}'")
        return named

    def __str__(self) -> str:
        if self.is_empty:
            return ""
        return "+".join((*self.modifiers, self.key))
