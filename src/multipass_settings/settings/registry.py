"""Ordered dispatch of settings access to registered handlers."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Final, TypeVar

from multipass_settings.common.enums import ErrorKind
from multipass_settings.settings.errors import (
    InvalidSettingValueError,
    SettingsError,
    UnrecognizedSettingError,
)
from multipass_settings.settings.protocols import SettingsHandler
from multipass_settings.settings.validation import (
    interpret_bool,
    interpret_float,
    interpret_int,
)

logger: Final = logging.getLogger(__name__)

H = TypeVar("H", bound=SettingsHandler)
T = TypeVar("T", bool, int, float, str)


@dataclass(frozen=True)
class SettingsResult:
    """Outcome of a settings access, for callers that branch on failure kind."""

    key: str
    value: str | None = None
    error: SettingsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error else None


class SettingsRegistry:
    """Process entry point for reading and writing settings.

    Handlers are queried in registration order and the first one that
    recognizes a key serves it. The registry does not know in advance
    which keys each handler owns.

    Build one registry at startup, register the role's handler(s) into
    it, and pass it to whatever needs settings.

    Examples:
        registry = SettingsRegistry()
        register_client_settings(registry)
        registry.get("petenv")
        registry.get_as("autostart", bool)
    """

    def __init__(self) -> None:
        self._handlers: list[SettingsHandler] = []
        self._lock = threading.Lock()

    @property
    def handlers(self) -> tuple[SettingsHandler, ...]:
        return tuple(self._handlers)

    def register_handler(self, handler: H) -> H:
        """Append a handler to the dispatch order.

        Registering the same instance twice has no effect.

        Args:
            handler: Handler to add

        Returns:
            The handler, for convenience
        """
        with self._lock:
            if any(existing is handler for existing in self._handlers):
                logger.warning("Settings handler %r is already registered", handler)
                return handler
            self._handlers.append(handler)
        logger.debug("Registered settings handler %r", handler)
        return handler

    def get(self, key: str) -> str:
        """Return the effective value for key from the first handler that knows it.

        Raises:
            UnrecognizedSettingError: If no handler recognizes key
        """
        for handler in self.handlers:
            try:
                return handler.get(key)
            except UnrecognizedSettingError:
                continue
        raise UnrecognizedSettingError(key)

    def set(self, key: str, value: str) -> None:
        """Store value for key in the first handler that knows it.

        Raises:
            UnrecognizedSettingError: If no handler recognizes key
            InvalidSettingValueError: If the handler rejects value
        """
        for handler in self.handlers:
            try:
                handler.set(key, value)
                return
            except UnrecognizedSettingError:
                continue
        raise UnrecognizedSettingError(key)

    def get_as(self, key: str, type_: type[T]) -> T:
        """Return the value for key interpreted as bool, int, float or str.

        Raises:
            UnrecognizedSettingError: If no handler recognizes key
            InvalidSettingValueError: If the value cannot be interpreted as type_
        """
        value = self.get(key)
        interpreters = {bool: interpret_bool, int: interpret_int, float: interpret_float, str: str}
        try:
            interpret = interpreters[type_]
        except KeyError:
            raise TypeError(f"cannot interpret settings as {type_.__name__}") from None

        try:
            return interpret(value)  # type: ignore[return-value]
        except ValueError as exc:
            raise InvalidSettingValueError(key, value, f"Expected a {type_.__name__}") from exc

    def keys(self) -> tuple[str, ...]:
        """Every key recognized by any registered handler, sorted."""
        found: set[str] = set()
        for handler in self.handlers:
            found.update(handler.keys())
        return tuple(sorted(found))

    def try_get(self, key: str) -> SettingsResult:
        """Like ``get`` but reports failure in the result instead of raising."""
        try:
            return SettingsResult(key, value=self.get(key))
        except SettingsError as err:
            return SettingsResult(key, error=err)

    def try_set(self, key: str, value: str) -> SettingsResult:
        """Like ``set`` but reports failure in the result instead of raising."""
        try:
            self.set(key, value)
            return SettingsResult(key, value=value)
        except SettingsError as err:
            return SettingsResult(key, error=err)
