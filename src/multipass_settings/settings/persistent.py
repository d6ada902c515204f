"""Settings handler that persists values to a key-value file."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final

from multipass_settings.common.enums import Role
from multipass_settings.settings.errors import (
    DuplicateSettingError,
    PersistentSettingsError,
    UnrecognizedSettingError,
)
from multipass_settings.settings.validation import SettingSpec, validate_value
from multipass_settings.storage.protocols import KeyValueStore, StoreFactory
from multipass_settings.storage.yaml_store import YamlKeyValueStore

logger: Final = logging.getLogger(__name__)


class PersistentSettingsHandler:
    """Handler for a fixed set of settings stored in one backing file.

    The handler recognizes exactly the keys of its default map, which is
    built once from the built-in specs plus any extra defaults supplied by
    the platform. Values are read from the backing store, falling back to
    the default when the store has no entry. Writes are validated against
    the key's format before anything is stored.

    The store is opened on first use and then reused. All store access
    happens under a lock, so a handler may be shared between threads.

    Examples:
        handler = PersistentSettingsHandler(
            Path("/home/me/.config/multipass/multipass.conf"),
            client_settings(platform),
            extras={"client.gui.theme": "dark"},
        )
        handler.set("petenv", "dev")
        handler.get("petenv")  # "dev"
    """

    def __init__(
        self,
        path: Path,
        settings: Iterable[SettingSpec],
        extras: Mapping[str, str] | None = None,
        store_factory: StoreFactory | None = None,
        role: Role | None = None,
    ):
        """Initialize the handler and assemble its default map.

        Args:
            path: Backing file for this handler's values
            settings: Built-in setting specs
            extras: Extra keys and defaults (unconstrained strings)
            store_factory: Builds the store for path (default: YAML file store)
            role: Role this handler serves, for logging

        Raises:
            DuplicateSettingError: If a key is defined more than once
        """
        self.path = path
        self.role = role
        self._store_factory: StoreFactory = store_factory or YamlKeyValueStore
        self._store: KeyValueStore | None = None
        self._lock = threading.RLock()

        defaults: dict[str, SettingSpec] = {}
        for spec in settings:
            if spec.key in defaults:
                raise DuplicateSettingError(spec.key)
            defaults[spec.key] = spec

        for key, default in (extras or {}).items():
            if key in defaults:
                raise DuplicateSettingError(key)
            defaults[key] = SettingSpec(key=key, default=default)

        self._defaults: Mapping[str, SettingSpec] = MappingProxyType(defaults)

    @property
    def defaults(self) -> Mapping[str, SettingSpec]:
        """Read-only view of the recognized settings."""
        return self._defaults

    def keys(self) -> frozenset[str]:
        return frozenset(self._defaults)

    def recognizes(self, key: str) -> bool:
        return key in self._defaults

    def get(self, key: str) -> str:
        """Return the stored value for key, or its default.

        Raises:
            UnrecognizedSettingError: If key is not recognized
            PersistentSettingsError: If the backing file cannot be read
        """
        spec = self._spec(key)
        with self._lock:
            value = self._open().get(key)

        if value is None:
            return spec.default
        return value

    def set(self, key: str, value: str) -> None:
        """Validate value and persist it for key.

        Raises:
            UnrecognizedSettingError: If key is not recognized
            InvalidSettingValueError: If value has the wrong format for key
            PersistentSettingsError: If the backing file cannot be read or written
        """
        spec = self._spec(key)
        validate_value(spec, value)

        with self._lock:
            store = self._open()
            previous = store.get(key)
            store.set(key, value)
            try:
                store.sync()
            except OSError as exc:
                # Leave the in-memory view as it was before the call
                if previous is None:
                    store.remove(key)
                else:
                    store.set(key, previous)
                raise PersistentSettingsError(
                    self.path, "write", str(exc), key=key, original_error=exc
                ) from exc

        logger.info("Setting %s updated in %s", key, self.path)

    def _spec(self, key: str) -> SettingSpec:
        try:
            return self._defaults[key]
        except KeyError:
            raise UnrecognizedSettingError(key) from None

    def _open(self) -> KeyValueStore:
        # Callers hold self._lock
        if self._store is None:
            store = self._store_factory(self.path)
            try:
                store.open()
            except (OSError, ValueError) as exc:
                raise PersistentSettingsError(
                    self.path, "read", str(exc), original_error=exc
                ) from exc
            logger.debug(
                "Opened %s settings store at %s",
                self.role.value if self.role else "settings",
                self.path,
            )
            self._store = store
        return self._store
