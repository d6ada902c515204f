"""YAML file-backed key-value store."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final

import yaml

from multipass_settings.utils.file import atomic_write_text

logger: Final = logging.getLogger(__name__)


class YamlKeyValueStore:
    """Flat string-to-string mapping persisted as a YAML document.

    The file is read once on ``open`` and rewritten as a whole on ``sync``.
    A missing file is treated as an empty store and only created on the
    first ``sync`` after a change.

    Examples:
        store = YamlKeyValueStore(Path("~/.config/multipass/multipass.conf"))
        store.open()
        store.set("petenv", "dev")
        store.sync()
    """

    def __init__(self, path: Path):
        self.path = path
        self._data: dict[str, str] = {}
        self._dirty = False

    def open(self) -> None:
        """Load the file contents.

        Raises:
            OSError: If the file exists but cannot be read
            ValueError: If the file is not a YAML mapping of scalars
        """
        if not self.path.exists():
            logger.debug("Settings file %s does not exist yet", self.path)
            self._data = {}
            return

        try:
            raw = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ValueError(f"malformed YAML: {exc}") from exc

        self._data = self._coerce(raw)
        logger.debug("Loaded %d entries from %s", len(self._data), self.path)

    @staticmethod
    def _coerce(raw: Any) -> dict[str, str]:
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ValueError(f"expected a mapping, found {type(raw).__name__}")

        data: dict[str, str] = {}
        for key, value in raw.items():
            if isinstance(value, (dict, list)):
                raise ValueError(f"value for '{key}' is not a scalar")
            # YAML turns bare true/12 into bool/int; settings are strings
            if isinstance(value, bool):
                data[str(key)] = "true" if value else "false"
            elif value is None:
                data[str(key)] = ""
            else:
                data[str(key)] = str(value)
        return data

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._dirty = True

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._dirty = True

    def sync(self) -> None:
        """Write pending changes to disk.

        Raises:
            OSError: If the file or its directory cannot be written
        """
        if not self._dirty:
            return
        atomic_write_text(
            self.path,
            yaml.safe_dump(dict(sorted(self._data.items())), default_flow_style=False),
        )
        self._dirty = False
        logger.debug("Wrote %d entries to %s", len(self._data), self.path)
