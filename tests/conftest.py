from __future__ import annotations

from pathlib import Path

import pytest

from multipass_settings.platform import StaticPlatform
from multipass_settings.settings import SettingsRegistry
from multipass_settings.storage import MemoryKeyValueStore


class RecordingStoreFactory:
    """Store factory that hands out in-memory stores and remembers the paths."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.initial = initial or {}
        self.paths: list[Path] = []
        self.stores: list[MemoryKeyValueStore] = []

    def __call__(self, path: Path) -> MemoryKeyValueStore:
        store = MemoryKeyValueStore(path, self.initial)
        self.paths.append(path)
        self.stores.append(store)
        return store


@pytest.fixture
def store_factory() -> RecordingStoreFactory:
    return RecordingStoreFactory()


@pytest.fixture
def platform(tmp_path: Path) -> StaticPlatform:
    return StaticPlatform(
        config_location=tmp_path / "config",
        daemon_home=tmp_path / "daemon",
        driver="qemu",
        drivers=("qemu", "lxd"),
        privileged_mounts="true",
    )


@pytest.fixture
def registry() -> SettingsRegistry:
    return SettingsRegistry()
