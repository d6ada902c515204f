"""Tests for PersistentSettingsHandler."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from multipass_settings.common.enums import SettingFormat
from multipass_settings.settings import (
    DuplicateSettingError,
    InvalidSettingValueError,
    PersistentSettingsError,
    PersistentSettingsHandler,
    SettingSpec,
    SettingsHandler,
    UnrecognizedSettingError,
)
from multipass_settings.storage import MemoryKeyValueStore, YamlKeyValueStore

from conftest import RecordingStoreFactory

SPECS = [
    SettingSpec(key="petenv", default="primary", fmt=SettingFormat.INSTANCE_NAME),
    SettingSpec(key="autostart", default="true", fmt=SettingFormat.BOOLEAN),
    SettingSpec(key="free", default="anything"),
]
EXTRAS = {"client.an.int": "-12345", "client.empty.setting": ""}


def make_handler(
    path: Path, factory: RecordingStoreFactory | None = None
) -> PersistentSettingsHandler:
    return PersistentSettingsHandler(path, SPECS, extras=EXTRAS, store_factory=factory)


def test_defaults_when_nothing_stored(tmp_path: Path, store_factory: RecordingStoreFactory) -> None:
    handler = make_handler(tmp_path / "s.conf", store_factory)
    assert handler.get("petenv") == "primary"
    assert handler.get("autostart") == "true"
    assert handler.get("client.an.int") == "-12345"
    assert handler.get("client.empty.setting") == ""
    # Defaults are never written back
    assert store_factory.stores[0].data == {}


def test_set_then_get_round_trip(tmp_path: Path, store_factory: RecordingStoreFactory) -> None:
    handler = make_handler(tmp_path / "s.conf", store_factory)
    handler.set("petenv", "goo")
    handler.set("autostart", "off")
    handler.set("client.an.int", "not even a number")

    assert handler.get("petenv") == "goo"
    assert handler.get("autostart") == "off"
    assert handler.get("client.an.int") == "not even a number"
    assert store_factory.stores[0].sync_count == 3


def test_stored_value_wins_over_default(tmp_path: Path) -> None:
    factory = RecordingStoreFactory(initial={"petenv": "stored"})
    handler = make_handler(tmp_path / "s.conf", factory)
    assert handler.get("petenv") == "stored"


@pytest.mark.parametrize("key", ["abc", "Petenv", "client.a.setting", ""])
def test_unrecognized_keys(tmp_path: Path, key: str) -> None:
    # The store knows the key, the handler does not
    factory = RecordingStoreFactory(initial={key: "x"})
    handler = make_handler(tmp_path / "s.conf", factory)

    with pytest.raises(UnrecognizedSettingError) as info:
        handler.get(key)
    assert info.value.key == key

    with pytest.raises(UnrecognizedSettingError):
        handler.set(key, "x")
    assert not handler.recognizes(key)


def test_invalid_value_leaves_state_unchanged(
    tmp_path: Path, store_factory: RecordingStoreFactory
) -> None:
    handler = make_handler(tmp_path / "s.conf", store_factory)
    handler.set("autostart", "false")

    with pytest.raises(InvalidSettingValueError) as info:
        handler.set("autostart", "sometimes")

    assert info.value.key == "autostart"
    assert info.value.value == "sometimes"
    assert handler.get("autostart") == "false"
    assert store_factory.stores[0].sync_count == 1


def test_store_opened_lazily_and_once(tmp_path: Path, store_factory: RecordingStoreFactory) -> None:
    path = tmp_path / "s.conf"
    handler = make_handler(path, store_factory)
    assert store_factory.paths == []

    handler.get("petenv")
    handler.set("petenv", "goo")
    handler.get("free")

    assert store_factory.paths == [path]
    assert store_factory.stores[0].open_count == 1


def test_store_not_opened_for_unrecognized_key(
    tmp_path: Path, store_factory: RecordingStoreFactory
) -> None:
    handler = make_handler(tmp_path / "s.conf", store_factory)
    with pytest.raises(UnrecognizedSettingError):
        handler.get("nope")
    assert store_factory.paths == []


def test_keys_and_defaults_are_fixed(tmp_path: Path) -> None:
    handler = make_handler(tmp_path / "s.conf", RecordingStoreFactory())
    assert handler.keys() == {"petenv", "autostart", "free", "client.an.int", "client.empty.setting"}

    handler.set("petenv", "goo")
    assert handler.defaults["petenv"].default == "primary"
    with pytest.raises(TypeError):
        handler.defaults["new"] = SettingSpec(key="new", default="")  # type: ignore[index]


def test_extra_colliding_with_builtin_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(DuplicateSettingError) as info:
        PersistentSettingsHandler(tmp_path / "s.conf", SPECS, extras={"petenv": "other"})
    assert info.value.key == "petenv"


def test_duplicate_builtin_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(DuplicateSettingError, match="defined more than once") as info:
        PersistentSettingsHandler(tmp_path / "s.conf", [SPECS[0], SPECS[0]])
    assert info.value.key == SPECS[0].key


def test_values_persist_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "multipass" / "multipass.conf"
    make_handler(path).set("petenv", "persisted")

    assert path.exists()
    assert make_handler(path).get("petenv") == "persisted"


def test_invalid_value_does_not_touch_file(tmp_path: Path) -> None:
    path = tmp_path / "multipass.conf"
    handler = make_handler(path)
    handler.set("petenv", "first")
    before = path.read_bytes()

    with pytest.raises(InvalidSettingValueError):
        handler.set("petenv", "not a name")

    assert path.read_bytes() == before


def test_unreadable_file_raises_persistence_error(tmp_path: Path) -> None:
    path = tmp_path / "multipass.conf"
    path.write_text("- not\n- a mapping\n")
    handler = make_handler(path)

    with pytest.raises(PersistentSettingsError) as info:
        handler.get("petenv")
    assert info.value.operation == "read"
    assert info.value.path == path


def test_failed_sync_rolls_back(tmp_path: Path) -> None:
    class FailingStore(MemoryKeyValueStore):
        def sync(self) -> None:
            raise OSError("disk full")

    stores: list[FailingStore] = []

    def factory(path: Path) -> FailingStore:
        stores.append(FailingStore(path, {"autostart": "false"}))
        return stores[-1]

    handler = make_handler(tmp_path / "s.conf", factory)  # type: ignore[arg-type]

    with pytest.raises(PersistentSettingsError, match="disk full"):
        handler.set("autostart", "true")
    with pytest.raises(PersistentSettingsError):
        handler.set("petenv", "goo")

    assert handler.get("autostart") == "false"
    assert handler.get("petenv") == "primary"
    assert stores[0].data == {"autostart": "false"}


def test_concurrent_sets_leave_valid_file(tmp_path: Path) -> None:
    path = tmp_path / "multipass.conf"
    handler = make_handler(path)
    values = [f"inst{i}" for i in range(16)]

    threads = [threading.Thread(target=handler.set, args=("petenv", v)) for v in values]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert handler.get("petenv") in values
    reloaded = YamlKeyValueStore(path)
    reloaded.open()
    assert reloaded.get("petenv") == handler.get("petenv")


def test_satisfies_handler_protocol(tmp_path: Path) -> None:
    assert isinstance(make_handler(tmp_path / "s.conf"), SettingsHandler)
