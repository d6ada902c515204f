"""Key-value stores backing persistent settings."""

from multipass_settings.storage.memory import MemoryKeyValueStore
from multipass_settings.storage.protocols import KeyValueStore, StoreFactory
from multipass_settings.storage.yaml_store import YamlKeyValueStore

__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "StoreFactory",
    "YamlKeyValueStore",
]
