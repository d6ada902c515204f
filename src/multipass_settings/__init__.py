"""Settings resolution and persistence for the multipass client and daemon."""

__version__ = "0.1.0"

from .common.enums import ErrorKind, Role, SettingFormat
from .platform import HostPlatform, Platform, StaticPlatform
from .registration import register_client_settings, register_daemon_settings, register_settings
from .settings import (
    InvalidSettingValueError,
    PersistentSettingsHandler,
    SettingsError,
    SettingsHandler,
    SettingsRegistry,
    SettingsResult,
    UnrecognizedSettingError,
)
from .storage import KeyValueStore, MemoryKeyValueStore, YamlKeyValueStore

# Define what gets imported with: from multipass_settings import *
__all__ = [
    "ErrorKind",
    "HostPlatform",
    "InvalidSettingValueError",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "PersistentSettingsHandler",
    "Platform",
    "Role",
    "SettingFormat",
    "SettingsError",
    "SettingsHandler",
    "SettingsRegistry",
    "SettingsResult",
    "StaticPlatform",
    "UnrecognizedSettingError",
    "YamlKeyValueStore",
    "register_client_settings",
    "register_daemon_settings",
    "register_settings",
]
