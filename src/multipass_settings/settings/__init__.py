"""Settings resolution and persistence.

This package provides:
- SettingsRegistry: ordered dispatch of get/set to registered handlers
- PersistentSettingsHandler: file-backed handler with defaults and validation
- The settings error hierarchy
"""

from multipass_settings.settings.definitions import builtin_settings, client_settings, daemon_settings
from multipass_settings.settings.errors import (
    DuplicateSettingError,
    InvalidSettingValueError,
    PersistentSettingsError,
    SettingsError,
    UnrecognizedSettingError,
)
from multipass_settings.settings.persistent import PersistentSettingsHandler
from multipass_settings.settings.protocols import SettingsHandler
from multipass_settings.settings.registry import SettingsRegistry, SettingsResult
from multipass_settings.settings.validation import SettingSpec, interpret_bool, validate_value

__all__ = [
    "DuplicateSettingError",
    "InvalidSettingValueError",
    "PersistentSettingsError",
    "PersistentSettingsHandler",
    "SettingSpec",
    "SettingsError",
    "SettingsHandler",
    "SettingsRegistry",
    "SettingsResult",
    "UnrecognizedSettingError",
    "builtin_settings",
    "client_settings",
    "daemon_settings",
    "interpret_bool",
    "validate_value",
]
