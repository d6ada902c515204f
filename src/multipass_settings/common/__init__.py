"""Shared enumerations used across the settings packages."""

from multipass_settings.common.enums import ErrorKind, Role, SettingFormat

__all__ = ["ErrorKind", "Role", "SettingFormat"]
