"""Built-in settings for each role."""

from __future__ import annotations

from multipass_settings.common.enums import Role, SettingFormat
from multipass_settings.constants import (
    AUTOSTART_DEFAULT,
    AUTOSTART_KEY,
    BRIDGED_INTERFACE_DEFAULT,
    BRIDGED_INTERFACE_KEY,
    DRIVER_KEY,
    HOTKEY_KEY,
    MOUNTS_KEY,
    PETENV_DEFAULT,
    PETENV_KEY,
)
from multipass_settings.platform.protocols import Platform
from multipass_settings.settings.validation import SettingSpec


def client_settings(platform: Platform) -> list[SettingSpec]:
    """Settings every client recognizes."""
    return [
        SettingSpec(
            key=PETENV_KEY,
            default=PETENV_DEFAULT,
            fmt=SettingFormat.INSTANCE_NAME,
            description="Name of the primary instance (empty to disable)",
        ),
        SettingSpec(
            key=AUTOSTART_KEY,
            default=AUTOSTART_DEFAULT,
            fmt=SettingFormat.BOOLEAN,
            description="Start the tray client automatically on login",
        ),
        SettingSpec(
            key=HOTKEY_KEY,
            default=platform.default_hotkey(),
            fmt=SettingFormat.KEY_SEQUENCE,
            description="Shortcut that opens a shell in the primary instance",
        ),
    ]


def daemon_settings(platform: Platform) -> list[SettingSpec]:
    """Settings every daemon recognizes."""
    return [
        SettingSpec(
            key=DRIVER_KEY,
            default=platform.default_driver(),
            fmt=SettingFormat.CHOICE,
            choices=platform.supported_drivers(),
            description="Virtualization driver used for instances",
        ),
        SettingSpec(
            key=BRIDGED_INTERFACE_KEY,
            default=BRIDGED_INTERFACE_DEFAULT,
            description="Host network interface to bridge instances to",
        ),
        SettingSpec(
            key=MOUNTS_KEY,
            default=platform.default_privileged_mounts(),
            fmt=SettingFormat.BOOLEAN,
            description="Whether privileged mounts are allowed",
        ),
    ]


def builtin_settings(role: Role, platform: Platform) -> list[SettingSpec]:
    if role is Role.CLIENT:
        return client_settings(platform)
    return daemon_settings(platform)
