"""Role-specific construction and registration of settings handlers.

Each application entry point calls exactly one of these at startup: the
client calls ``register_client_settings`` and the daemon calls
``register_daemon_settings``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from multipass_settings.common.enums import Role
from multipass_settings.constants import (
    CLIENT_NAME,
    CLIENT_SETTINGS_FILENAME,
    DAEMON_SETTINGS_FILENAME,
)
from multipass_settings.platform.host import HostPlatform
from multipass_settings.platform.protocols import Platform
from multipass_settings.settings.definitions import builtin_settings
from multipass_settings.settings.persistent import PersistentSettingsHandler
from multipass_settings.settings.registry import SettingsRegistry
from multipass_settings.storage.protocols import StoreFactory

logger: Final = logging.getLogger(__name__)


def client_settings_path(platform: Platform) -> Path:
    """``<generic config location>/multipass/multipass.conf``"""
    return platform.generic_config_location() / CLIENT_NAME / CLIENT_SETTINGS_FILENAME


def daemon_settings_path(platform: Platform) -> Path:
    """``<daemon config home>/multipassd.conf``"""
    return platform.daemon_config_home() / DAEMON_SETTINGS_FILENAME


def role_extras(role: Role, extras: Mapping[str, str]) -> dict[str, str]:
    """Pick out the platform extras that belong to role's namespace."""
    return {k: v for k, v in extras.items() if k.startswith(role.extras_prefix)}


def make_persistent_handler(
    role: Role,
    platform: Platform,
    store_factory: StoreFactory | None = None,
) -> PersistentSettingsHandler:
    """Build the persistent handler for role.

    Args:
        role: Client or daemon
        platform: Source of locations and defaults
        store_factory: Builds the backing store (default: YAML file store)

    Returns:
        A handler bound to the role's settings file

    Raises:
        DuplicateSettingError: If a platform extra collides with a built-in key
    """
    path = client_settings_path(platform) if role is Role.CLIENT else daemon_settings_path(platform)
    return PersistentSettingsHandler(
        path,
        builtin_settings(role, platform),
        extras=role_extras(role, platform.extra_settings_defaults()),
        store_factory=store_factory,
        role=role,
    )


def _register(
    role: Role,
    registry: SettingsRegistry,
    platform: Platform | None,
    store_factory: StoreFactory | None,
) -> PersistentSettingsHandler:
    handler = make_persistent_handler(role, platform or HostPlatform(), store_factory)
    registry.register_handler(handler)
    logger.debug(
        "Registered %s settings (%d keys) backed by %s",
        role.value,
        len(handler.keys()),
        handler.path,
    )
    return handler


def register_client_settings(
    registry: SettingsRegistry,
    platform: Platform | None = None,
    store_factory: StoreFactory | None = None,
) -> PersistentSettingsHandler:
    """Register the client's persistent settings handler.

    Args:
        registry: Registry to add the handler to
        platform: Source of locations and defaults (default: host platform)
        store_factory: Builds the backing store (default: YAML file store)

    Returns:
        The registered handler
    """
    return _register(Role.CLIENT, registry, platform, store_factory)


def register_daemon_settings(
    registry: SettingsRegistry,
    platform: Platform | None = None,
    store_factory: StoreFactory | None = None,
) -> PersistentSettingsHandler:
    """Register the daemon's persistent settings handler.

    Args:
        registry: Registry to add the handler to
        platform: Source of locations and defaults (default: host platform)
        store_factory: Builds the backing store (default: YAML file store)

    Returns:
        The registered handler
    """
    return _register(Role.DAEMON, registry, platform, store_factory)


def register_settings(
    role: Role,
    registry: SettingsRegistry,
    platform: Platform | None = None,
    store_factory: StoreFactory | None = None,
) -> PersistentSettingsHandler:
    """Register the handler for role; see the role-specific functions."""
    return _register(role, registry, platform, store_factory)
