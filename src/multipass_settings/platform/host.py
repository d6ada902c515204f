"""Platform facts for the operating system we are running on."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from multipass_settings.constants import DAEMON_NAME, HOTKEY_DEFAULT

logger: Final = logging.getLogger(__name__)

WINTERM_KEY: Final = "client.apps.windows-terminal.profiles"


@dataclass(frozen=True)
class OSDefaults:
    """Default values that differ between operating systems."""

    driver: str
    drivers: tuple[str, ...]
    privileged_mounts: str
    daemon_home_root: str
    hotkey: str = HOTKEY_DEFAULT
    extras: Mapping[str, str] = field(default_factory=dict)


LINUX: Final = OSDefaults(
    driver="qemu",
    drivers=("qemu", "libvirt", "lxd"),
    privileged_mounts="true",
    daemon_home_root="/root/.config",
)
MACOS: Final = OSDefaults(
    driver="qemu",
    drivers=("qemu", "virtualbox"),
    privileged_mounts="false",
    daemon_home_root="/var/root/Library/Preferences",
)
WINDOWS: Final = OSDefaults(
    driver="hyperv",
    drivers=("hyperv", "virtualbox"),
    privileged_mounts="false",
    daemon_home_root="",  # resolved from PROGRAMDATA
    extras={WINTERM_KEY: "primary"},
)


class HostPlatform:
    """Platform implementation backed by the host OS and environment.

    Environment overrides:
        XDG_CONFIG_HOME: client config location (Linux)
        DAEMON_CONFIG_HOME: root of the daemon config home
        MULTIPASS_DEFAULT_DRIVER: default driver
        MULTIPASS_PRIVILEGED_MOUNTS: default privileged mounts policy
    """

    def __init__(self, system: str | None = None, environ: Mapping[str, str] | None = None):
        """Initialize for a given OS.

        Args:
            system: ``sys.platform``-style name (default: the running OS)
            environ: Environment mapping (default: ``os.environ``)
        """
        self.system = system or sys.platform
        self.environ = environ if environ is not None else os.environ

        if self.system.startswith("win"):
            self._defaults = WINDOWS
        elif self.system == "darwin":
            self._defaults = MACOS
        else:
            self._defaults = LINUX
        logger.debug("Using %s platform defaults", self.system)

    @property
    def is_windows(self) -> bool:
        return self._defaults is WINDOWS

    def generic_config_location(self) -> Path:
        if self.is_windows:
            local_appdata = self.environ.get("LOCALAPPDATA")
            if local_appdata:
                return Path(local_appdata)
            return Path.home() / "AppData" / "Local"

        if self._defaults is MACOS:
            return Path.home() / "Library" / "Preferences"

        xdg = self.environ.get("XDG_CONFIG_HOME")
        return Path(xdg) if xdg else Path.home() / ".config"

    def daemon_config_home(self) -> Path:
        root = self.environ.get("DAEMON_CONFIG_HOME")
        if not root:
            if self.is_windows:
                return Path(self.environ.get("PROGRAMDATA", r"C:\ProgramData")) / "Multipass"
            root = self._defaults.daemon_home_root
        return Path(root) / DAEMON_NAME

    def extra_settings_defaults(self) -> Mapping[str, str]:
        return dict(self._defaults.extras)

    def default_driver(self) -> str:
        return self.environ.get("MULTIPASS_DEFAULT_DRIVER") or self._defaults.driver

    def default_privileged_mounts(self) -> str:
        return self.environ.get("MULTIPASS_PRIVILEGED_MOUNTS") or self._defaults.privileged_mounts

    def default_hotkey(self) -> str:
        return self._defaults.hotkey

    def supported_drivers(self) -> tuple[str, ...]:
        driver = self.default_driver()
        if driver in self._defaults.drivers:
            return self._defaults.drivers
        return (*self._defaults.drivers, driver)
