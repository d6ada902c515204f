# src/multipass_settings/platform/protocols.py
from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class Platform(Protocol):
    """Protocol for the OS abstraction consulted when building handlers.

    Supplies config locations plus the default values that vary between
    operating systems. Extra defaults may mix keys for both roles; each
    role picks out the ones in its own namespace.
    """

    def generic_config_location(self) -> Path:
        """Directory where per-user application config lives."""
        ...

    def daemon_config_home(self) -> Path:
        """Directory holding the daemon's own configuration."""
        ...

    def extra_settings_defaults(self) -> Mapping[str, str]:
        """Platform-specific settings keys and their default values."""
        ...

    def default_driver(self) -> str:
        """Virtualization driver used when none is configured."""
        ...

    def default_privileged_mounts(self) -> str:
        """Default for whether privileged mounts are allowed ("true"/"false")."""
        ...

    def default_hotkey(self) -> str:
        """Default key sequence for the client's primary shortcut."""
        ...

    def supported_drivers(self) -> tuple[str, ...]:
        """Drivers this platform can run."""
        ...
