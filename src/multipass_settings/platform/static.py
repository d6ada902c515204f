"""Platform with fixed, explicitly supplied facts."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from multipass_settings.constants import HOTKEY_DEFAULT


class StaticPlatform(BaseModel):
    """Platform whose facts are plain values.

    Lets tests and embedding applications pin down every location and
    default without touching the real OS.

    Examples:
        platform = StaticPlatform(daemon_home=Path("/a/b/c"), driver="conductor")
        register_daemon_settings(registry, platform=platform)
    """

    model_config = ConfigDict(frozen=True)

    config_location: Path = Path("/tmp/multipass-settings/config")
    daemon_home: Path = Path("/tmp/multipass-settings/daemon")
    extra_defaults: dict[str, str] = Field(default_factory=dict)
    driver: str = Field("qemu", min_length=1)
    drivers: tuple[str, ...] = ("qemu",)
    privileged_mounts: str = "true"
    hotkey: str = HOTKEY_DEFAULT

    @field_validator("extra_defaults")
    @classmethod
    def check_extra_keys(cls, v: dict[str, str]) -> dict[str, str]:
        for key in v:
            if not key or key != key.strip():
                raise ValueError(f"invalid extra settings key: {key!r}")
        return v

    def generic_config_location(self) -> Path:
        return self.config_location

    def daemon_config_home(self) -> Path:
        return self.daemon_home

    def extra_settings_defaults(self) -> Mapping[str, str]:
        return dict(self.extra_defaults)

    def default_driver(self) -> str:
        return self.driver

    def default_privileged_mounts(self) -> str:
        return self.privileged_mounts

    def default_hotkey(self) -> str:
        return self.hotkey

    def supported_drivers(self) -> tuple[str, ...]:
        # The default driver is always selectable
        if self.driver in self.drivers:
            return self.drivers
        return (*self.drivers, self.driver)
