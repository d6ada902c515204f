"""Platform facts: config locations and role-specific default values."""

from multipass_settings.platform.host import HostPlatform
from multipass_settings.platform.protocols import Platform
from multipass_settings.platform.static import StaticPlatform

__all__ = ["HostPlatform", "Platform", "StaticPlatform"]
