"""Setting keys, file names and fixed default values."""

from typing import Final

# Client keys
PETENV_KEY: Final = "petenv"
AUTOSTART_KEY: Final = "autostart"
HOTKEY_KEY: Final = "hotkey"

# Daemon keys
DRIVER_KEY: Final = "driver"
BRIDGED_INTERFACE_KEY: Final = "bridged-interface"
MOUNTS_KEY: Final = "mounts"

# Fixed built-in defaults
PETENV_DEFAULT: Final = "primary"
AUTOSTART_DEFAULT: Final = "true"
BRIDGED_INTERFACE_DEFAULT: Final = ""
HOTKEY_DEFAULT: Final = "Ctrl+Alt+U"

# Backing files
CLIENT_NAME: Final = "multipass"
DAEMON_NAME: Final = "multipassd"
SETTINGS_FILE_EXTENSION: Final = ".conf"
CLIENT_SETTINGS_FILENAME: Final = CLIENT_NAME + SETTINGS_FILE_EXTENSION
DAEMON_SETTINGS_FILENAME: Final = DAEMON_NAME + SETTINGS_FILE_EXTENSION
