"""Exception classes for settings resolution and persistence.

Every error carries an ``ErrorKind`` so that callers who prefer to branch
on the kind of failure (see ``SettingsResult``) can do so without a chain
of ``except`` clauses.
"""

from __future__ import annotations

from pathlib import Path

from multipass_settings.common.enums import ErrorKind


class SettingsError(Exception):
    """Base class for all settings failures."""

    kind: ErrorKind

    def __init__(self, key: str, message: str) -> None:
        """Initialize the exception.

        Args:
            key: The setting key involved in the failure
            message: Human-readable error message
        """
        super().__init__(message)
        self.key: str = key
        self.message: str = message


class UnrecognizedSettingError(SettingsError):
    """Raised when a key is outside every queried handler's known set."""

    kind = ErrorKind.UNRECOGNIZED_SETTING

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Unrecognized settings key: '{key}'")


class InvalidSettingValueError(SettingsError):
    """Raised when a recognized key is given a value in the wrong format."""

    kind = ErrorKind.INVALID_SETTING_VALUE

    def __init__(self, key: str, value: str, expected: str) -> None:
        """Initialize with the offending value.

        Args:
            key: The recognized setting key
            value: The rejected value
            expected: Description of the format the key expects
        """
        super().__init__(key, f"Invalid setting '{key}={value}': {expected}")
        self.value: str = value
        self.expected: str = expected


class DuplicateSettingError(SettingsError):
    """Raised when a handler would be built with the same key defined twice."""

    kind = ErrorKind.DUPLICATE_SETTING

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Setting '{key}' is defined more than once")


class PersistentSettingsError(SettingsError):
    """Raised when the backing settings file cannot be read or written."""

    kind = ErrorKind.PERSISTENCE

    def __init__(
        self,
        path: Path,
        operation: str,
        detail: str,
        key: str = "",
        original_error: Exception | None = None,
    ) -> None:
        """Initialize with I/O failure details.

        Args:
            path: Backing file that failed
            operation: "read" or "write"
            detail: Description of what went wrong
            key: The key being accessed, if any
            original_error: The original exception that was caught
        """
        super().__init__(key, f"Unable to {operation} settings file {path}: {detail}")
        self.path: Path = path
        self.operation: str = operation
        self.detail: str = detail
        self.original_error = original_error
