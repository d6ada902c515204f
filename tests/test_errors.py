from pathlib import Path

from multipass_settings.common.enums import ErrorKind
from multipass_settings.settings.errors import (
    DuplicateSettingError,
    InvalidSettingValueError,
    PersistentSettingsError,
    SettingsError,
    UnrecognizedSettingError,
)


def test_unrecognized_setting_names_key() -> None:
    err = UnrecognizedSettingError("client.nope")
    assert isinstance(err, SettingsError)
    assert err.key == "client.nope"
    assert err.kind is ErrorKind.UNRECOGNIZED_SETTING
    assert "client.nope" in str(err)


def test_invalid_setting_value_carries_details() -> None:
    err = InvalidSettingValueError("autostart", "maybe", "Expected a boolean")
    assert err.kind is ErrorKind.INVALID_SETTING_VALUE
    assert err.value == "maybe"
    assert err.expected == "Expected a boolean"
    assert str(err) == "Invalid setting 'autostart=maybe': Expected a boolean"


def test_duplicate_setting_kind() -> None:
    err = DuplicateSettingError("petenv")
    assert str(err) == "Setting 'petenv' is defined more than once"
    assert err.kind is ErrorKind.DUPLICATE_SETTING


def test_persistent_settings_error_wraps_exception() -> None:
    try:
        raise PermissionError("denied")
    except PermissionError as e:
        err = PersistentSettingsError(Path("/x/y.conf"), "write", "denied", key="k", original_error=e)
        assert err.kind is ErrorKind.PERSISTENCE
        assert err.path == Path("/x/y.conf")
        assert str(err) == "Unable to write settings file /x/y.conf: denied"
        assert isinstance(err.original_error, PermissionError)
