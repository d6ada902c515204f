"""Setting specifications and value validation."""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

from multipass_settings.common.enums import SettingFormat
from multipass_settings.settings.errors import InvalidSettingValueError
from multipass_settings.utils.keys import KeySequence

TRUE_WORDS: Final = frozenset({"true", "on", "yes", "1"})
FALSE_WORDS: Final = frozenset({"false", "off", "no", "0"})

_INTEGER: Final = re.compile(r"[+-]?\d+")
_INSTANCE_NAME: Final = re.compile(r"[A-Za-z]([A-Za-z0-9-]*[A-Za-z0-9])?")

_EXPECTED: Final[dict[SettingFormat, str]] = {
    SettingFormat.STRING: "Expected a string",
    SettingFormat.BOOLEAN: "Expected a boolean (true/false, on/off, yes/no, 1/0)",
    SettingFormat.INTEGER: "Expected an integer",
    SettingFormat.FLOAT: "Expected a finite number",
    SettingFormat.KEY_SEQUENCE: "Expected a key sequence such as Ctrl+Alt+U",
    SettingFormat.INSTANCE_NAME: (
        "Expected an instance name: letters, digits and hyphens, "
        "starting with a letter and not ending with a hyphen"
    ),
}


class SettingSpec(BaseModel):
    """Definition of one recognized setting: its key, default and format."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    default: str
    fmt: SettingFormat = SettingFormat.STRING
    choices: tuple[str, ...] = ()
    description: str = ""

    @model_validator(mode="after")
    def check_choices(self) -> SettingSpec:
        if self.fmt is SettingFormat.CHOICE and not self.choices:
            raise ValueError(f"choice setting '{self.key}' needs at least one choice")
        return self

    @property
    def expected(self) -> str:
        """Human-readable description of acceptable values."""
        if self.fmt is SettingFormat.CHOICE:
            return "Expected one of: " + ", ".join(self.choices)
        return _EXPECTED[self.fmt]


def interpret_bool(value: str) -> bool:
    """Interpret a boolean-like setting value.

    Raises:
        ValueError: If the value is not boolean-like
    """
    lowered = value.strip().lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def interpret_int(value: str) -> int:
    if not _INTEGER.fullmatch(value.strip()):
        raise ValueError(f"not an integer: {value!r}")
    return int(value)


def interpret_float(value: str) -> float:
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"not a finite number: {value!r}")
    return result


def _check_instance_name(value: str) -> None:
    # Empty disables the primary instance
    if value and not _INSTANCE_NAME.fullmatch(value):
        raise ValueError(f"not an instance name: {value!r}")


_CHECKERS: Final[dict[SettingFormat, Callable[[str], object]]] = {
    SettingFormat.BOOLEAN: interpret_bool,
    SettingFormat.INTEGER: interpret_int,
    SettingFormat.FLOAT: interpret_float,
    SettingFormat.KEY_SEQUENCE: KeySequence.parse,
    SettingFormat.INSTANCE_NAME: _check_instance_name,
}


def validate_value(spec: SettingSpec, value: str) -> str:
    """Check a value against the setting's format.

    The value is returned unchanged so that what is stored is exactly
    what was given.

    Raises:
        InvalidSettingValueError: If the value does not match the format
    """
    if not isinstance(value, str):
        raise InvalidSettingValueError(spec.key, str(value), spec.expected)

    if spec.fmt is SettingFormat.CHOICE:
        if value not in spec.choices:
            raise InvalidSettingValueError(spec.key, value, spec.expected)
        return value

    checker = _CHECKERS.get(spec.fmt)
    if checker is not None:
        try:
            checker(value)
        except ValueError as exc:
            raise InvalidSettingValueError(spec.key, value, spec.expected) from exc
    return value
