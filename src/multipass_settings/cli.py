"""Multipass settings CLI.

Reads and writes the client or daemon settings of the local machine
through the same registry and handlers the applications use.
"""

from __future__ import annotations

import logging
import sys
from typing import Final

import typer
from dotenv import load_dotenv

from multipass_settings.common.enums import Role
from multipass_settings.platform.host import HostPlatform
from multipass_settings.platform.protocols import Platform
from multipass_settings.registration import register_settings
from multipass_settings.settings.errors import (
    InvalidSettingValueError,
    PersistentSettingsError,
    UnrecognizedSettingError,
)
from multipass_settings.settings.registry import SettingsRegistry

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Multipass settings CLI", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "multipass_settings.cli"

EXIT_PERSISTENCE: Final = 1
EXIT_UNRECOGNIZED: Final = 2
EXIT_INVALID: Final = 3
EXIT_USAGE: Final = 2

ROLE_OPTION = typer.Option(Role.CLIENT.value, "--role", "-r", help="Settings role: client or daemon")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
KEY_ARGUMENT = typer.Argument(None, help="Settings key, e.g. petenv")
KEYS_OPTION = typer.Option(False, "--keys", help="List the recognized keys instead")


def make_platform() -> Platform:
    """Platform used by the CLI."""
    return HostPlatform()


def _fail(message: str, code: int) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    return typer.Exit(code=code)


@app.callback()
def main(ctx: typer.Context, role: str = ROLE_OPTION, debug: bool = DEBUG_OPTION) -> None:
    """Build the settings registry for the chosen role."""
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        selected = Role(role)
    except ValueError:
        raise _fail(f"Unknown role '{role}' (expected client or daemon)", EXIT_USAGE) from None

    registry = SettingsRegistry()
    register_settings(selected, registry, platform=make_platform())
    ctx.obj = registry


@app.command("get")
def get_setting(ctx: typer.Context, key: str | None = KEY_ARGUMENT, keys: bool = KEYS_OPTION) -> None:
    """Print the value of a setting."""
    registry: SettingsRegistry = ctx.obj

    if keys:
        for known in registry.keys():
            typer.echo(known)
        return
    if key is None:
        raise _fail("Missing settings key (or use --keys)", EXIT_UNRECOGNIZED)

    try:
        typer.echo(registry.get(key))
    except UnrecognizedSettingError as exc:
        raise _fail(str(exc), EXIT_UNRECOGNIZED) from exc
    except PersistentSettingsError as exc:
        raise _fail(str(exc), EXIT_PERSISTENCE) from exc


@app.command("set")
def set_setting(ctx: typer.Context, key: str, value: str) -> None:
    """Validate and store a setting."""
    registry: SettingsRegistry = ctx.obj

    try:
        registry.set(key, value)
    except UnrecognizedSettingError as exc:
        raise _fail(str(exc), EXIT_UNRECOGNIZED) from exc
    except InvalidSettingValueError as exc:
        raise _fail(str(exc), EXIT_INVALID) from exc
    except PersistentSettingsError as exc:
        raise _fail(str(exc), EXIT_PERSISTENCE) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
