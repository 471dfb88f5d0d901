"""Configuration management commands."""

import json

import typer

from focuscard.services.config_service import (
    ConfigError,
    ConfigService,
    get_config_service,
)
from focuscard.utils.exit_codes import ERROR_INVALID_ARGS
from focuscard.utils.ui.console import get_console
from focuscard.utils.ui.formatters import format_info, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management")
console = get_console()


@app.command("show")
@command_wrapper
def show_config(
    key: str | None = typer.Argument(None, help="Dotted key, e.g. timer.focus_minutes"),
) -> None:
    """Show the configuration, or a single value."""
    service = get_config_service()
    if key is None:
        console.print_json(service.config.model_dump_json())
        return
    try:
        value = service.get_value(key)
    except KeyError as e:
        raise AppError(f"Unknown config key: {key}", exit_code=ERROR_INVALID_ARGS) from e
    console.print(json.dumps(value))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Dotted key, e.g. timer.focus_minutes"),
    value: str = typer.Argument(..., help="New value (JSON or plain text)"),
) -> None:
    """Set a configuration value."""
    try:
        get_config_service().set_value(key, value)
    except KeyError as e:
        raise AppError(f"Unknown config key: {key}", exit_code=ERROR_INVALID_ARGS) from e
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e
    format_success(f"{key} = {value}")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset all settings to defaults?"):
        format_info("Reset cancelled")
        raise typer.Exit(0)
    try:
        service = get_config_service()
    except ConfigError:
        # Unreadable file: start over without loading it.
        service = ConfigService()
    service.reset_config()
    format_success("Configuration reset")
