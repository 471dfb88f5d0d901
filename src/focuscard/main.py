"""Main entry point for FocusCard."""

import typer

from focuscard import __version__
from focuscard.commands import config, labels, timer
from focuscard.commands.decorators import AppError, command_wrapper
from focuscard.services.config_service import ConfigError, get_config_service
from focuscard.services.focus_service import FocusCardState
from focuscard.utils.exit_codes import ERROR_INVALID_ARGS
from focuscard.utils.logger import get_logger, set_log_level
from focuscard.utils.ui.console import get_console

app = typer.Typer(
    name="focuscard",
    help="Focus timer with a to-do list and a collection board",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(timer.app, name="timer", help="Countdown focus timer")
app.add_typer(labels.app, name="labels", help="Label management commands")
app.add_typer(config.app, name="config", help="Configuration management")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    """Apply the configured log level before any command runs."""
    if verbose:
        set_log_level("DEBUG")
        return
    try:
        set_log_level(get_config_service().config.logging.level)
    except ConfigError as e:
        # Commands report the broken config themselves.
        get_logger().debug("log level left at default: %s", e)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]FocusCard[/bold] version [cyan]{__version__}[/cyan]")


@app.command("app")
@command_wrapper
def run_app(
    minutes: int | None = typer.Option(
        None, "--minutes", "-m", help="Session length (default from config)"
    ),
) -> None:
    """Open the interactive timer, task list and collection board."""
    from focuscard.utils.ui.focus_app import FocusCardApp, TextualTicker

    if minutes is not None and minutes <= 0:
        raise AppError("Minutes must be positive", exit_code=ERROR_INVALID_ARGS)
    cfg = get_config_service().config

    state = FocusCardState.from_config(
        cfg,
        ticker=TextualTicker(),
        total_seconds=minutes * 60 if minutes else None,
    )
    try:
        FocusCardApp(state, cfg.ui).run()
    finally:
        state.close()


def main():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
