"""Focus timer commands."""

import typer

from focuscard.models.focus import (
    run_focus_session,
    show_completion_message,
    show_stopped_message,
)
from focuscard.services.config_service import get_config_service
from focuscard.utils.exit_codes import ERROR_INTERRUPTED, ERROR_INVALID_ARGS
from focuscard.utils.ui.console import get_console

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(help="Countdown focus timer")


@app.command("start")
@command_wrapper
def start_timer(
    minutes: int | None = typer.Option(
        None, "--minutes", "-m", help="Session length (default from config)"
    ),
    task: str | None = typer.Option(None, "--task", "-t", help="Task to focus on"),
    screen: bool = typer.Option(
        True, "--screen/--no-screen", help="Use the alternate screen"
    ),
) -> None:
    """Run a focus session in the terminal. Ctrl+C stops it (exit code 130)."""
    if minutes is None:
        minutes = get_config_service().config.timer.focus_minutes
    if minutes <= 0:
        raise AppError("Minutes must be positive", exit_code=ERROR_INVALID_ARGS)

    title = task.strip() if task and task.strip() else None
    status, state = run_focus_session(
        minutes * 60, task_title=title, console=console, screen=screen
    )

    if status == "completed":
        show_completion_message(state, title, console=console)
    else:
        show_stopped_message(state, title, console=console)
        raise typer.Exit(code=ERROR_INTERRUPTED)
