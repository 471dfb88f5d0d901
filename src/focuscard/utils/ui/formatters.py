"""Output formatters for the timer, the task list and the collection board."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from focuscard.utils.ui.console import get_console

if TYPE_CHECKING:
    from focuscard.models.task import Task
    from focuscard.services.collection_service import CollectionGroup

console = get_console()

CHECK_SYMBOL = "☑"
UNCHECK_SYMBOL = "☐"
SELECTED_MARK = "▶"


def format_time(seconds: int) -> str:
    """Render a second count as zero-padded ``mm:ss``.

    Minutes are not wrapped into hours, so 3600 seconds renders as ``60:00``.
    """
    seconds = max(0, int(seconds))
    mins = seconds // 60
    secs = seconds % 60
    return f"{mins:02d}:{secs:02d}"


def get_progress_bar(fraction: float, width: int = 40) -> str:
    """Get a progress bar for a completion fraction in ``[0, 1]``."""
    fraction = min(max(fraction, 0.0), 1.0)
    filled = int(width * fraction)
    return "▓" * filled + "░" * (width - filled)


def get_timer_color(remaining: int, is_running: bool) -> str:
    """Get the countdown color for the remaining time."""
    if not is_running:
        return "yellow"
    if remaining < 60:
        return "red"
    if remaining < 300:
        return "yellow"
    return "cyan"


def format_task_line(task: Task, selected: bool = False) -> Text:
    """One task row: checkbox, title and an arrow when it is the focused task."""
    line = Text()
    line.append(SELECTED_MARK if selected else " ", style="bold cyan")
    line.append(" ")
    if task.is_done:
        line.append(CHECK_SYMBOL, style="green")
        line.append(f" {task.title}", style="dim strike")
    else:
        line.append(UNCHECK_SYMBOL)
        line.append(f" {task.title}")
    return line


def format_labels_table(names: list[str], display_names: list[str]) -> Table:
    """Build the table shown by ``focuscard labels list``."""
    table = Table(title="Labels", show_header=True)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Name")
    table.add_column("Shown as", style="dim")
    for index, (name, shown) in enumerate(zip(names, display_names)):
        table.add_row(str(index), name, shown)
    return table


def format_collection_table(groups: list[CollectionGroup]) -> Table:
    """Build a table with one column per label and pinned cards stacked below."""
    table = Table(show_header=True, expand=True)
    for group in groups:
        table.add_column(f"{group.label_name} ({len(group.cards)})")
    depth = max((len(group.cards) for group in groups), default=0)
    for row in range(depth):
        cells = [
            group.cards[row].title if row < len(group.cards) else ""
            for group in groups
        ]
        table.add_row(*cells)
    return table


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")
