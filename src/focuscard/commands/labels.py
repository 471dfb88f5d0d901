"""Label management commands.

These edit the label names the app starts with. Renames made inside a
running app are not written back.
"""

import typer

from focuscard.services.collection_service import LabelBoard
from focuscard.services.config_service import get_config_service
from focuscard.utils.exit_codes import ERROR_INVALID_ARGS
from focuscard.utils.ui.console import get_console
from focuscard.utils.ui.formatters import (
    format_labels_table,
    format_success,
    format_warning,
)

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Label management commands")
console = get_console()


@app.command("list")
@command_wrapper
def list_labels() -> None:
    """List the configured labels."""
    names = get_config_service().config.board.labels
    board = LabelBoard(names)
    console.print(
        format_labels_table(names, [board.display_name(i) for i in range(len(board))])
    )


@app.command("rename")
@command_wrapper
def rename_label(
    index: int = typer.Argument(..., help="Label position (from 'labels list')"),
    name: str = typer.Argument(..., help="New name; blank shows as 'uncategorized'"),
) -> None:
    """Rename a label."""
    try:
        get_config_service().rename_label(index, name)
    except IndexError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e
    if not name.strip():
        format_warning("Blank label names show as 'uncategorized'")
    format_success(f"Label {index} renamed to '{LabelBoard([name]).display_name(0)}'")
