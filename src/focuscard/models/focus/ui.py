"""Rich timer display for the headless ``focuscard timer start`` command."""

from __future__ import annotations

import asyncio

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from focuscard.utils.ui.formatters import (
    format_time,
    get_progress_bar,
    get_timer_color,
)

from .state import TimerEngine, TimerState
from .ticker import AsyncioTicker

REFRESH_INTERVAL = 0.25  # seconds


class TimerDisplay:
    """Manages the fullscreen timer display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def create_layout(self, state: TimerState, task_title: str | None = None) -> Layout:
        """Create the timer layout with all components."""
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        if state.is_running:
            title, color = "FocusCard", "cyan"
        elif state.is_finished:
            title, color = "COMPLETED", "green"
        else:
            title, color = "PAUSED", "yellow"

        header_text = Text(title, style=f"bold {color}", justify="center")
        layout["header"].update(Align.center(header_text, vertical="middle"))
        layout["body"].update(
            Align.center(self.create_body(state, task_title), vertical="middle")
        )
        layout["footer"].update(
            Align.center(
                Text("Press Ctrl+C to stop", style="dim", justify="center"),
                vertical="middle",
            )
        )
        return layout

    def create_body(self, state: TimerState, task_title: str | None = None) -> Group:
        """Create the main body content: task, countdown, progress bar."""
        components = []

        if task_title:
            components.append(Text(task_title[:50], style="bold white", justify="center"))
            components.append(Text(""))

        color = get_timer_color(state.remaining_seconds, state.is_running)
        components.append(
            Text(format_time(state.remaining_seconds), style=f"bold {color}", justify="center")
        )
        components.append(Text(""))

        progress_pct = int(state.progress * 100)
        components.append(
            Text(
                f"{get_progress_bar(state.progress)}  {progress_pct}%",
                style="dim",
                justify="center",
            )
        )
        components.append(Text(state.status_text, style="dim", justify="center"))
        return Group(*components)

    async def run(
        self,
        engine: TimerEngine,
        task_title: str | None = None,
        screen: bool = True,
    ) -> str:
        """Run the engine until it expires or the task is cancelled.

        The engine must use an :class:`AsyncioTicker` (or any ticker bound to
        the running loop). The ticker is cancelled on every exit path.

        Returns 'completed' or 'stopped'.
        """
        engine.start()
        try:
            with Live(
                self.create_layout(engine.state, task_title),
                console=self.console,
                refresh_per_second=4,
                screen=screen,
            ) as live:
                while engine.is_running:
                    await asyncio.sleep(REFRESH_INTERVAL)
                    live.update(self.create_layout(engine.state, task_title))
        finally:
            engine.pause()
        return "completed" if engine.state.is_finished else "stopped"


def run_focus_session(
    total_seconds: int,
    task_title: str | None = None,
    console: Console | None = None,
    screen: bool = True,
) -> tuple[str, TimerState]:
    """Run one blocking focus session in the terminal.

    Ctrl+C stops the session and cancels the tick source.

    Returns:
        The final status ('completed', 'stopped') and the last timer state
    """

    async def _run(engine: TimerEngine) -> str:
        return await TimerDisplay(console).run(engine, task_title, screen=screen)

    engine = TimerEngine(total_seconds, ticker=AsyncioTicker())
    try:
        status = asyncio.run(_run(engine))
    except KeyboardInterrupt:
        status = "stopped"
    finally:
        engine.close()
    return status, engine.state


def show_completion_message(
    state: TimerState, task_title: str | None = None, console: Console | None = None
):
    """Show a completion message after timer ends."""
    console = console or Console()

    panel = Panel(
        f"""[bold green]Focus Session Complete![/bold green]

Task: {task_title or "N/A"}
Duration: {format_time(state.total_seconds)}""",
        border_style="green",
        padding=(1, 2),
    )

    console.print(panel)


def show_stopped_message(
    state: TimerState, task_title: str | None = None, console: Console | None = None
):
    """Show a message when session is stopped early."""
    console = console or Console()

    elapsed = state.total_seconds - state.remaining_seconds

    panel = Panel(
        f"""[yellow]Session Stopped[/yellow]

Task: {task_title or "N/A"}
Time focused: {format_time(elapsed)}
Remaining: {format_time(state.remaining_seconds)}""",
        border_style="yellow",
        padding=(1, 2),
    )

    console.print(panel)
