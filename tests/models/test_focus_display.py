"""Tests for the Rich timer display used by ``focuscard timer start``."""

from __future__ import annotations

import io

from rich.console import Console

from focuscard.models.focus.state import TimerState
from focuscard.models.focus.ui import (
    TimerDisplay,
    run_focus_session,
    show_completion_message,
    show_stopped_message,
)


def _console() -> Console:
    return Console(file=io.StringIO(), width=80, record=True)


class TestTimerDisplay:
    def test_body_shows_countdown_and_task(self):
        console = _console()
        display = TimerDisplay(console)
        state = TimerState(total_seconds=1500, remaining_seconds=1497, is_running=True)
        console.print(display.create_body(state, "Write report"))
        output = console.export_text()
        assert "24:57" in output
        assert "Write report" in output
        assert "Focusing" in output

    def test_layout_header_reflects_status(self):
        display = TimerDisplay(_console())
        finished = TimerState(total_seconds=60, remaining_seconds=0)
        layout = display.create_layout(finished)
        assert layout["header"] is not None
        assert layout["body"] is not None


class TestMessages:
    def test_completion_message(self):
        console = _console()
        show_completion_message(TimerState(60, 0), "Read", console=console)
        output = console.export_text()
        assert "Complete" in output
        assert "01:00" in output

    def test_stopped_message(self):
        console = _console()
        show_stopped_message(TimerState(120, 100), None, console=console)
        output = console.export_text()
        assert "Stopped" in output
        assert "00:20" in output
        assert "01:40" in output


def test_short_session_runs_to_completion():
    status, state = run_focus_session(1, console=_console(), screen=False)
    assert status == "completed"
    assert state.remaining_seconds == 0
    assert state.is_running is False
