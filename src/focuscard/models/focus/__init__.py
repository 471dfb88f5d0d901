"""Focus timer: countdown engine, tick sources and terminal display."""

from .state import TimerEngine, TimerState
from .ticker import AsyncioTicker, ManualTicker, Ticker
from .ui import (
    TimerDisplay,
    run_focus_session,
    show_completion_message,
    show_stopped_message,
)

__all__ = [
    "TimerState",
    "TimerEngine",
    "Ticker",
    "ManualTicker",
    "AsyncioTicker",
    "TimerDisplay",
    "run_focus_session",
    "show_completion_message",
    "show_stopped_message",
]
