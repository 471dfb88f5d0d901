"""Countdown timer state and the engine that drives it."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from focuscard.utils.ui.formatters import format_time

from .ticker import ManualTicker, Ticker

logger = logging.getLogger(__name__)

DEFAULT_FOCUS_SECONDS = 25 * 60

STATUS_RUNNING = "Focusing"
STATUS_IDLE = "Not started"


@dataclass
class TimerState:
    """Snapshot of the countdown.

    ``0 <= remaining_seconds <= total_seconds`` holds at all times.
    """

    total_seconds: int = DEFAULT_FOCUS_SECONDS
    remaining_seconds: int = DEFAULT_FOCUS_SECONDS
    is_running: bool = False

    @property
    def progress(self) -> float:
        """Elapsed fraction of the session, clamped to ``[0, 1]``."""
        fraction = 1 - self.remaining_seconds / max(self.total_seconds, 1)
        return min(max(fraction, 0.0), 1.0)

    @property
    def is_finished(self) -> bool:
        return self.remaining_seconds == 0

    @property
    def status_text(self) -> str:
        return STATUS_RUNNING if self.is_running else STATUS_IDLE

    @property
    def formatted(self) -> str:
        """Remaining time as ``mm:ss``."""
        return format_time(self.remaining_seconds)


class TimerEngine:
    """Countdown engine: one decrement per tick while running.

    The engine owns a :class:`Ticker` and is the only code that starts or
    cancels it, so pausing, resetting, expiry and :meth:`close` always leave
    no tick source behind. ``on_change`` is called with an event name after
    every effective state change.
    """

    def __init__(
        self,
        total_seconds: int = DEFAULT_FOCUS_SECONDS,
        ticker: Ticker | None = None,
        on_change: Callable[[str], None] | None = None,
    ):
        if total_seconds <= 0:
            raise ValueError("total_seconds must be positive")
        self.state = TimerState(
            total_seconds=total_seconds, remaining_seconds=total_seconds
        )
        self.ticker: Ticker = ticker if ticker is not None else ManualTicker()
        self.on_change = on_change

    @property
    def is_running(self) -> bool:
        return self.state.is_running

    @property
    def remaining_seconds(self) -> int:
        return self.state.remaining_seconds

    @property
    def total_seconds(self) -> int:
        return self.state.total_seconds

    def start(self) -> bool:
        """Start counting down.

        No-op when already running. A finished timer (nothing remaining) is
        not restarted; call :meth:`reset` first.

        Returns:
            True if the timer was started by this call
        """
        if self.state.is_running:
            return False
        if self.state.is_finished:
            logger.debug("start ignored: timer finished, reset required")
            return False

        self.state.is_running = True
        self.ticker.start(self.tick)
        logger.info("timer started at %s", self.state.formatted)
        self._notify("timer.started")
        return True

    def pause(self) -> bool:
        """Stop counting down, keeping the remaining time.

        Returns:
            True if the timer was running
        """
        self.ticker.cancel()
        if not self.state.is_running:
            return False
        self.state.is_running = False
        logger.info("timer paused at %s", self.state.formatted)
        self._notify("timer.paused")
        return True

    def toggle(self) -> bool:
        """Pause when running, start otherwise. Returns the new running flag."""
        if self.state.is_running:
            self.pause()
        else:
            self.start()
        return self.state.is_running

    def reset(self) -> None:
        """Stop the timer and restore the full duration."""
        self.ticker.cancel()
        self.state.is_running = False
        self.state.remaining_seconds = self.state.total_seconds
        logger.info("timer reset to %s", self.state.formatted)
        self._notify("timer.reset")

    def tick(self) -> None:
        """Advance the countdown by one second.

        Ignored when not running. Reaching zero stops the timer on the same
        tick.
        """
        if not self.state.is_running:
            return

        if self.state.remaining_seconds > 0:
            self.state.remaining_seconds -= 1
            self._notify("timer.tick")

        if self.state.remaining_seconds == 0:
            self.ticker.cancel()
            self.state.is_running = False
            logger.info("timer expired")
            self._notify("timer.expired")

    def set_duration(self, total_seconds: int) -> None:
        """Change the session length. Only allowed while idle; resets the countdown."""
        if total_seconds <= 0:
            raise ValueError("total_seconds must be positive")
        if self.state.is_running:
            raise ValueError("cannot change duration while running")
        self.state.total_seconds = total_seconds
        self.reset()

    def close(self) -> None:
        """Release the tick source. Call on view teardown."""
        self.ticker.cancel()
        self.state.is_running = False

    def _notify(self, event: str) -> None:
        if self.on_change is not None:
            self.on_change(event)
