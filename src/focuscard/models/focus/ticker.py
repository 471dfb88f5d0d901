"""Cancellable one-second tick sources for the timer engine.

A ticker calls its callback once per interval until cancelled. After
``cancel()`` returns, no further callback is delivered, even one that was
already scheduled.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Protocol, runtime_checkable

TickCallback = Callable[[], None]

TICK_INTERVAL = 1.0  # seconds


@runtime_checkable
class Ticker(Protocol):
    """Interface the timer engine drives.

    Kept as a Protocol so the TUI can plug in its own scheduler without
    subclassing.
    """

    @property
    def active(self) -> bool:
        """Whether callbacks are currently being delivered."""
        ...

    def start(self, callback: TickCallback) -> None:
        """Begin calling *callback* once per interval."""
        ...

    def cancel(self) -> None:
        """Stop delivering callbacks. Safe to call when not started."""
        ...


class ManualTicker:
    """Ticker that only fires when driven explicitly.

    Used by tests and by callers that already own a clock.
    """

    def __init__(self) -> None:
        self._callback: TickCallback | None = None
        self.start_count = 0
        self.cancel_count = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        self._callback = callback
        self.start_count += 1

    def cancel(self) -> None:
        if self._callback is not None:
            self.cancel_count += 1
        self._callback = None

    def advance(self, ticks: int = 1) -> int:
        """Deliver up to *ticks* callbacks; returns how many were delivered.

        Stops early when a callback cancels the ticker (e.g. on expiry).
        """
        delivered = 0
        for _ in range(ticks):
            if self._callback is None:
                break
            self._callback()
            delivered += 1
        return delivered


class AsyncioTicker:
    """Ticker backed by ``loop.call_later`` on a running asyncio loop.

    Each scheduled call carries the generation it was created in; ``cancel``
    bumps the generation so a call that slipped past ``handle.cancel()``
    is dropped.
    """

    def __init__(
        self,
        interval: float = TICK_INTERVAL,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._loop = loop
        self._callback: TickCallback | None = None
        self._handle: asyncio.TimerHandle | None = None
        self._generation = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        self.cancel()
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        self._callback = callback
        self._schedule(self._generation)

    def cancel(self) -> None:
        self._generation += 1
        self._callback = None
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule(self, generation: int) -> None:
        if self._loop is None:
            raise RuntimeError("AsyncioTicker has no event loop")
        self._handle = self._loop.call_later(self.interval, self._fire, generation)

    def _fire(self, generation: int) -> None:
        if generation != self._generation or self._callback is None:
            return
        # Reschedule first so the callback may cancel us.
        self._schedule(generation)
        self._callback()
