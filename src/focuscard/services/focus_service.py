"""Application state container.

``FocusCardState`` owns the timer, the task store and the label board, and is
the single place presentation code sends intents to. Observers registered
with :meth:`FocusCardState.subscribe` are told the name of every effective
change and re-read whatever they display.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from focuscard.models import AppConfig
from focuscard.models.focus.state import TimerEngine, TimerState
from focuscard.models.focus.ticker import Ticker
from focuscard.models.intents import (
    AddTask,
    DeleteTask,
    Intent,
    Pause,
    RenameLabel,
    Reset,
    SelectTask,
    SetLabel,
    Start,
    ToggleDone,
    ToggleTimer,
)

from .collection_service import CollectionGroup, LabelBoard, build_collection
from .task_service import TaskStore

logger = logging.getLogger(__name__)

Listener = Callable[[str], None]


class FocusCardState:
    """Timer, tasks, labels and selection behind one dispatch point."""

    def __init__(
        self,
        total_seconds: int,
        labels: list[str],
        seed_tasks: list[str] | None = None,
        ticker: Ticker | None = None,
    ):
        self._listeners: list[Listener] = []
        self.timer = TimerEngine(total_seconds, ticker=ticker, on_change=self._emit)
        self.labels = LabelBoard(labels, on_change=self._emit)
        self.tasks = TaskStore(
            seed_tasks or [], label_count=len(self.labels), on_change=self._emit
        )

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        ticker: Ticker | None = None,
        total_seconds: int | None = None,
    ) -> FocusCardState:
        """Build the initial state from configuration."""
        return cls(
            total_seconds=total_seconds or config.focus_seconds,
            labels=config.board.labels,
            seed_tasks=config.tasks.seed,
            ticker=ticker,
        )

    # -- observation -----------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: str) -> None:
        for listener in list(self._listeners):
            listener(event)

    # -- intents ---------------------------------------------------------------

    def dispatch(self, intent: Intent) -> None:
        """Apply one user intent."""
        if isinstance(intent, Start):
            self.timer.start()
        elif isinstance(intent, Pause):
            self.timer.pause()
        elif isinstance(intent, Reset):
            self.timer.reset()
        elif isinstance(intent, ToggleTimer):
            self.timer.toggle()
        elif isinstance(intent, AddTask):
            self.tasks.add(intent.title, intent.label_index)
        elif isinstance(intent, ToggleDone):
            self.tasks.toggle_done(intent.task_id)
        elif isinstance(intent, SetLabel):
            self.tasks.set_label(intent.task_id, intent.label_index)
        elif isinstance(intent, DeleteTask):
            self.tasks.delete(intent.task_id)
        elif isinstance(intent, SelectTask):
            self.tasks.select(intent.task_id)
        elif isinstance(intent, RenameLabel):
            self.labels.rename(intent.index, intent.name)
        else:
            raise TypeError(f"Unknown intent: {intent!r}")

    # -- read model ----------------------------------------------------------

    @property
    def timer_state(self) -> TimerState:
        return self.timer.state

    @property
    def selection(self) -> str | None:
        return self.tasks.selected_id

    def collection(self) -> list[CollectionGroup]:
        """Done tasks grouped under their labels."""
        return build_collection(self.tasks.tasks, self.labels)

    def label_name(self, index: int | None) -> str:
        return self.labels.display_name(index)

    def stats(self) -> dict[str, int]:
        """Done / pending / total counters for the stats card."""
        return {
            "done": self.tasks.done_count,
            "pending": self.tasks.pending_count,
            "total": self.tasks.total,
        }

    def close(self) -> None:
        """Stop the tick source and drop observers. Call on view teardown."""
        self.timer.close()
        self._listeners.clear()
        logger.debug("state closed")
