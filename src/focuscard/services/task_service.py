"""Task store - the ordered, in-memory task list.

Tasks are kept most-recent-first. Every mutation that references an unknown
id, or carries an empty title, is a silent no-op rather than an error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from focuscard.models import Task

logger = logging.getLogger(__name__)

NO_TASK_SELECTED = "No task selected"


class TaskStore:
    """Owns the task list and the current selection."""

    def __init__(
        self,
        seed: Iterable[str] = (),
        label_count: int = 1,
        on_change: Callable[[str], None] | None = None,
    ):
        """Initialize the task store.

        Args:
            seed: Initial task titles, kept in the given order; blank ones are skipped
            label_count: Number of label slots, used to clamp new tasks' labels
            on_change: Called with an event name after each effective mutation
        """
        self.label_count = label_count
        self.on_change = on_change
        self.selected_id: str | None = None
        self._tasks: list[Task] = [
            Task(title=title) for title in seed if title and title.strip()
        ]

    # -- mutations -----------------------------------------------------------

    def add(self, title: str, label_index: int = 0) -> Task | None:
        """Insert a new pending task at the head of the list.

        Args:
            title: Task title; surrounding whitespace is trimmed
            label_index: Label slot; out-of-range values fall back to 0

        Returns:
            The created Task, or None when the title is blank
        """
        if not title or not title.strip():
            logger.debug("add ignored: blank title")
            return None

        if not 0 <= label_index < self.label_count:
            label_index = 0

        task = Task(title=title, label_index=label_index)
        self._tasks.insert(0, task)
        logger.debug("task added: %s", task.id)
        self._notify("task.added")
        return task

    def toggle_done(self, task_id: str) -> Task | None:
        """Flip the done flag of a task. Returns the task, or None if unknown."""
        task = self.get(task_id)
        if task is None:
            logger.debug("toggle ignored: unknown task %s", task_id)
            return None
        task.is_done = not task.is_done
        self._notify("task.toggled")
        return task

    def set_label(self, task_id: str, label_index: int) -> Task | None:
        """Reassign a task's label.

        The index is stored as given; out-of-range values are resolved when
        the label is displayed.
        """
        task = self.get(task_id)
        if task is None:
            logger.debug("set_label ignored: unknown task %s", task_id)
            return None
        task.label_index = label_index
        self._notify("task.relabeled")
        return task

    def delete(self, task_id: str) -> bool:
        """Remove a task, clearing the selection if it pointed at it."""
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[index]
                if self.selected_id == task_id:
                    self.selected_id = None
                self._notify("task.deleted")
                return True
        logger.debug("delete ignored: unknown task %s", task_id)
        return False

    def select(self, task_id: str | None) -> None:
        """Mark a task as the current focus. No existence check."""
        self.selected_id = task_id
        self._notify("task.selected")

    # -- queries ---------------------------------------------------------------

    @property
    def tasks(self) -> list[Task]:
        """All tasks in display order."""
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        """Find a task by id."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    @property
    def pending(self) -> list[Task]:
        return [t for t in self._tasks if not t.is_done]

    @property
    def done(self) -> list[Task]:
        return [t for t in self._tasks if t.is_done]

    @property
    def pending_count(self) -> int:
        return sum(1 for t in self._tasks if not t.is_done)

    @property
    def done_count(self) -> int:
        return sum(1 for t in self._tasks if t.is_done)

    @property
    def total(self) -> int:
        return len(self._tasks)

    def group_done_by_label(self) -> dict[int, list[Task]]:
        """Done tasks keyed by raw label index, in store order."""
        groups: dict[int, list[Task]] = {}
        for task in self._tasks:
            if task.is_done:
                groups.setdefault(task.label_index, []).append(task)
        return groups

    @property
    def selected_task(self) -> Task | None:
        if self.selected_id is None:
            return None
        return self.get(self.selected_id)

    @property
    def current_task_title(self) -> str:
        """Title of the selected task, or a placeholder."""
        task = self.selected_task
        return task.title if task is not None else NO_TASK_SELECTED

    def __len__(self) -> int:
        return len(self._tasks)

    def _notify(self, event: str) -> None:
        if self.on_change is not None:
            self.on_change(event)
