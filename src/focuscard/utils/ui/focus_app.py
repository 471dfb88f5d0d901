"""Textual TUI: timer, task list and collection board over one FocusCardState."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.timer import Timer
from textual.widget import Widget
from textual.widgets import (
    Footer,
    Header,
    Input,
    ListItem,
    ListView,
    ProgressBar,
    Static,
    TabbedContent,
    TabPane,
)

from focuscard.models import Task, UIConfig
from focuscard.models.focus.ticker import TICK_INTERVAL, TickCallback
from focuscard.models.intents import (
    AddTask,
    DeleteTask,
    RenameLabel,
    Reset,
    SelectTask,
    SetLabel,
    ToggleDone,
    ToggleTimer,
)
from focuscard.services.focus_service import FocusCardState
from focuscard.utils.ui.formatters import format_collection_table, format_task_line


class TextualTicker:
    """Ticker backed by ``Widget.set_interval``.

    It must be attached to a mounted widget before the timer starts.
    """

    def __init__(self, interval: float = TICK_INTERVAL):
        self.interval = interval
        self._owner: Widget | None = None
        self._timer: Timer | None = None
        self._callback: TickCallback | None = None
        self._generation = 0

    def attach(self, owner: Widget) -> None:
        self._owner = owner

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        if self._owner is None:
            raise RuntimeError("TextualTicker is not attached to a widget")
        self.cancel()
        self._callback = callback
        generation = self._generation
        self._timer = self._owner.set_interval(
            self.interval, lambda: self._fire(generation)
        )

    def cancel(self) -> None:
        self._generation += 1
        self._callback = None
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _fire(self, generation: int) -> None:
        if generation == self._generation and self._callback is not None:
            self._callback()


class TaskListItem(ListItem):
    """A task row that remembers which task it shows."""

    def __init__(self, task: Task, selected: bool, label_name: str):
        line = format_task_line(task, selected)
        line.append(f"  [{label_name}]", style="dim")
        super().__init__(Static(line))
        self.task_id = task.id


class FocusCardApp(App):
    """Read-and-dispatch view over a :class:`FocusCardState`."""

    TITLE = "FocusCard"
    CSS_PATH = "focus_app.tcss"
    BINDINGS = [
        ("space", "toggle_timer", "Start/Pause"),
        ("r", "reset_timer", "Reset"),
        ("a", "focus_add", "Add task"),
        ("x", "toggle_done", "Done"),
        ("delete", "delete_task", "Delete"),
        ("s", "select_task", "Focus task"),
        ("l", "cycle_label", "Label"),
        ("n", "focus_rename", "Rename label"),
        ("p", "toggle_pending", "Pending"),
        ("c", "toggle_done_section", "Done list"),
        ("1", "show_tab('timer')", "Timer"),
        ("2", "show_tab('tasks')", "Tasks"),
        ("3", "show_tab('collection')", "Collection"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, focus_state: FocusCardState, ui_config: UIConfig | None = None):
        super().__init__()
        self.focus_state = focus_state
        ui_config = ui_config or UIConfig()
        self.show_pending = ui_config.show_pending
        self.show_done = ui_config.show_done
        self.start_tab = ui_config.start_tab
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        yield Header()
        with TabbedContent(initial=self.start_tab):
            with TabPane("Timer", id="timer"):
                with Vertical(id="focus-card"):
                    yield Static(id="current-task")
                    yield Static(id="countdown")
                    yield ProgressBar(total=100, show_eta=False, id="progress")
                    yield Static(id="status")
                yield Static(id="stats")
            with TabPane("Tasks", id="tasks"):
                yield Input(placeholder="New task, Enter to add", id="new-task")
                yield Static(id="pending-header", classes="section-header")
                yield ListView(id="pending-list")
                yield Static(id="done-header", classes="section-header")
                yield ListView(id="done-list")
            with TabPane("Collection", id="collection"):
                yield Input(placeholder="Rename label: <index> <name>", id="rename-label")
                with Horizontal():
                    yield Static(id="board")
        yield Footer()

    def on_mount(self) -> None:
        ticker = self.focus_state.timer.ticker
        if isinstance(ticker, TextualTicker):
            ticker.attach(self)
        self._unsubscribe = self.focus_state.subscribe(self.on_state_change)
        self.refresh_timer()
        self.call_later(self.refresh_tasks)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.focus_state.close()

    # -- observation -----------------------------------------------------------

    def on_state_change(self, event: str) -> None:
        self.refresh_timer()
        if not event.startswith("timer."):
            self.call_later(self.refresh_tasks)

    def refresh_timer(self) -> None:
        timer = self.focus_state.timer_state
        self.query_one("#current-task", Static).update(
            f"Current task: {self.focus_state.tasks.current_task_title}"
        )
        self.query_one("#countdown", Static).update(timer.formatted)
        self.query_one("#progress", ProgressBar).update(progress=timer.progress * 100)
        self.query_one("#status", Static).update(timer.status_text)
        self.query_one("#focus-card").set_class(timer.is_running, "running")
        stats = self.focus_state.stats()
        self.query_one("#stats", Static).update(
            f"Done {stats['done']}   Pending {stats['pending']}   Total {stats['total']}"
        )

    async def refresh_tasks(self) -> None:
        tasks = self.focus_state.tasks
        self.query_one("#pending-header", Static).update(
            f"{'▾' if self.show_pending else '▸'} Pending ({tasks.pending_count})"
        )
        self.query_one("#done-header", Static).update(
            f"{'▾' if self.show_done else '▸'} Done ({tasks.done_count})"
        )
        await self._fill_list("#pending-list", tasks.pending, self.show_pending)
        await self._fill_list("#done-list", tasks.done, self.show_done)
        self.query_one("#board", Static).update(
            format_collection_table(self.focus_state.collection())
        )

    async def _fill_list(self, selector: str, tasks: list[Task], visible: bool) -> None:
        view = self.query_one(selector, ListView)
        index = view.index
        await view.clear()
        await view.extend(
            TaskListItem(
                task,
                task.id == self.focus_state.selection,
                self.focus_state.label_name(task.label_index),
            )
            for task in tasks
        )
        if tasks:
            view.index = min(index or 0, len(tasks) - 1)
        view.display = visible

    # -- helpers ---------------------------------------------------------------

    def highlighted_task_id(self) -> str | None:
        """Task under the cursor in the focused (or first visible) task list."""
        views = [self.query_one("#pending-list", ListView), self.query_one("#done-list", ListView)]
        focused = [v for v in views if v.has_focus]
        for view in focused or [v for v in views if v.display]:
            item = view.highlighted_child
            if isinstance(item, TaskListItem):
                return item.task_id
        return None

    def add_task(self, title: str) -> None:
        self.focus_state.dispatch(AddTask(title))

    def rename_label(self, command: str) -> bool:
        """Apply ``"<index> <name>"``; returns False when it does not parse."""
        index_text, _, name = command.strip().partition(" ")
        try:
            index = int(index_text)
        except ValueError:
            return False
        self.focus_state.dispatch(RenameLabel(index, name))
        return True

    # -- events ----------------------------------------------------------------

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "new-task":
            self.add_task(event.value)
        elif event.input.id == "rename-label":
            if not self.rename_label(event.value):
                self.notify("Use: <index> <name>", severity="warning")
        event.input.value = ""

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, TaskListItem):
            self.focus_state.dispatch(SelectTask(event.item.task_id))

    # -- actions ---------------------------------------------------------------

    def action_toggle_timer(self) -> None:
        self.focus_state.dispatch(ToggleTimer())

    def action_reset_timer(self) -> None:
        self.focus_state.dispatch(Reset())

    def action_focus_add(self) -> None:
        self.action_show_tab("tasks")
        self.query_one("#new-task", Input).focus()

    def action_focus_rename(self) -> None:
        self.action_show_tab("collection")
        self.query_one("#rename-label", Input).focus()

    def action_toggle_done(self) -> None:
        task_id = self.highlighted_task_id()
        if task_id is not None:
            self.focus_state.dispatch(ToggleDone(task_id))

    def action_delete_task(self) -> None:
        task_id = self.highlighted_task_id()
        if task_id is not None:
            self.focus_state.dispatch(DeleteTask(task_id))

    def action_select_task(self) -> None:
        task_id = self.highlighted_task_id()
        if task_id is not None:
            self.focus_state.dispatch(SelectTask(task_id))

    def action_cycle_label(self) -> None:
        task_id = self.highlighted_task_id()
        task = self.focus_state.tasks.get(task_id) if task_id else None
        if task is not None:
            next_index = (task.label_index + 1) % max(len(self.focus_state.labels), 1)
            self.focus_state.dispatch(SetLabel(task.id, next_index))

    def action_toggle_pending(self) -> None:
        self.show_pending = not self.show_pending
        self.call_later(self.refresh_tasks)

    def action_toggle_done_section(self) -> None:
        self.show_done = not self.show_done
        self.call_later(self.refresh_tasks)

    def action_show_tab(self, tab: str) -> None:
        self.query_one(TabbedContent).active = tab
