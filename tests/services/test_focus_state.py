"""Tests for the FocusCardState container and intent dispatch."""

from __future__ import annotations

import pytest

from focuscard.models.intents import (
    AddTask,
    DeleteTask,
    Pause,
    RenameLabel,
    Reset,
    SelectTask,
    SetLabel,
    Start,
    ToggleDone,
    ToggleTimer,
)
from focuscard.services.collection_service import UNCATEGORIZED
from focuscard.services.focus_service import FocusCardState


class TestFromConfig:
    def test_uses_config_defaults(self, default_config):
        state = FocusCardState.from_config(default_config)
        assert state.timer_state.total_seconds == 1500
        assert state.labels.names == ["Work", "Study", "Life"]
        assert [t.title for t in state.tasks.tasks] == default_config.tasks.seed

    def test_duration_override(self, default_config):
        state = FocusCardState.from_config(default_config, total_seconds=60)
        assert state.timer_state.remaining_seconds == 60


class TestTimerIntents:
    def test_start_three_ticks_formats(self, state, ticker):
        state.dispatch(Start())
        ticker.advance(3)
        assert state.timer_state.remaining_seconds == 1497
        assert state.timer_state.formatted == "24:57"

    def test_pause_and_reset(self, state, ticker):
        state.dispatch(Start())
        ticker.advance(5)
        state.dispatch(Pause())
        assert state.timer_state.remaining_seconds == 1495
        state.dispatch(Reset())
        assert state.timer_state.remaining_seconds == 1500
        assert state.timer_state.is_running is False

    def test_toggle(self, state):
        state.dispatch(ToggleTimer())
        assert state.timer_state.is_running
        state.dispatch(ToggleTimer())
        assert not state.timer_state.is_running


class TestTaskIntents:
    def test_add_then_toggle_lands_in_label_group(self, state):
        state.dispatch(AddTask("Write report", label_index=2))
        task = state.tasks.tasks[0]
        state.dispatch(ToggleDone(task.id))

        groups = state.collection()
        assert [t.id for t in groups[2].cards] == [task.id]
        assert groups[0].cards == []
        assert groups[1].cards == []

    def test_blank_add_is_noop(self, state):
        state.dispatch(AddTask("   "))
        assert state.tasks.total == 0

    def test_delete_selected(self, state):
        state.dispatch(AddTask("a"))
        task_id = state.tasks.tasks[0].id
        state.dispatch(SelectTask(task_id))
        assert state.selection == task_id
        state.dispatch(DeleteTask(task_id))
        assert state.selection is None

    def test_set_label(self, state):
        state.dispatch(AddTask("a"))
        task = state.tasks.tasks[0]
        state.dispatch(SetLabel(task.id, 1))
        assert task.label_index == 1

    def test_rename_label_to_blank(self, state):
        for title in ("a", "b"):
            state.dispatch(AddTask(title, label_index=1))
        for task in state.tasks.tasks:
            state.dispatch(ToggleDone(task.id))
        state.dispatch(RenameLabel(1, ""))

        assert state.label_name(1) == UNCATEGORIZED
        assert all(
            state.label_name(t.label_index) == UNCATEGORIZED for t in state.tasks.tasks
        )
        assert state.collection()[1].label_name == UNCATEGORIZED

    def test_stats(self, state):
        state.dispatch(AddTask("a"))
        state.dispatch(AddTask("b"))
        state.dispatch(ToggleDone(state.tasks.tasks[0].id))
        assert state.stats() == {"done": 1, "pending": 1, "total": 2}

    def test_unknown_intent_raises(self, state):
        with pytest.raises(TypeError):
            state.dispatch(object())


class TestObservers:
    def test_listener_receives_events(self, state, ticker):
        events = []
        state.subscribe(events.append)
        state.dispatch(AddTask("a"))
        state.dispatch(Start())
        ticker.advance(1)
        state.dispatch(RenameLabel(0, "Focus"))
        assert events == ["task.added", "timer.started", "timer.tick", "label.renamed"]

    def test_noops_do_not_notify(self, state):
        events = []
        state.subscribe(events.append)
        state.dispatch(AddTask(""))
        state.dispatch(ToggleDone("missing"))
        state.dispatch(DeleteTask("missing"))
        state.dispatch(RenameLabel(10, "x"))
        state.dispatch(Pause())
        assert events == []

    def test_unsubscribe(self, state):
        events = []
        unsubscribe = state.subscribe(events.append)
        unsubscribe()
        unsubscribe()
        state.dispatch(AddTask("a"))
        assert events == []

    def test_close_stops_ticker_and_listeners(self, state, ticker):
        events = []
        state.subscribe(events.append)
        state.dispatch(Start())
        state.close()
        assert not ticker.active
        assert ticker.advance(3) == 0
        state.dispatch(AddTask("a"))
        assert events == ["timer.started"]
