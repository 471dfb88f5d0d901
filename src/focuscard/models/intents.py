"""User intents forwarded from the presentation layer to the state container."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Start:
    """Start the countdown."""


@dataclass(frozen=True)
class Pause:
    """Pause the countdown, keeping the remaining time."""


@dataclass(frozen=True)
class Reset:
    """Stop the countdown and restore the full duration."""


@dataclass(frozen=True)
class ToggleTimer:
    """Pause when running, start otherwise."""


@dataclass(frozen=True)
class AddTask:
    title: str
    label_index: int = 0


@dataclass(frozen=True)
class ToggleDone:
    task_id: str


@dataclass(frozen=True)
class SetLabel:
    task_id: str
    label_index: int


@dataclass(frozen=True)
class DeleteTask:
    task_id: str


@dataclass(frozen=True)
class SelectTask:
    task_id: str | None


@dataclass(frozen=True)
class RenameLabel:
    index: int
    name: str


Intent = (
    Start
    | Pause
    | Reset
    | ToggleTimer
    | AddTask
    | ToggleDone
    | SetLabel
    | DeleteTask
    | SelectTask
    | RenameLabel
)
