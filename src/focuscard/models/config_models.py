"""Configuration models for FocusCard.

Only settings are persisted. Tasks, timer progress and label renames made
while the app runs live in memory and are gone when it exits.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_LABELS = ["Work", "Study", "Life"]
DEFAULT_SEED_TASKS = ["Welcome to FocusCard!", "Train your focus mode"]


class TimerConfig(BaseModel):
    """Timer configuration."""

    focus_minutes: int = Field(default=25, ge=1, le=600)


class BoardConfig(BaseModel):
    """Collection board configuration."""

    labels: list[str] = Field(default_factory=lambda: list(DEFAULT_LABELS))

    @field_validator("labels")
    @classmethod
    def validate_labels(cls, v: list[str]) -> list[str]:
        """The board always has at least one label slot."""
        if not v:
            raise ValueError("labels cannot be empty")
        return v


class TasksConfig(BaseModel):
    """Initial task list configuration."""

    seed: list[str] = Field(default_factory=lambda: list(DEFAULT_SEED_TASKS))


class UIConfig(BaseModel):
    """UI configuration."""

    show_pending: bool = Field(default=True)
    show_done: bool = Field(default=False)
    start_tab: Literal["timer", "tasks", "collection"] = Field(default="timer")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Main FocusCard configuration"""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    board: BoardConfig = Field(default_factory=BoardConfig)
    tasks: TasksConfig = Field(default_factory=TasksConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def focus_seconds(self) -> int:
        """Configured focus duration in seconds."""
        return self.timer.focus_minutes * 60
