"""FocusCard data models."""

from .config_models import AppConfig, BoardConfig, TasksConfig, TimerConfig, UIConfig
from .task import Task

__all__ = [
    "AppConfig",
    "BoardConfig",
    "TasksConfig",
    "TimerConfig",
    "UIConfig",
    "Task",
]
