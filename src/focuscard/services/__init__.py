"""Service layer: task store, collection board, state container, config."""

from .collection_service import UNCATEGORIZED, CollectionGroup, LabelBoard, build_collection
from .focus_service import FocusCardState
from .task_service import NO_TASK_SELECTED, TaskStore

__all__ = [
    "UNCATEGORIZED",
    "NO_TASK_SELECTED",
    "CollectionGroup",
    "LabelBoard",
    "build_collection",
    "FocusCardState",
    "TaskStore",
]
