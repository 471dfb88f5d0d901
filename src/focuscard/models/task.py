"""Task data models."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field, field_validator


def new_task_id() -> str:
    """Generate a fresh opaque task identifier."""
    return str(uuid.uuid4())


class Task(BaseModel):
    """A to-do item owned by the task store.

    Attributes:
        id: Unique identifier, stable across mutations
        title: Display title, never empty after trimming
        is_done: Completion flag
        label_index: Position in the label board; may point past its end
    """

    id: str = Field(default_factory=new_task_id)
    title: str
    is_done: bool = False
    label_index: int = 0

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Trim the title and refuse blank ones."""
        if not v or not v.strip():
            raise ValueError("title cannot be empty")
        return v.strip()
