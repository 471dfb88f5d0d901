"""Collection board: label names and done tasks pinned under them."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from focuscard.models import Task

logger = logging.getLogger(__name__)

UNCATEGORIZED = "uncategorized"


class LabelBoard:
    """Fixed-size, ordered list of renameable label names.

    Labels are referenced by position. Positions cannot be added or removed
    once the board exists; only the names change.
    """

    def __init__(
        self,
        names: Iterable[str],
        on_change: Callable[[str], None] | None = None,
    ):
        self._names = list(names)
        self.on_change = on_change

    @property
    def names(self) -> list[str]:
        return list(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def rename(self, index: int, name: str) -> bool:
        """Rename the label at *index* in place. Out-of-range index is a no-op."""
        if not 0 <= index < len(self._names):
            logger.debug("rename ignored: label index %s out of range", index)
            return False
        self._names[index] = name
        if self.on_change is not None:
            self.on_change("label.renamed")
        return True

    def display_name(self, index: int | None) -> str:
        """Name to show for *index*, or ``"uncategorized"``.

        Out-of-range indices and blank names both fall back to the sentinel.
        """
        if index is None or not 0 <= index < len(self._names):
            return UNCATEGORIZED
        name = self._names[index].strip()
        return name or UNCATEGORIZED


@dataclass
class CollectionGroup:
    """Done tasks pinned under one label."""

    label_index: int | None
    label_name: str
    cards: list[Task] = field(default_factory=list)


def build_collection(tasks: Iterable[Task], board: LabelBoard) -> list[CollectionGroup]:
    """Group done tasks by label, preserving task order within each group.

    Returns one group per label position (possibly empty), followed by an
    ``uncategorized`` group for done tasks whose label index is out of range,
    when there are any.
    """
    groups = [
        CollectionGroup(label_index=index, label_name=board.display_name(index))
        for index in range(len(board))
    ]
    orphans = CollectionGroup(label_index=None, label_name=UNCATEGORIZED)

    for task in tasks:
        if not task.is_done:
            continue
        if 0 <= task.label_index < len(groups):
            groups[task.label_index].cards.append(task)
        else:
            orphans.cards.append(task)

    if orphans.cards:
        groups.append(orphans)
    return groups
