"""
Layout History

Bounded linear undo/redo over committed grids. Entries are deep snapshots
that are never mutated after creation; restoring one hands out a fresh copy
so the live grid can be edited freely.

Committing while the index is not at the tail discards the redo branch
before appending (no history tree).
"""

from dataclasses import dataclass
from typing import List, Optional

from ..grid.abstraction import Grid


@dataclass(frozen=True)
class HistoryEntry:
    """Immutable snapshot of a grid for undo/redo."""
    grid: Grid
    description: str = ""


class LayoutHistory:
    """
    Undo/redo stack with a movable index.

    Provides:
    - Commit with redo-branch truncation
    - Undo/redo that restore independent copies
    - Eviction of the oldest entries past MAX_HISTORY
    """

    MAX_HISTORY = 50

    def __init__(self, initial: Optional[Grid] = None, max_entries: Optional[int] = None):
        self.max_entries = self.MAX_HISTORY if max_entries is None else max_entries
        if self.max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {self.max_entries}")
        self._entries: List[HistoryEntry] = []
        self._index: int = -1
        if initial is not None:
            self.reset(initial)

    @property
    def index(self) -> int:
        return self._index

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    @property
    def current(self) -> Optional[Grid]:
        """Copy of the grid at the index, or None before the first commit."""
        if self._index < 0:
            return None
        return self._entries[self._index].grid.copy()

    def __len__(self) -> int:
        return len(self._entries)

    def reset(self, grid: Grid, description: str = "Initial layout"):
        """Drop all entries and start over from a single snapshot."""
        self._entries = [HistoryEntry(grid.copy(), description)]
        self._index = 0

    def commit(self, grid: Grid, description: str = ""):
        """
        Record a new state.

        Entries after the index are discarded, the snapshot is appended and
        the oldest entries are evicted while the list exceeds max_entries.
        """
        del self._entries[self._index + 1:]
        self._entries.append(HistoryEntry(grid.copy(), description))

        while len(self._entries) > self.max_entries:
            self._entries.pop(0)

        self._index = len(self._entries) - 1

    def undo(self) -> Optional[Grid]:
        """
        Step back one entry.

        Returns:
            Copy of the restored grid, or None if nothing to undo
        """
        if not self.can_undo:
            return None
        self._index -= 1
        return self._entries[self._index].grid.copy()

    def redo(self) -> Optional[Grid]:
        """
        Step forward one entry.

        Returns:
            Copy of the restored grid, or None if nothing to redo
        """
        if not self.can_redo:
            return None
        self._index += 1
        return self._entries[self._index].grid.copy()

    def descriptions(self) -> List[str]:
        """Entry descriptions, oldest first."""
        return [e.description for e in self._entries]

    def snapshot_at(self, index: int) -> Grid:
        """Copy of the grid stored at an index (IndexError if out of range)."""
        return self._entries[index].grid.copy()
