"""
Grid Abstraction Layer

Data model for the layout editor: a Grid of rows x columns holding
rectangular Cells. Cells are anchored at their top-left (row, col) and
cover `[row, row + row_span) x [col, col + col_span)`.

The serialized form (to_dict/from_dict) uses the camelCase keys the editor
front end reads, so a dump can be handed to the renderer or an exporter
without reshaping.
"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import uuid


def generate_id() -> str:
    """Generate a short random identifier for grids and cells."""
    return uuid.uuid4().hex[:8]


@dataclass
class DropZone:
    """A grid position, optionally with a size (empty slots, drag targets)."""
    row: int
    col: int
    row_span: Optional[int] = None
    col_span: Optional[int] = None

    def to_dict(self) -> Dict[str, int]:
        d = {"row": self.row, "col": self.col}
        if self.row_span is not None:
            d["rowSpan"] = self.row_span
        if self.col_span is not None:
            d["colSpan"] = self.col_span
        return d


@dataclass
class Cell:
    """A rectangular placement slot, optionally holding a component."""
    id: str
    row: int  # Zero-based anchor
    col: int
    row_span: int = 1
    col_span: int = 1

    # Occupant, owned by the template catalog. content is passed through as-is.
    component_id: Optional[str] = None
    content: Optional[Dict[str, Any]] = None

    # Visual clustering tag, no effect on placement
    group_id: Optional[str] = None

    @property
    def row_end(self) -> int:
        """First row below the cell."""
        return self.row + self.row_span

    @property
    def col_end(self) -> int:
        """First column right of the cell."""
        return self.col + self.col_span

    @property
    def is_empty(self) -> bool:
        """True when no component occupies the cell."""
        return not self.component_id

    def get_bounds(self) -> Tuple[int, int, int, int]:
        """
        Get the occupied rectangle.

        Returns:
            (row, col, row_end, col_end) with exclusive ends
        """
        return (self.row, self.col, self.row_end, self.col_end)

    def contains(self, row: int, col: int) -> bool:
        """Check if a grid point falls inside this cell."""
        return (self.row <= row < self.row_end and
                self.col <= col < self.col_end)

    def overlaps(self, other: 'Cell') -> bool:
        """Check if the rectangles of two cells intersect."""
        return (self.row < other.row_end and other.row < self.row_end and
                self.col < other.col_end and other.col < self.col_end)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        d: Dict[str, Any] = {
            "id": self.id,
            "row": self.row,
            "col": self.col,
            "rowSpan": self.row_span,
            "colSpan": self.col_span,
        }
        if self.component_id is not None:
            d["componentId"] = self.component_id
        if self.content is not None:
            d["content"] = deepcopy(self.content)
        if self.group_id is not None:
            d["groupId"] = self.group_id
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cell":
        """Create from dictionary."""
        return cls(
            id=str(data["id"]),
            row=int(data["row"]),
            col=int(data["col"]),
            row_span=int(data.get("rowSpan", 1)),
            col_span=int(data.get("colSpan", 1)),
            component_id=data.get("componentId"),
            content=deepcopy(data.get("content")),
            group_id=data.get("groupId"),
        )


@dataclass
class Grid:
    """
    The layout under edit.

    `rows` is normally derived from the content (see api.actions.auto_fit);
    `cols` and `gap` are only changed by explicit layout settings.
    """

    id: str = field(default_factory=generate_id)
    name: str = "Untitled"
    rows: int = 4
    cols: int = 12
    gap: int = 16  # Spacing unit between cells, interpreted by the renderer
    cells: List[Cell] = field(default_factory=list)

    # --- Cell Management ---

    def get_cell(self, cell_id: str) -> Optional[Cell]:
        """Get a cell by id."""
        for cell in self.cells:
            if cell.id == cell_id:
                return cell
        return None

    def has_cell(self, cell_id: str) -> bool:
        return self.get_cell(cell_id) is not None

    def cell_ids(self) -> List[str]:
        return [c.id for c in self.cells]

    # --- Geometry ---

    def content_extent(self) -> int:
        """Farthest row reached by any cell (0 for an empty grid)."""
        if not self.cells:
            return 0
        return max(c.row_end for c in self.cells)

    def find_overlaps(self) -> List[Tuple[str, str]]:
        """
        Find all intersecting cell pairs.

        Pairwise O(n^2) scan, fine for the tens of cells an editor holds.

        Returns:
            List of (id1, id2) tuples, each pair reported once
        """
        overlaps = []
        for i, c1 in enumerate(self.cells):
            for c2 in self.cells[i + 1:]:
                if c1.overlaps(c2):
                    overlaps.append((c1.id, c2.id))
        return overlaps

    def has_overlaps(self) -> bool:
        for i, c1 in enumerate(self.cells):
            for c2 in self.cells[i + 1:]:
                if c1.overlaps(c2):
                    return True
        return False

    # --- Copying & Serialization ---

    def copy(self) -> "Grid":
        """Deep, structurally independent copy."""
        return deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """Lossless structural dump using the front end's key names."""
        return {
            "id": self.id,
            "name": self.name,
            "rows": self.rows,
            "cols": self.cols,
            "gap": self.gap,
            "cells": [c.to_dict() for c in self.cells],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Grid":
        """Create from dictionary. Schema checks live in layout_file."""
        return cls(
            id=str(data.get("id") or generate_id()),
            name=str(data.get("name", "Untitled")),
            rows=int(data["rows"]),
            cols=int(data["cols"]),
            gap=int(data.get("gap", 0)),
            cells=[Cell.from_dict(c) for c in data.get("cells", [])],
        )

    def get_stats(self) -> Dict[str, Any]:
        """Get grid statistics."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "cell_count": len(self.cells),
            "filled_count": sum(1 for c in self.cells if not c.is_empty),
            "content_extent": self.content_extent(),
        }

    def __repr__(self) -> str:
        return (
            f"Grid(name='{self.name}', "
            f"{self.rows}x{self.cols}, "
            f"cells={len(self.cells)})"
        )
