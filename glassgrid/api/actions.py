"""
glassgrid Core API: Placement Actions

Atomic layout operations used by the editing session. Every action is a
pure transform: the source grid is never touched, and the result carries a
new grid. A rejected action (unknown id, overlapping swap, nothing to move)
returns success=False with the source grid, so the caller can leave its
state unchanged.

Usage:
    from glassgrid.api.actions import LayoutActions
    result = LayoutActions(grid).swap_cells("a1", "b2")
    if result.success:
        grid = result.grid
"""

import logging
from copy import deepcopy
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..grid.abstraction import Cell, Grid, generate_id
from .inspection import GridInspector

logger = logging.getLogger(__name__)

MIN_ROWS = 4

# Cell fields update_cell may change
CELL_FIELDS = ("row", "col", "row_span", "col_span", "component_id", "content", "group_id")


def _is_int(value: Any) -> bool:
    # bool is an int subclass; reject it explicitly
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class ActionResult:
    """Result of an atomic action."""
    success: bool
    message: str
    modified_ids: List[str] = field(default_factory=list)
    grid: Optional[Grid] = None


def auto_fit(grid: Grid, min_rows: int = MIN_ROWS) -> Grid:
    """
    Recompute the declared row count from the content.

    rows = max(min_rows, farthest row reached by any cell). Columns are
    never adjusted. Returns a new grid.
    """
    fitted = grid.copy()
    fitted.rows = max(min_rows, grid.content_extent())
    return fitted


class LayoutActions:
    """Placement and mutation operations over an immutable source grid."""

    def __init__(self, grid: Grid, id_factory: Callable[[], str] = generate_id):
        self.grid = grid
        self._new_id = id_factory

    def _reject(self, message: str) -> ActionResult:
        logger.debug("Rejected: %s", message)
        return ActionResult(False, message, [], self.grid)

    def _missing(self, *cell_ids: str) -> Optional[ActionResult]:
        for cell_id in cell_ids:
            if not self.grid.has_cell(cell_id):
                return self._reject(f"Cell {cell_id} not found")
        return None

    # --- Cell Lifecycle ---

    def add_cell(
        self,
        row: int,
        col: int,
        row_span: int = 1,
        col_span: int = 1,
        component_id: Optional[str] = None,
        content: Optional[Dict[str, Any]] = None,
        group_id: Optional[str] = None,
    ) -> ActionResult:
        """
        Append a new cell with a fresh id.

        No overlap check: callers pick the position with find_free_region.
        """
        if not all(_is_int(v) for v in (row, col, row_span, col_span)):
            return self._reject(f"Cell geometry must be integers ({row}, {col}, {row_span}x{col_span})")
        if row < 0 or col < 0 or row_span < 1 or col_span < 1:
            return self._reject(f"Invalid geometry ({row}, {col}, {row_span}x{col_span})")

        cell = Cell(
            id=self._new_id(),
            row=row,
            col=col,
            row_span=row_span,
            col_span=col_span,
            component_id=component_id,
            content=deepcopy(content),
            group_id=group_id,
        )
        new_grid = self.grid.copy()
        new_grid.cells.append(cell)
        return ActionResult(True, f"Added cell {cell.id} at ({row}, {col})", [cell.id], new_grid)

    def add_cell_in_free_region(
        self,
        col_span: int,
        row_span: int,
        component_id: Optional[str] = None,
        content: Optional[Dict[str, Any]] = None,
    ) -> ActionResult:
        """Add a cell at the first free region of the requested size."""
        if col_span < 1 or row_span < 1:
            return self._reject(f"Invalid span {col_span}x{row_span}")
        col_span = min(col_span, self.grid.cols)
        zone = GridInspector(self.grid).find_free_region(col_span, row_span)
        return self.add_cell(zone.row, zone.col, row_span, col_span,
                             component_id=component_id, content=content)

    def remove_cell(self, cell_id: str) -> ActionResult:
        """Delete a cell from the grid."""
        missing = self._missing(cell_id)
        if missing:
            return missing

        new_grid = self.grid.copy()
        new_grid.cells = [c for c in new_grid.cells if c.id != cell_id]
        return ActionResult(True, f"Removed cell {cell_id}", [cell_id], new_grid)

    def clear_cell(self, cell_id: str) -> ActionResult:
        """Empty a cell's component but keep its geometry."""
        return self.update_cell(cell_id, component_id=None, content=None)

    # --- Cell Updates ---

    def update_cell(self, cell_id: str, **updates: Any) -> ActionResult:
        """
        Merge fields into a cell.

        Used for repositioning and resizing. Collisions are not checked;
        resize interactions clamp spans first (see resize_cell).
        """
        missing = self._missing(cell_id)
        if missing:
            return missing

        unknown = set(updates) - set(CELL_FIELDS)
        if unknown:
            return self._reject(f"Unknown cell fields: {', '.join(sorted(unknown))}")
        geometry = {k: v for k, v in updates.items() if k in ("row", "col", "row_span", "col_span")}
        bad = sorted(k for k, v in geometry.items() if not _is_int(v))
        if bad:
            return self._reject(f"Cell fields must be integers: {', '.join(bad)}")
        if updates.get("row", 0) < 0 or updates.get("col", 0) < 0:
            return self._reject("Cell anchor must be non-negative")
        if updates.get("row_span", 1) < 1 or updates.get("col_span", 1) < 1:
            return self._reject("Cell spans must be >= 1")

        if "content" in updates:
            updates["content"] = deepcopy(updates["content"])

        new_grid = self.grid.copy()
        new_grid.cells = [
            replace(c, **updates) if c.id == cell_id else c
            for c in new_grid.cells
        ]
        return ActionResult(True, f"Updated cell {cell_id}", [cell_id], new_grid)

    def resize_cell(self, cell_id: str, row_span: int, col_span: int) -> ActionResult:
        """Resize a cell, clamping spans to [1, extent - anchor]."""
        cell = self.grid.get_cell(cell_id)
        if cell is None:
            return self._reject(f"Cell {cell_id} not found")

        if not (_is_int(row_span) and _is_int(col_span)):
            return self._reject(f"Cell spans must be integers, got {row_span}x{col_span}")
        row_span = max(1, min(row_span, self.grid.rows - cell.row))
        col_span = max(1, min(col_span, self.grid.cols - cell.col))
        return self.update_cell(cell_id, row_span=row_span, col_span=col_span)

    def set_group(self, cell_ids: Iterable[str], group_id: Optional[str]) -> ActionResult:
        """Tag cells with a shared group id (None removes the tag)."""
        ids = list(dict.fromkeys(cell_ids))
        if not ids:
            return self._reject("No cells to group")
        missing = self._missing(*ids)
        if missing:
            return missing

        new_grid = self.grid.copy()
        for cell in new_grid.cells:
            if cell.id in ids:
                cell.group_id = group_id
        return ActionResult(True, f"Grouped {len(ids)} cells as {group_id}", ids, new_grid)

    # --- Component Placement ---

    def place_component(
        self,
        cell_id: str,
        template_id: str,
        content: Optional[Dict[str, Any]] = None,
    ) -> ActionResult:
        """Drop a template into a cell, replacing any previous occupant."""
        result = self.update_cell(cell_id, component_id=template_id, content=content)
        if result.success:
            result.message = f"Placed {template_id} in {cell_id}"
        return result

    def move_component(self, from_id: str, to_id: str) -> ActionResult:
        """Move a component between cells; the source is cleared."""
        missing = self._missing(from_id, to_id)
        if missing:
            return missing
        if from_id == to_id:
            return self._reject("Source and destination are the same cell")

        source = self.grid.get_cell(from_id)
        if not source.component_id:
            return self._reject(f"Cell {from_id} has no component")

        new_grid = self.grid.copy()
        for cell in new_grid.cells:
            if cell.id == to_id:
                cell.component_id = source.component_id
                cell.content = deepcopy(source.content)
            elif cell.id == from_id:
                cell.component_id = None
                cell.content = None
        return ActionResult(True, f"Moved {source.component_id} from {from_id} to {to_id}",
                            [from_id, to_id], new_grid)

    def swap_cells(self, id1: str, id2: str) -> ActionResult:
        """
        Exchange the anchors of two cells, keeping their spans.

        Swapping cells of different sizes is the most overlap-prone edit, so
        the whole resulting grid is checked and the swap is discarded on any
        intersection.
        """
        missing = self._missing(id1, id2)
        if missing:
            return missing
        if id1 == id2:
            return self._reject("Cannot swap a cell with itself")

        c1 = self.grid.get_cell(id1)
        c2 = self.grid.get_cell(id2)

        new_grid = self.grid.copy()
        for cell in new_grid.cells:
            if cell.id == id1:
                cell.row, cell.col = c2.row, c2.col
            elif cell.id == id2:
                cell.row, cell.col = c1.row, c1.col

        overlaps = new_grid.find_overlaps()
        if overlaps:
            logger.warning("Swap %s <-> %s rejected: %d overlapping pairs (first: %s)",
                           id1, id2, len(overlaps), overlaps[0])
            return ActionResult(False, f"Swap would overlap {overlaps[0][0]} and {overlaps[0][1]}",
                                [], self.grid)

        return ActionResult(True, f"Swapped {id1} and {id2}", [id1, id2], new_grid)

    # --- Layout Settings ---

    def update_layout_settings(
        self,
        name: Optional[str] = None,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        gap: Optional[int] = None,
    ) -> ActionResult:
        """
        Change name, rows, cols or gap.

        When rows or cols change, cells anchored outside the new bounds are
        dropped and the spans of survivors are clamped to fit. Lossy; undo
        is the only way back.
        """
        if name is None and rows is None and cols is None and gap is None:
            return self._reject("No layout settings given")

        new_grid = self.grid.copy()
        if name is not None:
            new_grid.name = name
        if gap is not None:
            new_grid.gap = max(0, gap)

        modified: List[str] = []
        if rows is not None or cols is not None:
            new_rows = max(1, rows) if rows is not None else self.grid.rows
            new_cols = max(1, cols) if cols is not None else self.grid.cols
            new_grid.rows = new_rows
            new_grid.cols = new_cols

            kept = [c for c in new_grid.cells if c.row < new_rows and c.col < new_cols]
            dropped = len(new_grid.cells) - len(kept)
            for cell in kept:
                row_span = min(cell.row_span, new_rows - cell.row)
                col_span = min(cell.col_span, new_cols - cell.col)
                if (row_span, col_span) != (cell.row_span, cell.col_span):
                    cell.row_span, cell.col_span = row_span, col_span
                    modified.append(cell.id)
            new_grid.cells = kept

            if dropped:
                logger.info("Grid resized to %dx%d: dropped %d cells, clamped %d",
                            new_rows, new_cols, dropped, len(modified))

        return ActionResult(True, "Updated layout settings", modified, new_grid)
