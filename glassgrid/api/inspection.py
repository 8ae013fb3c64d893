"""Grid inspection operations.

Read-only queries over a Grid used by the editing session, the placement
actions and the CLI. Nothing here mutates the grid, and nothing is cached:
every query scans the current cells, which is cheap at editor scale.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..grid.abstraction import Cell, DropZone, Grid


class GridInspector:
    """Shared grid inspection operations."""

    def __init__(self, grid: Grid):
        """Initialize inspector with a grid.

        Args:
            grid: Grid instance to inspect
        """
        self.grid = grid

    def cell_at(self, row: int, col: int) -> Optional[Cell]:
        """Get the cell whose rectangle contains the point, if any."""
        for cell in self.grid.cells:
            if cell.contains(row, col):
                return cell
        return None

    def is_occupied(self, row: int, col: int) -> bool:
        return self.cell_at(row, col) is not None

    def empty_slots(self) -> Iterator[DropZone]:
        """Yield every unoccupied point inside rows x cols, row-major."""
        for row in range(self.grid.rows):
            for col in range(self.grid.cols):
                if not self.is_occupied(row, col):
                    yield DropZone(row=row, col=col)

    def region_is_free(self, row: int, col: int, row_span: int, col_span: int) -> bool:
        """Check that no point of the rectangle is occupied."""
        for r in range(row, row + row_span):
            for c in range(col, col + col_span):
                if self.is_occupied(r, c):
                    return False
        return True

    def find_free_region(self, col_span: int, row_span: int) -> DropZone:
        """Find the first row-major anchor where a rectangle fits.

        Rows are scanned past the declared row count, up to
        max(rows, content extent) + row_span + 1, so a too-small grid never
        blocks placement. Columns stay within the declared width.

        Args:
            col_span: Requested width in columns
            row_span: Requested height in rows

        Returns:
            DropZone of the free region. When nothing fits, the append
            position (content extent, column 0), which may overlap on a
            saturated grid; callers needing strict non-overlap re-validate.

        Raises:
            ValueError: If a span is < 1
        """
        if col_span < 1 or row_span < 1:
            raise ValueError(f"Spans must be >= 1, got {col_span}x{row_span}")

        extent = self.grid.content_extent()
        scan_limit = max(self.grid.rows, extent) + row_span + 1

        for row in range(scan_limit):
            for col in range(self.grid.cols - col_span + 1):
                if self.region_is_free(row, col, row_span, col_span):
                    return DropZone(row=row, col=col, row_span=row_span, col_span=col_span)

        return DropZone(row=extent, col=0, row_span=row_span, col_span=col_span)

    def check_overlaps(self) -> List[Tuple[str, str]]:
        """All intersecting cell pairs."""
        return self.grid.find_overlaps()

    def cells_outside_bounds(self) -> List[str]:
        """Ids of cells extending past the declared rows or cols."""
        return [
            c.id for c in self.grid.cells
            if c.row_end > self.grid.rows or c.col_end > self.grid.cols
        ]

    def get_stats(self) -> Dict[str, Any]:
        """Occupancy statistics for reports."""
        total = self.grid.rows * self.grid.cols
        empty = sum(1 for _ in self.empty_slots())
        return {
            "cell_count": len(self.grid.cells),
            "filled_count": sum(1 for c in self.grid.cells if not c.is_empty),
            "slot_count": total,
            "empty_slot_count": empty,
            "occupancy": (total - empty) / total if total else 0.0,
            "overlap_count": len(self.check_overlaps()),
        }
