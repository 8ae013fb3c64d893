"""
glassgrid Editing Session

Owns the state of one editor view: the live grid, its undo history, the
current selection and any in-progress drag. Every mutation goes through
LayoutActions, is auto-fitted and then committed to the history, so each
call is individually undoable. Rejected actions leave the state untouched
and return False.

Drags are transient: hover updates only change the preview, and a single
history entry is committed on drop. Cancelling a drag commits nothing.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from ..config import EngineConfig
from ..grid.abstraction import Cell, DropZone, Grid, generate_id
from ..grid.layout_file import export_json
from ..grid.presets import PRESETS, instantiate_grid, instantiate_preset
from ..grid.templates import TemplateInfo, find_template
from .actions import ActionResult, LayoutActions, auto_fit
from .history import LayoutHistory
from .inspection import GridInspector

logger = logging.getLogger(__name__)

TemplateLookup = Callable[[str], Optional[TemplateInfo]]


@dataclass
class Selection:
    """Focused cell plus an optional multi-selection sharing a group tag."""
    cell_id: Optional[str] = None
    cell_ids: List[str] = field(default_factory=list)
    group_id: Optional[str] = None

    def is_selected(self, cell_id: str) -> bool:
        return cell_id == self.cell_id or cell_id in self.cell_ids

    def discard(self, cell_id: str):
        """Drop a cell from the selection."""
        if self.cell_id == cell_id:
            self.cell_id = None
        if cell_id in self.cell_ids:
            self.cell_ids.remove(cell_id)
        if not self.cell_ids:
            self.group_id = None

    def clear(self):
        self.cell_id = None
        self.cell_ids = []
        self.group_id = None


class DragMode(Enum):
    """Kinds of pointer drag the editor supports."""
    TEMPLATE = "template"  # Template dragged in from the picker
    MOVE = "move"  # Existing cell being repositioned
    RESIZE = "resize"  # Existing cell's bottom-right corner being dragged


@dataclass
class DragState:
    """An in-progress drag; never part of the history."""
    mode: DragMode
    cell_id: Optional[str] = None
    over: Optional[DropZone] = None


class LayoutSession:
    """
    Manages the lifecycle of a layout editing session.

    Provides:
    - Grid queries on the live layout
    - Placement/mutation operations committed to an undo history
    - Preset loading and external layout application
    - Selection and drag state
    """

    def __init__(
        self,
        initial_preset: Optional[str] = None,
        config: Optional[EngineConfig] = None,
        template_lookup: Optional[TemplateLookup] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.config = config or EngineConfig()
        self._new_id = id_factory or generate_id
        self._template_lookup = template_lookup or find_template

        self._grid = auto_fit(self._initial_grid(initial_preset), self.config.min_rows)
        self.history = LayoutHistory(self._grid, max_entries=self.config.max_history)
        self.selection = Selection()
        self._drag: Optional[DragState] = None

    def _initial_grid(self, preset_id: Optional[str]) -> Grid:
        preset_id = preset_id or self.config.default_preset
        if preset_id not in PRESETS:
            logger.warning("Unknown preset '%s', starting from '%s'",
                           preset_id, self.config.default_preset)
            preset_id = self.config.default_preset
        if preset_id not in PRESETS:
            logger.warning("Default preset '%s' unknown, starting blank", preset_id)
            return self._blank_grid()
        return instantiate_preset(preset_id, self._new_id)

    def _blank_grid(self, name: str = "Untitled") -> Grid:
        return Grid(id=self._new_id(), name=name, rows=self.config.min_rows,
                    cols=self.config.default_cols, gap=self.config.default_gap)

    # --- State ---

    @property
    def grid(self) -> Grid:
        """The live grid. Read it for rendering; mutate only through the session."""
        return self._grid

    @property
    def selected_cell_id(self) -> Optional[str]:
        return self.selection.cell_id

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    @property
    def history_index(self) -> int:
        return self.history.index

    @property
    def history_length(self) -> int:
        return len(self.history)

    # --- Commit Path ---

    def _commit(self, grid: Grid, description: str, rows_floor: int = 0):
        """Auto-fit, record and install a new grid."""
        fitted = auto_fit(grid, max(self.config.min_rows, rows_floor))
        self.history.commit(fitted, description)
        self._grid = fitted
        self._prune_selection()
        logger.debug("Committed '%s' (%d/%d): %r", description,
                     self.history.index + 1, len(self.history), fitted)

    def _apply(self, result: ActionResult, rows_floor: int = 0) -> bool:
        if not result.success:
            return False
        self._commit(result.grid, result.message, rows_floor)
        return True

    def _actions(self) -> LayoutActions:
        return LayoutActions(self._grid, self._new_id)

    def _prune_selection(self):
        """Forget selected ids that no longer exist in the grid."""
        stale = [c for c in self.selection.cell_ids + [self.selection.cell_id]
                 if c is not None and not self._grid.has_cell(c)]
        for cell_id in stale:
            if self.selection.is_selected(cell_id):
                self.selection.discard(cell_id)

    # --- Layout ---

    def set_grid(self, grid: Grid) -> bool:
        """Replace the live grid as-is."""
        self._commit(grid.copy(), f"Set layout {grid.name}")
        return True

    def load_preset(self, preset_id: str) -> bool:
        """Replace the grid with a fresh copy of a preset; unknown ids are ignored."""
        if preset_id not in PRESETS:
            logger.debug("Unknown preset '%s' ignored", preset_id)
            return False
        self.selection.clear()
        self._commit(instantiate_preset(preset_id, self._new_id), f"Load preset {preset_id}")
        return True

    def apply_grid(self, grid: Grid) -> bool:
        """Apply a complete layout (e.g. from a template gallery) under a new grid id."""
        applied = grid.copy()
        applied.id = self._new_id()
        self.selection.clear()
        self._commit(applied, f"Apply layout {grid.name}")
        return True

    def apply_template_layout(self, grid: Grid) -> bool:
        """Apply a gallery layout with fresh ids for the grid and every cell."""
        self.selection.clear()
        self._commit(instantiate_grid(grid, self._new_id), f"Apply layout {grid.name}")
        return True

    def reset_grid(self) -> bool:
        """Go back to the default preset (undoable)."""
        return self.load_preset(self.config.default_preset)

    def new_layout(self, name: str = "Untitled") -> bool:
        """Start over from an empty grid with the configured columns and gap."""
        self.selection.clear()
        self._commit(self._blank_grid(name), f"New layout {name}")
        return True

    def update_layout_settings(
        self,
        name: Optional[str] = None,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        gap: Optional[int] = None,
    ) -> bool:
        """
        Change name/rows/cols/gap.

        An explicit row count clips the cells and is kept for this commit
        (never below min_rows); later mutations derive rows from content.
        """
        result = self._actions().update_layout_settings(name=name, rows=rows, cols=cols, gap=gap)
        return self._apply(result, rows_floor=result.grid.rows if rows is not None else 0)

    # --- History ---

    def undo(self) -> bool:
        """
        Undo last change.

        Returns:
            True if undo was performed, False if nothing to undo
        """
        grid = self.history.undo()
        if grid is None:
            return False
        self._grid = grid
        self._prune_selection()
        return True

    def redo(self) -> bool:
        """
        Redo last undone change.

        Returns:
            True if redo was performed, False if nothing to redo
        """
        grid = self.history.redo()
        if grid is None:
            return False
        self._grid = grid
        self._prune_selection()
        return True

    # --- Selection ---

    def select_cell(self, cell_id: Optional[str]) -> bool:
        """Focus a single cell; None clears the selection."""
        if cell_id is None:
            self.selection.clear()
            return True
        if not self._grid.has_cell(cell_id):
            return False
        self.selection = Selection(cell_id=cell_id)
        return True

    def select_cells(self, cell_ids: Iterable[str], group_id: Optional[str] = None) -> bool:
        """Multi-select existing cells; the first becomes the focused cell."""
        ids = [c for c in dict.fromkeys(cell_ids) if self._grid.has_cell(c)]
        if not ids:
            return False
        self.selection = Selection(cell_id=ids[0], cell_ids=ids, group_id=group_id)
        return True

    def clear_selection(self):
        self.selection.clear()

    def group_selection(self, group_id: Optional[str] = None) -> Optional[str]:
        """Tag the multi-selected cells with a shared group id (generated if None)."""
        if not self.selection.cell_ids:
            return None
        group_id = group_id or self._new_id()
        if not self._apply(self._actions().set_group(self.selection.cell_ids, group_id)):
            return None
        self.selection.group_id = group_id
        return group_id

    def ungroup_selection(self) -> bool:
        if not self.selection.cell_ids:
            return False
        if not self._apply(self._actions().set_group(self.selection.cell_ids, None)):
            return False
        self.selection.group_id = None
        return True

    # --- Cells ---

    def add_cell(
        self,
        row: int,
        col: int,
        row_span: int = 1,
        col_span: int = 1,
        component_id: Optional[str] = None,
        content: Optional[Dict[str, Any]] = None,
        group_id: Optional[str] = None,
    ) -> Optional[str]:
        """Add a cell (no overlap check). Returns the new cell id."""
        result = self._actions().add_cell(row, col, row_span, col_span,
                                          component_id, content, group_id)
        return result.modified_ids[0] if self._apply(result) else None

    def add_cell_in_free_region(
        self,
        col_span: int,
        row_span: int,
        component_id: Optional[str] = None,
        content: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        """Add a cell at the first free region of the given size."""
        result = self._actions().add_cell_in_free_region(col_span, row_span, component_id, content)
        return result.modified_ids[0] if self._apply(result) else None

    def update_cell(self, cell_id: str, **updates: Any) -> bool:
        return self._apply(self._actions().update_cell(cell_id, **updates))

    def resize_cell(self, cell_id: str, row_span: int, col_span: int) -> bool:
        """Resize with spans clamped to the declared grid."""
        return self._apply(self._actions().resize_cell(cell_id, row_span, col_span))

    def remove_cell(self, cell_id: str) -> bool:
        return self._apply(self._actions().remove_cell(cell_id))

    def clear_cell(self, cell_id: str) -> bool:
        """Empty a cell but keep its slot; the cell is deselected."""
        if not self._apply(self._actions().clear_cell(cell_id)):
            return False
        self.selection.discard(cell_id)
        return True

    # --- Components ---

    def place_component(
        self,
        cell_id: str,
        template_id: str,
        content: Optional[Dict[str, Any]] = None,
    ) -> bool:
        return self._apply(self._actions().place_component(cell_id, template_id, content))

    def drop_template(self, cell_id: str, template_id: str) -> bool:
        """Place a catalog template, seeding content with its defaults."""
        template = self._template_lookup(template_id)
        if template is None:
            logger.debug("Unknown template '%s' ignored", template_id)
            return False
        return self.place_component(cell_id, template.id, dict(template.default_content))

    def move_component(self, from_id: str, to_id: str) -> bool:
        return self._apply(self._actions().move_component(from_id, to_id))

    def swap_cells(self, id1: str, id2: str) -> bool:
        """Swap two cells' positions; refused if the result would overlap."""
        return self._apply(self._actions().swap_cells(id1, id2))

    # --- Queries ---

    def cell_at(self, row: int, col: int) -> Optional[Cell]:
        return GridInspector(self._grid).cell_at(row, col)

    def is_occupied(self, row: int, col: int) -> bool:
        return GridInspector(self._grid).is_occupied(row, col)

    def empty_slots(self) -> Iterator[DropZone]:
        return GridInspector(self._grid).empty_slots()

    def find_free_region(self, col_span: int, row_span: int) -> DropZone:
        return GridInspector(self._grid).find_free_region(col_span, row_span)

    # --- Drag & Drop ---

    @property
    def is_dragging(self) -> bool:
        return self._drag is not None

    @property
    def drag_state(self) -> Optional[DragState]:
        return self._drag

    def begin_drag(self, mode: DragMode = DragMode.TEMPLATE, cell_id: Optional[str] = None) -> bool:
        """
        Start a drag. MOVE and RESIZE need an existing cell.

        A drag already in progress is cancelled.
        """
        if mode is not DragMode.TEMPLATE and not self._grid.has_cell(cell_id):
            return False
        self._drag = DragState(mode=mode, cell_id=cell_id)
        return True

    def set_drag_over(self, zone: Optional[DropZone]):
        """Update the hover target; only the preview changes."""
        if self._drag is not None:
            self._drag.over = zone

    def cancel_drag(self):
        """Abort the drag without recording anything."""
        self._drag = None

    def _pending_drag_result(self, drag: Optional[DragState]) -> Optional[ActionResult]:
        """Result of dropping a MOVE/RESIZE drag at its current hover target."""
        if drag is None or drag.over is None or drag.mode is DragMode.TEMPLATE:
            return None
        cell = self._grid.get_cell(drag.cell_id)
        if cell is None:
            return None

        actions = self._actions()
        if drag.mode is DragMode.MOVE:
            row = max(0, drag.over.row)
            col = max(0, min(drag.over.col, self._grid.cols - cell.col_span))
            return actions.update_cell(cell.id, row=row, col=col)

        # RESIZE: hover point is the new bottom-right corner (inclusive)
        return actions.resize_cell(cell.id,
                                   drag.over.row - cell.row + 1,
                                   drag.over.col - cell.col + 1)

    @property
    def preview_grid(self) -> Grid:
        """The live grid with the pending drag applied, for rendering only."""
        result = self._pending_drag_result(self._drag)
        if result is None or not result.success:
            return self._grid
        return result.grid

    def drop(self, template_id: Optional[str] = None) -> bool:
        """
        Finish the drag, committing one history entry.

        TEMPLATE drops place the template in the cell under the hover point,
        or in a new 1x1 cell if the point is empty. Points left of column 0,
        right of the last column or above row 0 are refused. MOVE/RESIZE drops that
        would overlap another cell are refused.
        """
        drag = self._drag
        self._drag = None
        if drag is None or drag.over is None:
            return False

        if drag.mode is DragMode.TEMPLATE:
            if template_id is None:
                return False
            if not (0 <= drag.over.row and 0 <= drag.over.col < self._grid.cols):
                logger.debug("Template drop at (%d, %d) outside the grid refused",
                             drag.over.row, drag.over.col)
                return False
            target = self.cell_at(drag.over.row, drag.over.col)
            if target is not None:
                return self.drop_template(target.id, template_id)
            template = self._template_lookup(template_id)
            if template is None:
                return False
            return self.add_cell(drag.over.row, drag.over.col,
                                 component_id=template.id,
                                 content=dict(template.default_content)) is not None

        result = self._pending_drag_result(drag)
        if result is None or not result.success:
            return False

        moved = result.grid.get_cell(drag.cell_id)
        clashes = [c.id for c in result.grid.cells if c.id != moved.id and c.overlaps(moved)]
        if clashes:
            logger.debug("Drop of %s refused: overlaps %s", drag.cell_id, clashes)
            return False
        return self._apply(result)

    # --- Export ---

    def to_dict(self) -> Dict[str, Any]:
        return self._grid.to_dict()

    def export_json(self) -> str:
        """Lossless JSON dump of the live grid."""
        return export_json(self._grid)

    def get_stats(self) -> Dict[str, Any]:
        """Get session statistics."""
        return {
            "grid": self._grid.get_stats(),
            "history_index": self.history.index,
            "history_length": len(self.history),
            "undo_available": self.can_undo,
            "redo_available": self.can_redo,
            "selected": self.selection.cell_id,
            "dragging": self.is_dragging,
        }
