"""
glassgrid Core API

Editing API for the grid layout engine.

Modules:
- inspection: Read-only grid queries (cell lookup, empty slots, free regions)
- actions: Pure placement/mutation transforms and the auto-fit policy
- history: Bounded linear undo/redo
- session: Editing session owning grid, history, selection and drag state
"""

from .actions import ActionResult, LayoutActions, auto_fit
from .history import HistoryEntry, LayoutHistory
from .inspection import GridInspector
from .session import DragMode, DragState, LayoutSession, Selection

__all__ = [
    "ActionResult",
    "LayoutActions",
    "auto_fit",
    "HistoryEntry",
    "LayoutHistory",
    "GridInspector",
    "DragMode",
    "DragState",
    "LayoutSession",
    "Selection",
]
