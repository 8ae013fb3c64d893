"""
glassgrid - Grid Layout Engine for Glassmorphic UI Layouts

Owns the placement model behind a visual layout editor: cells with row/col
spans on an integer grid, overlap-safe swaps, content-driven row fitting
and bounded undo/redo.
"""

__version__ = "0.1.0"

from .grid.abstraction import Cell, DropZone, Grid
from .api.session import LayoutSession
from .config import EngineConfig, load_config

__all__ = [
    "Cell",
    "DropZone",
    "Grid",
    "LayoutSession",
    "EngineConfig",
    "load_config",
]
