"""
Layout Presets

Named starting layouts for the editor. A preset is a canned arrangement of
cells on a 12-column grid; loading one deep-copies its layout and assigns
fresh ids so repeated loads never collide on identity.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List

from .abstraction import Cell, Grid, generate_id


@dataclass
class LayoutPreset:
    """A named starting layout."""

    id: str
    name: str
    description: str
    icon: str
    layout: Grid


def _cells(*specs) -> List[Cell]:
    """Build preset cells from (row, col, row_span, col_span) tuples."""
    return [
        Cell(id=f"cell-{i}", row=r, col=c, row_span=rs, col_span=cs)
        for i, (r, c, rs, cs) in enumerate(specs)
    ]


# Pre-defined presets

GRID_2X2 = LayoutPreset(
    id="grid-2x2",
    name="2×2 Grid",
    description="Simple 2x2 grid layout for balanced content",
    icon="⊞",
    layout=Grid(
        id="grid-2x2",
        name="2×2 Grid",
        rows=2,
        cols=12,
        gap=16,
        cells=_cells(
            (0, 0, 1, 6), (0, 6, 1, 6),
            (1, 0, 1, 6), (1, 6, 1, 6),
        ),
    ),
)

ROW_3 = LayoutPreset(
    id="row-3",
    name="3-Column Row",
    description="Three equal columns in a single row",
    icon="☰",
    layout=Grid(
        id="row-3",
        name="3-Column Row",
        rows=1,
        cols=12,
        gap=16,
        cells=_cells((0, 0, 1, 4), (0, 4, 1, 4), (0, 8, 1, 4)),
    ),
)

MASONRY = LayoutPreset(
    id="masonry",
    name="Masonry",
    description="Pinterest-style staggered layout",
    icon="▤",
    layout=Grid(
        id="masonry",
        name="Masonry",
        rows=3,
        cols=12,
        gap=16,
        cells=_cells(
            (0, 0, 2, 4), (0, 4, 1, 4), (0, 8, 1, 4),
            (1, 4, 2, 4), (1, 8, 1, 4),
            (2, 0, 1, 4), (2, 8, 1, 4),
        ),
    ),
)

DASHBOARD = LayoutPreset(
    id="dashboard",
    name="Dashboard",
    description="Stats header with content grid below",
    icon="📊",
    layout=Grid(
        id="dashboard",
        name="Dashboard",
        rows=3,
        cols=12,
        gap=16,
        cells=_cells(
            # Stat widgets
            (0, 0, 1, 3), (0, 3, 1, 3), (0, 6, 1, 3), (0, 9, 1, 3),
            # Main chart
            (1, 0, 2, 9),
            # Sidebar widgets
            (1, 9, 1, 3), (2, 9, 1, 3),
        ),
    ),
)

LANDING_HERO = LayoutPreset(
    id="landing-hero",
    name="Landing Hero",
    description="Hero section with feature cards",
    icon="🚀",
    layout=Grid(
        id="landing-hero",
        name="Landing Hero",
        rows=2,
        cols=12,
        gap=24,
        cells=_cells(
            (0, 0, 1, 12),
            (1, 0, 1, 4), (1, 4, 1, 4), (1, 8, 1, 4),
        ),
    ),
)

SIDEBAR_MAIN = LayoutPreset(
    id="sidebar-main",
    name="Sidebar + Main",
    description="Sidebar navigation with main content area",
    icon="◧",
    layout=Grid(
        id="sidebar-main",
        name="Sidebar + Main",
        rows=2,
        cols=12,
        gap=16,
        cells=_cells(
            (0, 0, 2, 3),
            (0, 3, 1, 9),
            (1, 3, 1, 6), (1, 9, 1, 3),
        ),
    ),
)

# Preset registry
PRESETS: Dict[str, LayoutPreset] = {
    p.id: p
    for p in (GRID_2X2, ROW_3, MASONRY, DASHBOARD, LANDING_HERO, SIDEBAR_MAIN)
}

DEFAULT_PRESET = GRID_2X2.id


def get_preset(preset_id: str) -> LayoutPreset:
    """
    Get a layout preset by id.

    Args:
        preset_id: Preset identifier (e.g., "dashboard")

    Returns:
        LayoutPreset instance

    Raises:
        ValueError: If the preset id is not found
    """
    if preset_id not in PRESETS:
        available = ", ".join(sorted(PRESETS.keys()))
        raise ValueError(f"Unknown layout preset '{preset_id}'. Available: {available}")
    return PRESETS[preset_id]


def list_presets() -> List[str]:
    """List all available preset ids."""
    return sorted(PRESETS.keys())


def instantiate_grid(grid: Grid, id_factory: Callable[[], str] = generate_id) -> Grid:
    """
    Deep-copy a grid and give it and every cell a fresh id.

    Cell group tags are kept; they are labels, not identities.
    """
    fresh = grid.copy()
    fresh.id = id_factory()
    for cell in fresh.cells:
        cell.id = id_factory()
    return fresh


def instantiate_preset(preset_id: str,
                       id_factory: Callable[[], str] = generate_id) -> Grid:
    """Create an independent grid from a preset (raises ValueError if unknown)."""
    return instantiate_grid(get_preset(preset_id).layout, id_factory)


def default_grid() -> Grid:
    """The layout a fresh editor starts with."""
    return instantiate_preset(DEFAULT_PRESET)
