"""
Shared test fixtures for glassgrid tests.

Provides reusable grids, a deterministic id factory and editing sessions
for testing the query, action, history and session APIs.
"""

import itertools

import pytest

from glassgrid.api.session import LayoutSession
from glassgrid.grid.abstraction import Cell, Grid


@pytest.fixture
def id_factory():
    """Deterministic ids: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def full_grid() -> Grid:
    """A 4-row, 12-column grid completely covered by four 2x6 cells."""
    return Grid(
        id="full",
        name="Full",
        rows=4,
        cols=12,
        gap=16,
        cells=[
            Cell(id="c1", row=0, col=0, row_span=2, col_span=6),
            Cell(id="c2", row=0, col=6, row_span=2, col_span=6),
            Cell(id="c3", row=2, col=0, row_span=2, col_span=6),
            Cell(id="c4", row=2, col=6, row_span=2, col_span=6),
        ],
    )


@pytest.fixture
def mixed_grid() -> Grid:
    """Cells of different sizes: a tall 4x4 box beside two stacked 2x2 boxes."""
    return Grid(
        id="mixed",
        name="Mixed",
        rows=4,
        cols=12,
        gap=16,
        cells=[
            Cell(id="big", row=0, col=0, row_span=4, col_span=4),
            Cell(id="small", row=0, col=4, row_span=2, col_span=2),
            Cell(id="other", row=2, col=4, row_span=2, col_span=2),
        ],
    )


@pytest.fixture
def filled_grid(full_grid) -> Grid:
    """The full grid with components in c1 and c2."""
    full_grid.cells[0].component_id = "profile"
    full_grid.cells[0].content = {"name": "Ada", "tags": ["a", "b"]}
    full_grid.cells[1].component_id = "stats-widget"
    full_grid.cells[1].content = {"label": "Users", "value": "12"}
    return full_grid


@pytest.fixture
def session(id_factory) -> LayoutSession:
    """A fresh session on the default preset."""
    return LayoutSession(id_factory=id_factory)


@pytest.fixture
def full_session(session, filled_grid) -> LayoutSession:
    """A session whose history starts at the filled full grid."""
    session.set_grid(filled_grid)
    session.history.reset(session.grid)
    return session
