"""
Unit tests for the grid model, preset catalog and template catalog.
"""

import pytest

from glassgrid.grid.abstraction import Cell, DropZone, Grid
from glassgrid.grid.presets import (
    PRESETS,
    default_grid,
    get_preset,
    instantiate_grid,
    instantiate_preset,
    list_presets,
)
from glassgrid.grid.templates import (
    find_template,
    get_template,
    get_template_categories,
    get_templates_by_category,
    list_templates,
)


class TestCell:
    """Test cell geometry."""

    def test_bounds_are_exclusive(self):
        cell = Cell(id="a", row=1, col=2, row_span=2, col_span=3)
        assert cell.get_bounds() == (1, 2, 3, 5)
        assert cell.contains(2, 4) is True
        assert cell.contains(3, 4) is False
        assert cell.contains(2, 5) is False

    def test_touching_cells_do_not_overlap(self):
        a = Cell(id="a", row=0, col=0, row_span=2, col_span=2)
        b = Cell(id="b", row=0, col=2, row_span=2, col_span=2)
        c = Cell(id="c", row=2, col=0)
        assert a.overlaps(b) is False
        assert a.overlaps(c) is False

    def test_overlap_is_symmetric(self):
        a = Cell(id="a", row=0, col=0, row_span=3, col_span=3)
        b = Cell(id="b", row=2, col=2)
        assert a.overlaps(b) and b.overlaps(a)

    def test_is_empty(self):
        assert Cell(id="a", row=0, col=0).is_empty is True
        assert Cell(id="a", row=0, col=0, component_id="feature").is_empty is False


class TestSerialization:
    """Test the camelCase dict form."""

    def test_optional_keys_omitted(self):
        data = Cell(id="a", row=0, col=1, row_span=2, col_span=3).to_dict()
        assert data == {"id": "a", "row": 0, "col": 1, "rowSpan": 2, "colSpan": 3}

    def test_full_cell_round_trip(self):
        cell = Cell(id="a", row=0, col=1, component_id="profile",
                    content={"nested": {"x": [1, 2]}}, group_id="g")
        data = cell.to_dict()

        assert data["componentId"] == "profile"
        assert data["groupId"] == "g"
        assert Cell.from_dict(data) == cell

    def test_grid_dump_is_lossless(self, filled_grid):
        assert Grid.from_dict(filled_grid.to_dict()) == filled_grid

    def test_dump_does_not_share_content(self, filled_grid):
        data = filled_grid.to_dict()
        data["cells"][0]["content"]["name"] = "changed"
        assert filled_grid.cells[0].content["name"] == "Ada"

    def test_drop_zone_dict(self):
        assert DropZone(row=1, col=2).to_dict() == {"row": 1, "col": 2}
        assert DropZone(1, 2, 3, 4).to_dict() == {"row": 1, "col": 2, "rowSpan": 3, "colSpan": 4}


class TestGrid:
    """Test grid helpers."""

    def test_content_extent(self, full_grid):
        assert full_grid.content_extent() == 4
        assert Grid().content_extent() == 0

    def test_copy_is_deep(self, filled_grid):
        clone = filled_grid.copy()
        clone.cells[0].content["tags"].append("c")
        clone.cells[1].row = 9

        assert filled_grid.cells[0].content["tags"] == ["a", "b"]
        assert filled_grid.cells[1].row == 0

    def test_find_overlaps(self, mixed_grid):
        assert mixed_grid.find_overlaps() == []
        mixed_grid.cells[0].col_span = 5
        assert mixed_grid.find_overlaps() == [("big", "small"), ("big", "other")]
        assert mixed_grid.has_overlaps() is True

    def test_repr(self, full_grid):
        assert repr(full_grid) == "Grid(name='Full', 4x12, cells=4)"


class TestPresets:
    """Test the preset catalog."""

    def test_catalog(self):
        assert list_presets() == sorted([
            "grid-2x2", "row-3", "masonry", "dashboard", "landing-hero", "sidebar-main",
        ])

    @pytest.mark.parametrize("preset_id", sorted(PRESETS))
    def test_presets_are_valid(self, preset_id):
        """Every preset fits its columns and has no overlapping cells."""
        layout = get_preset(preset_id).layout
        assert layout.find_overlaps() == []
        assert all(c.col_end <= layout.cols for c in layout.cells)
        assert all(c.row_end <= layout.rows for c in layout.cells)

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Available"):
            get_preset("nope")

    def test_instantiate_assigns_fresh_ids(self):
        first = instantiate_preset("masonry")
        second = instantiate_preset("masonry")

        ids_first = set(first.cell_ids()) | {first.id}
        ids_second = set(second.cell_ids()) | {second.id}
        assert ids_first.isdisjoint(ids_second)
        assert len(ids_first) == len(first.cells) + 1

    def test_instantiate_does_not_touch_catalog(self):
        grid = instantiate_preset("row-3")
        grid.cells[0].row = 5
        assert get_preset("row-3").layout.cells[0].row == 0
        assert get_preset("row-3").layout.cells[0].id == "cell-0"

    def test_instantiate_keeps_geometry_and_groups(self, full_grid):
        full_grid.cells[0].group_id = "g"
        counter = iter(range(100))
        fresh = instantiate_grid(full_grid, lambda: f"n{next(counter)}")

        assert fresh.id == "n0"
        assert fresh.cell_ids() == ["n1", "n2", "n3", "n4"]
        assert fresh.cells[0].group_id == "g"
        assert [c.get_bounds() for c in fresh.cells] == [c.get_bounds() for c in full_grid.cells]

    def test_default_grid(self):
        assert default_grid().name == "2×2 Grid"


class TestTemplates:
    """Test the template catalog."""

    def test_lookup(self):
        assert get_template("profile").name == "Profile Card"
        assert find_template("nope") is None
        with pytest.raises(ValueError):
            get_template("nope")

    def test_listing(self):
        ids = list_templates()
        assert ids[0] == "profile"
        assert "empty" in ids
        assert len(ids) == len(set(ids))

    def test_categories(self):
        categories = get_template_categories()
        assert categories[0] == "cards"
        assert set(categories) == {"cards", "forms", "widgets", "navigation", "media", "layout"}
        assert all(t.category == "media" for t in get_templates_by_category("media"))
        assert get_templates_by_category("nope") == []

    def test_empty_template_has_no_content(self):
        assert get_template("empty").default_content == {}
