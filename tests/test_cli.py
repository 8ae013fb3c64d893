"""
Tests for the glassgrid command-line interface.
"""

import argparse
import json

import pytest

from glassgrid.cli import main, parse_span
from glassgrid.grid.layout_file import read_layout_file, write_layout_file
from glassgrid.grid.abstraction import Cell


class TestParseSpan:
    """Test COLSxROWS parsing."""

    def test_valid(self):
        assert parse_span("4x2") == (4, 2)
        assert parse_span("12X1") == (12, 1)

    @pytest.mark.parametrize("value", ["4", "ax2", "0x2", "4x2x1"])
    def test_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_span(value)


class TestCatalogCommands:
    """Test the presets and templates commands."""

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_presets(self, capsys):
        assert main(["presets"]) == 0
        out = capsys.readouterr().out
        assert "dashboard" in out
        assert "sidebar-main" in out

    def test_templates_by_category(self, capsys):
        assert main(["templates", "--category", "forms"]) == 0
        out = capsys.readouterr().out
        assert "login-form" in out
        assert "profile" not in out

    def test_unknown_category(self, capsys):
        assert main(["templates", "--category", "nope"]) == 1


class TestExportCommand:
    """Test exporting presets."""

    def test_to_stdout(self, capsys):
        assert main(["export", "dashboard"]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data["name"] == "Dashboard"
        assert data["rows"] == 4
        assert len(data["cells"]) == 7
        assert data["id"] != "dashboard"

    def test_to_file(self, tmp_path, capsys):
        path = tmp_path / "layout.yaml"
        assert main(["export", "row-3", "-o", str(path)]) == 0

        grid = read_layout_file(path)
        assert grid.name == "3-Column Row"
        assert "Saved" in capsys.readouterr().out

    def test_config_floor(self, tmp_path, capsys):
        config = tmp_path / "engine.yaml"
        config.write_text("min_rows: 6\n")

        assert main(["export", "row-3", "--config", str(config)]) == 0
        assert json.loads(capsys.readouterr().out)["rows"] == 6

    def test_unknown_preset(self, capsys):
        assert main(["export", "nope"]) == 1
        assert "Unknown layout preset" in capsys.readouterr().out


class TestInspectCommand:
    """Test inspecting layout files."""

    def test_clean_layout(self, tmp_path, full_grid, capsys):
        path = write_layout_file(full_grid, tmp_path / "full.json")

        assert main(["inspect", str(path), "--span", "4x2"]) == 0
        out = capsys.readouterr().out
        assert "4 rows x 12 cols" in out
        assert "Free region for 4x2: row 4, col 0" in out
        assert "No overlaps" in out

    def test_overlapping_layout(self, tmp_path, full_grid, capsys):
        full_grid.cells.append(Cell(id="x", row=0, col=0))
        path = write_layout_file(full_grid, tmp_path / "bad.yaml")

        assert main(["inspect", str(path)]) == 1
        assert "c1 <-> x" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["inspect", str(tmp_path / "nope.json")]) == 1
        assert "not found" in capsys.readouterr().out

    def test_malformed_file(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text('{"rows": 0, "cols": 12}')

        assert main(["inspect", str(path)]) == 1
        assert "Error" in capsys.readouterr().out
