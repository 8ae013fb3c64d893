"""
Layout File Handler

Export and import of grids at the editor boundary. The exported document is
the structural dump of the in-memory model:

```json
{
  "id": "a1b2c3d4",
  "name": "Dashboard",
  "rows": 4,
  "cols": 12,
  "gap": 16,
  "cells": [
    {"id": "e5f6a7b8", "row": 0, "col": 0, "rowSpan": 1, "colSpan": 3,
     "componentId": "stats-widget", "content": {"label": "Total Users"}}
  ]
}
```

Files ending in `.yaml`/`.yml` hold the same mapping in YAML form.

Imported documents are checked against this schema and rejected with
LayoutFormatError. Overlap between cells is not checked here; the editor
trusts a well-formed grid.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .abstraction import Grid

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")

_CELL_KEYS = {"id", "row", "col", "rowSpan", "colSpan", "componentId", "content", "groupId"}


class LayoutFormatError(ValueError):
    """Raised when an imported layout does not match the grid schema."""


def _require_int(data: Dict[str, Any], key: str, minimum: int, where: str) -> None:
    value = data.get(key)
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        raise LayoutFormatError(f"{where}: '{key}' must be an integer, got {value!r}")
    if value < minimum:
        raise LayoutFormatError(f"{where}: '{key}' must be >= {minimum}, got {value}")


def validate_layout_dict(data: Any) -> List[str]:
    """
    Check a decoded document against the grid schema.

    Args:
        data: Decoded JSON/YAML value

    Returns:
        Cell ids in document order

    Raises:
        LayoutFormatError: On the first schema violation found
    """
    if not isinstance(data, dict):
        raise LayoutFormatError(f"Layout must be a mapping, got {type(data).__name__}")

    _require_int(data, "rows", 1, "layout")
    _require_int(data, "cols", 1, "layout")
    if "gap" in data:
        _require_int(data, "gap", 0, "layout")
    if "name" in data and not isinstance(data["name"], str):
        raise LayoutFormatError("layout: 'name' must be a string")

    cells = data.get("cells", [])
    if not isinstance(cells, list):
        raise LayoutFormatError("layout: 'cells' must be a list")

    seen: List[str] = []
    for i, cell in enumerate(cells):
        where = f"cells[{i}]"
        if not isinstance(cell, dict):
            raise LayoutFormatError(f"{where}: cell must be a mapping")
        unknown = set(cell) - _CELL_KEYS
        if unknown:
            raise LayoutFormatError(f"{where}: unknown keys {sorted(unknown)}")
        cell_id = cell.get("id")
        if not isinstance(cell_id, str) or not cell_id:
            raise LayoutFormatError(f"{where}: 'id' must be a non-empty string")
        if cell_id in seen:
            raise LayoutFormatError(f"{where}: duplicate cell id '{cell_id}'")
        seen.append(cell_id)

        _require_int(cell, "row", 0, where)
        _require_int(cell, "col", 0, where)
        _require_int(cell, "rowSpan", 1, where)
        _require_int(cell, "colSpan", 1, where)

        for key in ("componentId", "groupId"):
            if cell.get(key) is not None and not isinstance(cell[key], str):
                raise LayoutFormatError(f"{where}: '{key}' must be a string")
        if cell.get("content") is not None and not isinstance(cell["content"], dict):
            raise LayoutFormatError(f"{where}: 'content' must be a mapping")

    return seen


def grid_from_document(data: Any) -> Grid:
    """Validate a decoded document and build a Grid from it."""
    validate_layout_dict(data)
    return Grid.from_dict(data)


def export_json(grid: Grid, indent: int = 2) -> str:
    """Serialize a grid to JSON."""
    return json.dumps(grid.to_dict(), indent=indent, ensure_ascii=False)


def import_json(text: str) -> Grid:
    """
    Parse a JSON layout.

    Raises:
        LayoutFormatError: If the text is not JSON or not a valid layout
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LayoutFormatError(f"Invalid JSON: {e}") from e
    return grid_from_document(data)


def export_yaml(grid: Grid) -> str:
    """Serialize a grid to YAML."""
    return yaml.dump(
        grid.to_dict(),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def import_yaml(text: str) -> Grid:
    """
    Parse a YAML layout.

    Raises:
        LayoutFormatError: If the text is not YAML or not a valid layout
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LayoutFormatError(f"Invalid YAML: {e}") from e
    return grid_from_document(data)


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def read_layout_file(path: Union[str, Path]) -> Grid:
    """
    Read a layout from a .json or .yaml/.yml file.

    Raises:
        FileNotFoundError: If the file does not exist
        LayoutFormatError: If the content is not a valid layout
    """
    path = Path(path)
    content = path.read_text(encoding="utf-8")

    grid = import_yaml(content) if _is_yaml(path) else import_json(content)
    logger.debug("Loaded layout file %s: %r", path, grid)
    return grid


def write_layout_file(grid: Grid, path: Union[str, Path]) -> Path:
    """
    Write a layout to a file, choosing the format from the suffix.

    Args:
        grid: Grid to write
        path: Destination (.json, .yaml or .yml)

    Returns:
        Path written
    """
    path = Path(path)
    content = export_yaml(grid) if _is_yaml(path) else export_json(grid) + "\n"
    path.write_text(content, encoding="utf-8")
    logger.info("Saved layout file: %s (%d cells)", path, len(grid.cells))
    return path
