"""Grid model, preset/template catalogs and layout files."""

from .abstraction import Cell, DropZone, Grid, generate_id
from .presets import (
    LayoutPreset,
    PRESETS,
    default_grid,
    get_preset,
    instantiate_grid,
    instantiate_preset,
    list_presets,
)
from .templates import (
    TemplateInfo,
    find_template,
    get_template,
    get_template_categories,
    get_templates_by_category,
    list_templates,
)
from .layout_file import (
    LayoutFormatError,
    export_json,
    export_yaml,
    import_json,
    import_yaml,
    read_layout_file,
    write_layout_file,
)

__all__ = [
    # Core model
    "Cell",
    "DropZone",
    "Grid",
    "generate_id",
    # Presets
    "LayoutPreset",
    "PRESETS",
    "default_grid",
    "get_preset",
    "instantiate_grid",
    "instantiate_preset",
    "list_presets",
    # Templates
    "TemplateInfo",
    "find_template",
    "get_template",
    "get_template_categories",
    "get_templates_by_category",
    "list_templates",
    # Layout files
    "LayoutFormatError",
    "export_json",
    "export_yaml",
    "import_json",
    "import_yaml",
    "read_layout_file",
    "write_layout_file",
]
