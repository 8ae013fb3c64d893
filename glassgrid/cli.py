#!/usr/bin/env python3
"""
glassgrid CLI

Command-line access to the layout engine's catalogs and layout files.

Usage:
    glassgrid presets
    glassgrid templates [--category widgets]
    glassgrid export <preset> [-o layout.json]
    glassgrid inspect <layout.json> [--span 4x2]
"""

import argparse
import logging
import sys
from typing import Tuple

from . import __version__


def parse_span(value: str) -> Tuple[int, int]:
    """Parse a COLSxROWS span such as '4x2'."""
    try:
        cols, rows = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Span must look like COLSxROWS, got '{value}'")
    if cols < 1 or rows < 1:
        raise argparse.ArgumentTypeError(f"Span must be at least 1x1, got '{value}'")
    return cols, rows


def cmd_presets(args):
    """List layout presets."""
    from .grid.presets import PRESETS

    for preset_id in sorted(PRESETS):
        preset = PRESETS[preset_id]
        print(f"{preset.icon}  {preset.id:<14} {preset.name} - {preset.description}")
    return 0


def cmd_templates(args):
    """List component templates."""
    from .grid.templates import TEMPLATES, get_templates_by_category

    templates = get_templates_by_category(args.category) if args.category else TEMPLATES
    if not templates:
        print(f"No templates in category '{args.category}'")
        return 1

    for template in templates:
        print(f"{template.icon}  {template.id:<20} [{template.category}] {template.name}")
    return 0


def cmd_export(args):
    """Instantiate a preset and print or save it."""
    from .api.actions import auto_fit
    from .config import ConfigError, load_config
    from .grid.layout_file import export_json, write_layout_file
    from .grid.presets import instantiate_preset

    try:
        config = load_config(args.config)
        grid = auto_fit(instantiate_preset(args.preset), config.min_rows)
    except (ConfigError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if args.output:
        path = write_layout_file(grid, args.output)
        print(f"Saved {grid.name} to {path}")
    else:
        print(export_json(grid))
    return 0


def cmd_inspect(args):
    """Report on a layout file."""
    from .api.inspection import GridInspector
    from .grid.layout_file import LayoutFormatError, read_layout_file

    try:
        grid = read_layout_file(args.layout)
    except FileNotFoundError:
        print(f"Error: Layout file not found: {args.layout}")
        return 1
    except LayoutFormatError as e:
        print(f"Error: {e}")
        return 1

    inspector = GridInspector(grid)
    stats = inspector.get_stats()
    overlaps = inspector.check_overlaps()

    print(f"Layout: {grid.name} ({grid.id})")
    print(f"  Size: {grid.rows} rows x {grid.cols} cols, gap {grid.gap}")
    print(f"  Cells: {stats['cell_count']} ({stats['filled_count']} with components)")
    print(f"  Empty slots: {stats['empty_slot_count']} of {stats['slot_count']}"
          f" ({stats['occupancy']:.0%} occupied)")

    outside = inspector.cells_outside_bounds()
    if outside:
        print(f"  Cells past the declared bounds: {', '.join(outside)}")

    if args.span:
        cols, rows = args.span
        zone = inspector.find_free_region(cols, rows)
        print(f"  Free region for {cols}x{rows}: row {zone.row}, col {zone.col}")

    if overlaps:
        print(f"  Overlaps ({len(overlaps)}):")
        for a, b in overlaps:
            print(f"    {a} <-> {b}")
        return 1

    print("  No overlaps")
    return 0


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="glassgrid - Grid layout engine for glassmorphic UI layouts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  glassgrid presets
  glassgrid export dashboard -o dashboard.yaml
  glassgrid inspect dashboard.yaml --span 4x2
        """,
    )

    parser.add_argument('--version', action='version', version=f'glassgrid {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('presets', help='List layout presets')

    templates_parser = subparsers.add_parser('templates', help='List component templates')
    templates_parser.add_argument('--category', help='Only list one category')

    export_parser = subparsers.add_parser('export', help='Export a preset as a layout file')
    export_parser.add_argument('preset', help='Preset id (see "glassgrid presets")')
    export_parser.add_argument('-o', '--output', help='Output file (.json, .yaml or .yml)')
    export_parser.add_argument('--config', help='Engine config YAML (default: $GLASSGRID_CONFIG)')

    inspect_parser = subparsers.add_parser('inspect', help='Inspect a layout file')
    inspect_parser.add_argument('layout', help='Layout file (.json, .yaml or .yml)')
    inspect_parser.add_argument('--span', type=parse_span,
                                help='Report the free region for a COLSxROWS box')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
        datefmt='%H:%M:%S',
    )

    if not args.command:
        parser.print_help()
        return 1

    # Dispatch command
    commands = {
        'presets': cmd_presets,
        'templates': cmd_templates,
        'export': cmd_export,
        'inspect': cmd_inspect,
    }

    return commands[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
