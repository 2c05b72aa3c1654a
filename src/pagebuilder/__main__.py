"""
Command-line interface.

Run with: python -m pagebuilder render page.json --format markup
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from pagebuilder.export import ExportFormat, render
from pagebuilder.logging_config import setup_logging
from pagebuilder.model.io import IOManager
from pagebuilder.model.templates import list_templates

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagebuilder",
        description="Render saved page designs as HTML, TSX or JSON.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable informational logging")
    parser.add_argument("--log-file", help="Also write log records to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    p_render = sub.add_parser("render", help="Render a saved project file")
    p_render.add_argument("project", help="Path to a .json project file")
    p_render.add_argument(
        "-f", "--format",
        choices=[f.value for f in ExportFormat],
        default=ExportFormat.MARKUP.value,
        help="Export format (default: markup)",
    )
    p_render.add_argument(
        "-o", "--output-dir",
        help="Write my-page.<ext> into this directory instead of printing",
    )

    sub.add_parser("templates", help="List the starter templates")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the command line."""
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.INFO if args.verbose else logging.WARNING, log_file=args.log_file)

    if args.command == "templates":
        for template in list_templates():
            print(f"{template.id}\t{template.name}")
        return 0

    try:
        document, config = IOManager.load_project(args.project)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.output_dir:
        path = IOManager.export_to_file(document, config, args.format, args.output_dir)
        print(path)
    else:
        sys.stdout.write(render(document, config, args.format) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
