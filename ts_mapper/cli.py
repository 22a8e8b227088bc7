"""Command-line interface for ts_mapper."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from ts_mapper.core.config import GeneratorSettings
from ts_mapper.core.enums import EntityVisibility
from ts_mapper.core.exceptions import TSMapperError
from ts_mapper.generator import generate_mappers

logger = logging.getLogger("ts_mapper")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ts-mapper",
        description="Generate TypeScript mapper functions between interface declarations",
    )
    parser.add_argument(
        "-s", "--mapping-file", required=True, help="Mapping specification file path."
    )
    parser.add_argument("-o", "--output", required=True, help="Output file path.")
    parser.add_argument(
        "-t", "--template", default=None, help="Custom Jinja2 template (default: bundled)"
    )
    parser.add_argument(
        "--all-declarations",
        action="store_true",
        help="Map non-exported declarations too (default: exported only)",
    )
    parser.add_argument(
        "--no-strip-extension",
        action="store_true",
        help="Keep .ts extensions in generated import paths",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cwd = os.getcwd()
    mapping_file = os.path.abspath(os.path.join(cwd, args.mapping_file))
    output = os.path.abspath(os.path.join(cwd, args.output))

    settings = GeneratorSettings(
        template_path=os.path.abspath(args.template) if args.template else None,
        visibility=(
            EntityVisibility.ALL if args.all_declarations else EntityVisibility.EXPORTED_ONLY
        ),
        strip_import_extension=not args.no_strip_extension,
    )

    try:
        generate_mappers(mapping_file, output, settings)
    except TSMapperError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
