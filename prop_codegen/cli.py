"""
Command-line inspection of the C++ mapping for a component's props.

Prints, for each prop of a schema file, the C++ type and default value this
package derives, plus the includes the props need.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import __version__
from .core.config import load_config
from .core.errors import GeneratorError
from .core.schema import convert_props
from .cpp.imports import CppImportResolver
from .cpp.report import describe_props
from .cpp.types import CppTypeMapper
from .logging_config import get_logger, setup_logging
from .utils import extract_props, load_json_from_file

logger = get_logger(__name__)

console = Console()

EMPTY_CELL = Text("—", style="dim")


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="prop-codegen",
        description="Show the C++ types, defaults and includes derived from component props",
    )
    parser.add_argument("schema", metavar="SCHEMA", help="JSON file with a list of props")
    parser.add_argument(
        "--component",
        "-c",
        required=True,
        metavar="NAME",
        help="Component name used to build enum and struct names",
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--verbose", "-v", action="count", default=0, help="Increase log verbosity"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def render_report(component: str, schema_path: str, config_file: str | None = None) -> int:
    """Load a schema file and print the derived C++ information.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    try:
        config = load_config(config_file=config_file)
        props = convert_props(extract_props(load_json_from_file(schema_path)))
        summaries = describe_props(component, props, CppTypeMapper(config))
        imports = CppImportResolver(config).resolve(props)
    except GeneratorError as e:
        logger.error("Failed to process %s: %s", schema_path, e)
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1

    table = Table(
        title=f"📋 {escape(component)} props", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Prop", style="bold green", no_wrap=True)
    table.add_column("Annotation", style="dim")
    table.add_column("C++ type", style="cyan")
    table.add_column("Default", style="blue")

    for summary in summaries:
        table.add_row(
            Text(summary.name),
            Text(summary.type),
            Text(summary.cpp_type) if summary.cpp_type else EMPTY_CELL,
            Text(summary.default) if summary.default else EMPTY_CELL,
        )

    console.print()
    console.print(table)

    if imports:
        console.print("\n[bold]Includes:[/bold]")
        for statement in imports:
            console.print(f"  {statement}", markup=False, highlight=False)
    else:
        console.print("\n[dim]No includes needed[/dim]")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``prop-codegen`` command."""
    args = create_parser().parse_args(argv)
    setup_logging(_log_level(args.verbose))
    return render_report(args.component, args.schema, args.config)


if __name__ == "__main__":
    sys.exit(main())
