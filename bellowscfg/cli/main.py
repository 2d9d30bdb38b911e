"""
Command-line interface for the bellows configurator.

Usage:
    python -m bellowscfg match --diameter 4 --length 254 --length-unit MM
    python -m bellowscfg index [--diameter 4]
    python -m bellowscfg part BSI-0400-10 [--cuff "U CUFF"]
    python -m bellowscfg schematic BSI-0400-10 [--cuff "U CUFF"] [--output drawing.json]
    python -m bellowscfg serve [--port 8000]
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from bellowscfg import __version__
from bellowscfg.catalog.loader import CatalogSnapshot, find_part, load_catalog
from bellowscfg.config import get_settings
from bellowscfg.logging_config import setup_logging
from bellowscfg.models.parts import CUFF_OPTIONS, CuffStyle
from bellowscfg.models.query import FieldName
from bellowscfg.schematic.builder import build_schematic
from bellowscfg.session import ConfiguratorSession


def _add_catalog_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--catalog", "-c",
        type=Path,
        default=None,
        help="JSON catalog file (default: BELLOWSCFG_CATALOG_PATH or the bundled dataset)",
    )


def _add_query_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--diameter", "-d", default="", help="Nominal diameter")
    parser.add_argument("--diameter-unit", default="IN", help="IN, MM or FT (default: IN)")
    parser.add_argument("--length", "-l", default="", help="Overall length")
    parser.add_argument("--length-unit", default="IN", help="IN, MM or FT (default: IN)")
    parser.add_argument("--pressure", "-p", default="", help="Design pressure text")
    parser.add_argument("--pressure-unit", default="PSIG", help="PSIG or BAR (default: PSIG)")
    parser.add_argument("--temperature", "-t", default="", help="Design temperature text")
    parser.add_argument("--temperature-unit", default="°F", help="°F or °C (default: °F)")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bellowscfg",
        description="Bellows Configurator - match catalog bellows to a requirement "
                    "and generate a schematic of the chosen part.",
    )
    parser.add_argument("--version", action="version", version=f"bellowscfg {__version__}")
    parser.add_argument("--log-level", default=None, help="Logging level (default: from settings)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # match command
    match_parser = subparsers.add_parser("match", help="Rank catalog parts for a requirement")
    _add_query_arguments(match_parser)
    _add_catalog_argument(match_parser)
    match_parser.add_argument(
        "--limit", "-n",
        type=int,
        default=None,
        help="Show at most this many parts",
    )

    # index command
    index_parser = subparsers.add_parser("index", help="List catalog suggestion values")
    index_parser.add_argument("--diameter", "-d", default="", help="Diameter to list lengths for")
    index_parser.add_argument("--diameter-unit", default="IN", help="IN, MM or FT (default: IN)")
    index_parser.add_argument("--length-unit", default="IN", help="Unit for listed lengths")
    _add_catalog_argument(index_parser)

    # part command
    part_parser = subparsers.add_parser("part", help="Show the specification table for a part")
    part_parser.add_argument("part_number", help="Catalog part number")
    part_parser.add_argument("--cuff", default=CuffStyle.STANDARD.value,
                             help=f"End-cuff style ({', '.join(CUFF_OPTIONS)})")
    part_parser.add_argument("--application", default=None, help="Application name")
    _add_catalog_argument(part_parser)

    # schematic command
    schematic_parser = subparsers.add_parser("schematic", help="Build the schematic model for a part")
    schematic_parser.add_argument("part_number", help="Catalog part number")
    schematic_parser.add_argument("--cuff", default=CuffStyle.STANDARD.value,
                                  help=f"End-cuff style ({', '.join(CUFF_OPTIONS)})")
    schematic_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )
    _add_catalog_argument(schematic_parser)

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start the FastAPI web server")
    serve_parser.add_argument("--host", default=None, help="Host to bind to (default: from settings)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: from settings)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")

    return parser


def _load(args: argparse.Namespace) -> CatalogSnapshot:
    path = args.catalog or get_settings().catalog_path
    return load_catalog(path=path)


def _write(output_json: str, output: Optional[Path] = None) -> None:
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(output_json)
        print(f"Saved to {output}", file=sys.stderr)
    else:
        print(output_json)


def cmd_match(args: argparse.Namespace) -> int:
    """Rank catalog parts against the given fields."""
    session = ConfiguratorSession(_load(args))
    for name, text, unit in (
        (FieldName.DIAMETER, args.diameter, args.diameter_unit),
        (FieldName.LENGTH, args.length, args.length_unit),
        (FieldName.PRESSURE, args.pressure, args.pressure_unit),
        (FieldName.TEMPERATURE, args.temperature, args.temperature_unit),
    ):
        session.set_unit(name, unit)
        session.set_field(name, text)

    result = session.matches()
    print(f"{result.count} of {len(session.catalog)} parts found", file=sys.stderr)

    matches = result.matches if args.limit is None else result.matches[:args.limit]
    rows = [
        {
            "part_number": m.part.part_number,
            "score": round(m.score, 4),
            "pipe_size": m.part.pipe_size,
            "overall_length_oal_in": m.part.overall_length_oal_in,
            "pressure_psig": m.part.pressure_psig.display(),
            "temperature_f": m.part.temperature_f.display(),
        }
        for m in matches
    ]
    print(json.dumps(rows, indent=2, ensure_ascii=False))
    return 0


def cmd_index(args: argparse.Namespace) -> int:
    """Print suggestion lists."""
    session = ConfiguratorSession(_load(args))
    session.set_unit(FieldName.DIAMETER, args.diameter_unit)
    session.set_unit(FieldName.LENGTH, args.length_unit)
    session.set_field(FieldName.DIAMETER, args.diameter)

    print(json.dumps({
        "diameters": session.diameter_options(),
        "lengths": session.length_options(),
        "pressures": session.pressure_options(),
        "temperatures": session.temperature_options(),
    }, indent=2, ensure_ascii=False))
    return 0


def cmd_part(args: argparse.Namespace) -> int:
    """Print the specification table for one part."""
    session = ConfiguratorSession(_load(args))
    session.set_cuff_style(args.cuff)
    if session.select_part(args.part_number) is None:
        print(f"Error: Part {args.part_number} not found in catalog", file=sys.stderr)
        return 1

    rows = session.specification_rows(args.application)
    width = max(len(row.label) for row in rows)
    for row in rows:
        print(f"{row.label.upper():<{width}}  {row.value}")
    return 0


def cmd_schematic(args: argparse.Namespace) -> int:
    """Write the schematic model for one part as JSON."""
    part = find_part(_load(args), args.part_number)
    if part is None:
        print(f"Error: Part {args.part_number} not found in catalog", file=sys.stderr)
        return 1

    model = build_schematic(part, args.cuff)
    _write(model.model_dump_json(indent=2), args.output)
    print(f"{len(model.primitives)} primitives on a {model.width:.0f}x{model.height:.0f} canvas",
          file=sys.stderr)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    try:
        import uvicorn
    except ImportError as e:
        print(f"Error: Missing dependency: {e}", file=sys.stderr)
        print("Install with: pip install uvicorn fastapi", file=sys.stderr)
        return 1

    settings = get_settings()
    host = args.host or settings.api_host
    port = args.port or settings.api_port

    print(f"\nStarting Bellows Configurator API", file=sys.stderr)
    print(f"API: http://{host}:{port}/", file=sys.stderr)
    print(f"Docs: http://{host}:{port}/docs", file=sys.stderr)
    print("\nPress Ctrl+C to stop\n", file=sys.stderr)

    uvicorn.run(
        "bellowscfg.api.server:app",
        host=host,
        port=port,
        reload=args.reload,
    )
    return 0


def cli(argv=None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(args.log_level or settings.log_level, settings.log_file)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "match": cmd_match,
        "index": cmd_index,
        "part": cmd_part,
        "schematic": cmd_schematic,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
