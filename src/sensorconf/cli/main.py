"""Main CLI entry point for sensorconf."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .. import __version__
from ..exceptions import SensorconfError
from .commands import cmd_analyze, cmd_decode, cmd_project


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="sensorconf",
        description="sensorconf: Sensor Node Configuration Records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sensorconf decode "01 00 A1 CC 00 00 2E 38 D4 89 xx xx"
  sensorconf decode <hex> --set hw_number=0x0103 --migrate 2
  sensorconf analyze --record pof
  sensorconf project project.yaml --car EWB --position A1L
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"sensorconf {__version__}",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    decode_parser = subparsers.add_parser("decode", help="Decode a record given as hex")
    decode_parser.add_argument("hex", help="Record bytes as hex (spaces allowed)")
    decode_parser.add_argument("--record", default="pof", help="Record type (default: pof)")
    decode_parser.add_argument(
        "--set",
        metavar="NAME=VALUE",
        action="append",
        default=[],
        help="Assign a field before re-encoding (repeatable)",
    )
    decode_parser.add_argument(
        "--migrate", metavar="VERSION", type=int, help="Re-encode using another version"
    )
    decode_parser.set_defaults(handler=cmd_decode)

    analyze_parser = subparsers.add_parser("analyze", help="Show the layouts of a record type")
    analyze_parser.add_argument("--record", default="pof", help="Record type (default: pof)")
    analyze_parser.set_defaults(handler=cmd_analyze)

    project_parser = subparsers.add_parser("project", help="Inspect a project config file")
    project_parser.add_argument("file", help="Project config YAML file")
    project_parser.add_argument("--car", help="Car label")
    project_parser.add_argument("--position", help="Position label")
    project_parser.set_defaults(handler=cmd_project)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the sensorconf CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.handler(args)
    except (SensorconfError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
