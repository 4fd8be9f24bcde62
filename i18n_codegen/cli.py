from __future__ import annotations

import argparse
import sys

from rich.console import Console

from . import __version__
from .codegen.cli_integration import create_codegen_subparser, create_config_subparser
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with its sub-commands."""
    parser = argparse.ArgumentParser(
        prog="i18n-codegen",
        description="Generate localization accessor classes from translated strings",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command")
    create_codegen_subparser(subparsers)
    create_config_subparser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``i18n-codegen`` command.

    Args:
        argv: Command line arguments, ``sys.argv[1:]`` when omitted.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    logger.debug("Running command: %s", args.command)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        Console().print("\n👋 [yellow]Interrupted[/yellow]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
