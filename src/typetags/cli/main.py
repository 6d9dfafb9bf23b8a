"""CLI entry point for typetags."""

import argparse
import sys
from typing import NoReturn

from loguru import logger

from .. import __version__
from ..core.config import Config
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="typetags",
        description="Hierarchical type tags with persisted custom types",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", help="Path to a TOML configuration file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    register_parser = subparsers.add_parser("register", help="Register a custom type")
    register_parser.add_argument("child", help="New type tag")
    register_parser.add_argument("parent", help="Parent type tag")

    isa_parser = subparsers.add_parser("isa", help="Check whether a type derives from another")
    isa_parser.add_argument("tag", help="Type tag to check")
    isa_parser.add_argument("ancestor", help="Candidate ancestor")

    parents_parser = subparsers.add_parser("parents", help="List direct parents of a type")
    parents_parser.add_argument("tag", help="Type tag")

    desc_parser = subparsers.add_parser("descendants", help="List all descendants of a type")
    desc_parser.add_argument("root", nargs="?", default=None, help="Root tag (default: type/*)")

    export_parser = subparsers.add_parser("export", help="Export type -> parents as JSON")
    export_parser.add_argument("--indent", type=int, default=None, help="JSON indentation")

    return parser


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def run(argv: list[str] | None = None) -> int:
    """Parse ``argv``, run the command and return the exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env_or_file(args.config)
        configure_logging("DEBUG" if args.verbose else config.log_level)

        if args.command == "register":
            commands.handle_register(args, config)
        elif args.command == "isa":
            commands.handle_isa(args, config)
        elif args.command == "parents":
            commands.handle_parents(args, config)
        elif args.command == "descendants":
            commands.handle_descendants(args, config)
        elif args.command == "export":
            commands.handle_export(args, config)
        else:
            parser.print_help()

        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main() -> NoReturn:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
