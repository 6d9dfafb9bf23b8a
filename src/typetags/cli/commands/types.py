"""Type hierarchy commands for typetags CLI."""

import json

from ...app import create_type_system
from ...core.config import Config


def handle_register(args, config: Config) -> None:
    """Handle register command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    with create_type_system(config) as types:
        types.register_custom_type(args.child, args.parent)
        print(f"Registered {args.child} -> {args.parent}")


def handle_isa(args, config: Config) -> None:
    """Handle isa command; prints true/false."""
    with create_type_system(config) as types:
        print("true" if types.is_a(args.tag, args.ancestor) else "false")


def handle_parents(args, config: Config) -> None:
    """Handle parents command."""
    with create_type_system(config) as types:
        for parent in types.graph.ordered_parents_of(args.tag):
            print(parent)


def handle_descendants(args, config: Config) -> None:
    """Handle descendants command."""
    with create_type_system(config) as types:
        for tag in sorted(types.descendants_of(args.root)):
            print(tag)


def handle_export(args, config: Config) -> None:
    """Handle export command; prints the hierarchy as JSON."""
    with create_type_system(config) as types:
        print(json.dumps(types.export_hierarchy(), indent=args.indent, sort_keys=True))
