"""Command implementations for typetags CLI."""

from .types import (
    handle_descendants,
    handle_export,
    handle_isa,
    handle_parents,
    handle_register,
)

__all__ = [
    "handle_register",
    "handle_isa",
    "handle_parents",
    "handle_descendants",
    "handle_export",
]
