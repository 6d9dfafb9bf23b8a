"""Export of the type hierarchy for external consumers.

Clients such as a browser frontend get a flat map of every type to its
direct parents and build their own ``is_a`` from it.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from .builtin import ROOT_TAG

if TYPE_CHECKING:
    from .custom import CustomTypeRegistry
    from .graph import TypeGraph


def export_hierarchy(
    graph: "TypeGraph",
    registry: "CustomTypeRegistry",
    root: str = ROOT_TAG,
) -> dict[str, list[str]]:
    """Map every type under ``root`` to its direct parents.

    Custom types are reloaded first so the snapshot is current.

    Args:
        graph: Graph to export.
        registry: Registry used to reconcile persisted custom types.
        root: Root tag; only its descendants are exported.

    Returns:
        Dictionary of tag -> direct parents in the order they were added.

    Example:
        export_hierarchy(graph, registry)["type/UNIXTimestamp"]
        # ["type/DateTime", "type/Integer"]
    """
    registry.reload_custom_types()
    return {
        tag: list(graph.ordered_parents_of(tag))
        for tag in sorted(graph.descendants_of(root))
    }


def export_hierarchy_json(
    graph: "TypeGraph",
    registry: "CustomTypeRegistry",
    root: str = ROOT_TAG,
    indent: int | None = None,
) -> str:
    """Serialize ``export_hierarchy`` to JSON."""
    return json.dumps(export_hierarchy(graph, registry, root), indent=indent, sort_keys=True)
