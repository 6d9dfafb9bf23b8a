"""Hierarchical type tags.

Provides:
- TypeGraph: Multi-parent "is-a" graph with reachability queries
- BUILTIN_EDGES / create_default_graph: The built-in type hierarchy
- CustomTypeRegistry: Runtime-registered types persisted across restarts
- export_hierarchy: Flat tag -> parents snapshot for external consumers
"""

from typetags.hierarchy.builtin import (
    BUILTIN_EDGES,
    ROOT_TAG,
    create_default_graph,
    load_builtin_hierarchy,
)
from typetags.hierarchy.custom import CustomTypeRegistry, ReloadResult
from typetags.hierarchy.export import export_hierarchy, export_hierarchy_json
from typetags.hierarchy.graph import TypeGraph

__all__ = [
    "TypeGraph",
    "BUILTIN_EDGES",
    "ROOT_TAG",
    "create_default_graph",
    "load_builtin_hierarchy",
    "CustomTypeRegistry",
    "ReloadResult",
    "export_hierarchy",
    "export_hierarchy_json",
]
