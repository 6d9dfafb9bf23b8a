"""Type system container class.

Holds the wired graph, registry and settings store and manages the store's
lifecycle. Use create_type_system() from typetags.app to build one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..hierarchy.export import export_hierarchy

if TYPE_CHECKING:
    from ..core.config import Config
    from ..hierarchy.custom import CustomTypeRegistry, ReloadResult
    from ..hierarchy.graph import TypeGraph
    from ..store.database import Database


class TypeSystem:
    """Type hierarchy with persisted custom types.

    Attributes:
        graph: The process-wide TypeGraph.
        registry: CustomTypeRegistry applying and persisting custom types.

    Example:
        with create_type_system(config) as types:
            types.register_custom_type("type/PostgresEnum.color", "type/PostgresEnum")
            types.is_a("type/PostgresEnum.color", "type/Text")
    """

    def __init__(
        self,
        db: "Database",
        graph: "TypeGraph",
        registry: "CustomTypeRegistry",
        config: "Config",
    ):
        """Initialize TypeSystem with wired components.

        This constructor is for internal use. Use create_type_system() instead.

        Args:
            db: Settings database.
            graph: Type graph.
            registry: Custom type registry bound to ``graph``.
            config: Application configuration.
        """
        self._db = db
        self._config = config
        self.graph = graph
        self.registry = registry

    @property
    def db(self) -> "Database":
        """Get database instance."""
        return self._db

    @property
    def config(self) -> "Config":
        """Get application configuration."""
        return self._config

    def is_a(self, tag: str, ancestor: str) -> bool:
        """Check whether ``tag`` is or derives from ``ancestor``."""
        return self.graph.is_a(tag, ancestor)

    def parents_of(self, tag: str) -> frozenset[str]:
        """Get the direct parents of ``tag``."""
        return self.graph.parents_of(tag)

    def descendants_of(self, root: str | None = None) -> set[str]:
        """Get every tag deriving from ``root`` (default: configured root)."""
        return self.graph.descendants_of(root or self._config.root_tag)

    def register_custom_type(self, child: str, parent: str) -> None:
        """Register and persist a custom type."""
        self.registry.register_custom_type(child, parent)

    def reload_custom_types(self) -> "ReloadResult":
        """Reapply persisted custom types to the graph."""
        return self.registry.reload_custom_types()

    def export_hierarchy(self) -> dict[str, list[str]]:
        """Export tag -> direct parents for every tag under the root."""
        return export_hierarchy(self.graph, self.registry, self._config.root_tag)

    def close(self) -> None:
        """Close the settings database."""
        self._db.close()

    def __enter__(self) -> "TypeSystem":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
