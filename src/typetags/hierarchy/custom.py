"""Custom types added to the hierarchy at runtime.

Drivers and other code can define new types while running, for example an
enum named ``color`` registered as ``type/PostgresEnum.color`` deriving from
``type/PostgresEnum``. Each registration is recorded in a persisted setting
so it can be reapplied after a restart with ``reload_custom_types``.

Call ``reload_custom_types`` before ``is_a`` checks or before exporting the
hierarchy, so types registered by an earlier run or another process are in
place.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

from ..core.exceptions import InvalidHierarchyError, PersistenceUnavailableError

if TYPE_CHECKING:
    from ..app.protocols import SettingProtocol
    from .graph import TypeGraph


@dataclass
class ReloadResult:
    """Outcome of a reconciliation pass.

    Attributes:
        applied: Records whose edge was newly added to the graph.
        skipped: Malformed records that could not be applied, with the reason.
        store_available: False if the settings store could not be read and
            the pass was treated as having no records.
    """

    applied: int = 0
    skipped: list[tuple[object, object, str]] = field(default_factory=list)
    store_available: bool = True


class CustomTypeRegistry:
    """Runtime overlay of custom (child, parent) edges.

    Example:
        registry = CustomTypeRegistry(graph, setting)
        registry.register_custom_type("type/PostgresEnum.color", "type/PostgresEnum")

        # after a restart, with a fresh graph and the same setting
        CustomTypeRegistry(fresh_graph, setting).reload_custom_types()
    """

    def __init__(self, graph: "TypeGraph", setting: "SettingProtocol"):
        """Initialize the registry.

        Args:
            graph: Graph that custom edges are applied to.
            setting: Persisted record of custom child -> parent mappings.
        """
        self.graph = graph
        self.setting = setting
        self._write_lock = threading.Lock()

    def register_custom_type(self, child: str, parent: str) -> None:
        """Add ``child`` as a derivative of ``parent`` and persist it.

        The persisted record holds one parent per child, so registering a
        child again with another parent replaces the stored parent while the
        graph keeps both edges.

        Args:
            child: New type tag.
            parent: Existing type tag it derives from.

        Raises:
            InvalidHierarchyError: If the names are empty or the edge would
                form a cycle. Nothing is persisted in that case.
            PersistenceUnavailableError: If the settings store is unavailable.
                The edge is still applied to the graph.
        """
        for tag in (child, parent):
            if not isinstance(tag, str) or not tag:
                raise InvalidHierarchyError(child, parent, "tag names must be non-empty strings")
        with self._write_lock:
            if child == parent or self.graph.is_a(parent, child):
                raise InvalidHierarchyError(child, parent, "edge would create a cycle")

            # the edge is applied even when persisting fails; it just won't
            # survive a restart
            try:
                records = dict(self.setting.get())
                previous = records.get(child)
                records[child] = parent
                self.setting.set(records)
            finally:
                self.graph.add_edge(child, parent)

        if previous is not None and previous != parent:
            logger.info(
                f"Custom type re-registered: {child!r} -> {parent!r} "
                f"(persisted parent was {previous!r})"
            )
        else:
            logger.info(f"Custom type registered: {child!r} -> {parent!r}")

    def reload_custom_types(self) -> ReloadResult:
        """Reapply every persisted custom type to the graph.

        Safe to call any number of times. Records that cannot be applied are
        logged and skipped without stopping the rest.

        Returns:
            ReloadResult describing what was applied.
        """
        records = self._read_persisted_records()
        if records is None:
            return ReloadResult(store_available=False)

        result = ReloadResult()
        for child, parent in records.items():
            try:
                if self.graph.add_edge(child, parent):
                    result.applied += 1
            except InvalidHierarchyError as e:
                logger.warning(f"Skipping custom type record: {e}")
                result.skipped.append((child, parent, e.reason))

        logger.debug(
            f"Reloaded custom types: {len(records)} records, "
            f"{result.applied} applied, {len(result.skipped)} skipped"
        )
        return result

    def _read_persisted_records(self) -> dict[str, str] | None:
        """Read the persisted records, degrading to None if the store is down.

        The store may not be initialized yet (e.g. at start-up); reads treat
        that as "no custom types" instead of failing. Writes do not.
        """
        try:
            return self.setting.get()
        except PersistenceUnavailableError as e:
            logger.warning(f"Custom types unavailable, skipping reload: {e}")
            return None
