"""Type graph for multi-parent "is-a" relationships.

Holds the derivation graph of type tags, where each tag may have any number
of direct parents, and answers reachability queries over it.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Iterable, Iterator

from loguru import logger

from ..core.exceptions import InvalidHierarchyError


class TypeGraph:
    """Directed acyclic graph of type tags.

    Edges point from a child tag to one of its direct parents. Edges are only
    ever added, never removed, so every query answer stays valid until the
    next ``add_edge``.

    Example:
        graph = TypeGraph()
        graph.add_edge("type/Number", "type/*")
        graph.add_edge("type/Integer", "type/Number")

        graph.is_a("type/Integer", "type/*")
        # True
        graph.parents_of("type/Integer")
        # frozenset({"type/Number"})
    """

    def __init__(self, edges: Iterable[tuple[str, str]] = ()):
        """Initialize the graph.

        Args:
            edges: Optional (child, parent) pairs to add immediately.
        """
        # dicts with None values keep parents/children in insertion order
        self._parents: dict[str, dict[str, None]] = {}
        self._children: dict[str, dict[str, None]] = {}
        self._edge_count = 0
        self._lock = threading.RLock()

        for child, parent in edges:
            self.add_edge(child, parent)

    def add_edge(self, child: str, parent: str) -> bool:
        """Record ``parent`` as a direct parent of ``child``.

        Args:
            child: The more specific tag.
            parent: The more general tag.

        Returns:
            True if the edge was new, False if it was already present.

        Raises:
            InvalidHierarchyError: If a tag name is empty or not a string,
                or the edge would make a tag its own ancestor.
        """
        _validate_tag(child, child, parent)
        _validate_tag(parent, child, parent)

        with self._lock:
            if parent in self._parents.get(child, ()):
                return False
            if child == parent:
                raise InvalidHierarchyError(child, parent, "a tag cannot derive from itself")
            if self._reaches(parent, child):
                raise InvalidHierarchyError(
                    child, parent, f"{parent!r} already derives from {child!r}"
                )

            self._parents.setdefault(child, {})[parent] = None
            self._children.setdefault(parent, {})[child] = None
            self._parents.setdefault(parent, {})
            self._children.setdefault(child, {})
            self._edge_count += 1

        logger.debug(f"Added edge: {child!r} -> {parent!r}")
        return True

    def is_a(self, tag: str, ancestor: str) -> bool:
        """Check whether ``tag`` is ``ancestor`` or derives from it.

        Args:
            tag: Tag to test.
            ancestor: Candidate ancestor.

        Returns:
            True if equal or reachable through parent edges.
        """
        if tag == ancestor:
            return True
        with self._lock:
            return self._reaches(tag, ancestor)

    def parents_of(self, tag: str) -> frozenset[str]:
        """Get the direct parents of a tag (empty for unknown tags)."""
        with self._lock:
            return frozenset(self._parents.get(tag, ()))

    def ordered_parents_of(self, tag: str) -> tuple[str, ...]:
        """Get the direct parents of a tag in the order they were added."""
        with self._lock:
            return tuple(self._parents.get(tag, ()))

    def children_of(self, tag: str) -> frozenset[str]:
        """Get the direct children of a tag (empty for unknown tags)."""
        with self._lock:
            return frozenset(self._children.get(tag, ()))

    def ancestors_of(self, tag: str) -> set[str]:
        """Get every tag reachable upward from ``tag``, excluding itself."""
        with self._lock:
            return self._walk(tag, self._parents)

    def descendants_of(self, root: str) -> set[str]:
        """Get every tag that derives from ``root``, excluding ``root``."""
        with self._lock:
            return self._walk(root, self._children)

    def all_known_tags(self) -> set[str]:
        """Get every tag that appeared as a child or parent of an edge."""
        with self._lock:
            return set(self._parents)

    def has_tag(self, tag: str) -> bool:
        """Check if a tag appears in any recorded edge."""
        with self._lock:
            return tag in self._parents

    @property
    def edge_count(self) -> int:
        """Number of distinct (child, parent) edges."""
        return self._edge_count

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and self.has_tag(tag)

    def __len__(self) -> int:
        with self._lock:
            return len(self._parents)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.all_known_tags()))

    def _reaches(self, start: str, target: str) -> bool:
        """Breadth-first search upward from ``start``; caller holds the lock."""
        seen = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for parent in self._parents.get(current, ()):
                if parent == target:
                    return True
                if parent not in seen:
                    seen.add(parent)
                    queue.append(parent)
        return False

    @staticmethod
    def _walk(start: str, adjacency: dict[str, dict[str, None]]) -> set[str]:
        seen: set[str] = set()
        stack = list(adjacency.get(start, ()))
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            stack.extend(adjacency.get(current, ()))
        return seen


def _validate_tag(tag: object, child: object, parent: object) -> None:
    if not isinstance(tag, str) or not tag:
        raise InvalidHierarchyError(child, parent, "tag names must be non-empty strings")
