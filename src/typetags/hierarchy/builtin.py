"""Built-in type hierarchy.

Types derive from one or more parent types, which in turn derive from their
own parents, all the way up to ``type/*``. New types can be added as
derivatives of an existing type and every consumer keeps treating them as
that type until told otherwise.
"""

from __future__ import annotations

from loguru import logger

from ..core.config import DEFAULT_ROOT_TAG
from .graph import TypeGraph

ROOT_TAG = DEFAULT_ROOT_TAG

BUILTIN_EDGES: tuple[tuple[str, str], ...] = (
    # Collections
    ("type/Collection", "type/*"),
    ("type/Dictionary", "type/Collection"),
    ("type/Array", "type/Collection"),
    # Numeric
    ("type/Number", "type/*"),
    ("type/Integer", "type/Number"),
    ("type/BigInteger", "type/Integer"),
    ("type/ZipCode", "type/Integer"),
    ("type/Float", "type/Number"),
    ("type/Decimal", "type/Float"),
    ("type/Coordinate", "type/Float"),
    ("type/Latitude", "type/Coordinate"),
    ("type/Longitude", "type/Coordinate"),
    # Text
    ("type/Text", "type/*"),
    ("type/UUID", "type/Text"),
    ("type/URL", "type/Text"),
    ("type/AvatarURL", "type/URL"),
    ("type/ImageURL", "type/URL"),
    ("type/Email", "type/Text"),
    ("type/City", "type/Text"),
    ("type/State", "type/Text"),
    ("type/Country", "type/Text"),
    ("type/Name", "type/Text"),
    ("type/Description", "type/Text"),
    ("type/SerializedJSON", "type/Text"),
    ("type/SerializedJSON", "type/Collection"),
    ("type/PostgresEnum", "type/Text"),
    # Date and time
    ("type/DateTime", "type/*"),
    ("type/Time", "type/DateTime"),
    ("type/Date", "type/DateTime"),
    ("type/UNIXTimestamp", "type/DateTime"),
    ("type/UNIXTimestamp", "type/Integer"),
    ("type/UNIXTimestampSeconds", "type/UNIXTimestamp"),
    ("type/UNIXTimestampMilliseconds", "type/UNIXTimestamp"),
    # Other
    ("type/Boolean", "type/*"),
    ("type/Enum", "type/*"),
    # Displayed as text, but no starts-with/contains filtering
    ("type/TextLike", "type/*"),
    ("type/IPAddress", "type/TextLike"),
    ("type/MongoBSONID", "type/TextLike"),
    # "Virtual" address types
    ("type/Address", "type/*"),
    ("type/City", "type/Address"),
    ("type/State", "type/Address"),
    ("type/Country", "type/Address"),
    ("type/ZipCode", "type/Address"),
    # Legacy special types
    ("type/Special", "type/*"),
    ("type/FK", "type/Special"),
    ("type/PK", "type/Special"),
    ("type/Category", "type/Special"),
    ("type/City", "type/Category"),
    ("type/State", "type/Category"),
    ("type/Country", "type/Category"),
    ("type/Name", "type/Category"),
)


def load_builtin_hierarchy(graph: TypeGraph) -> TypeGraph:
    """Add every built-in edge to ``graph``.

    Args:
        graph: Graph to populate. Existing edges are kept.

    Returns:
        The same graph, for chaining.
    """
    added = sum(graph.add_edge(child, parent) for child, parent in BUILTIN_EDGES)
    logger.debug(f"Loaded built-in hierarchy: {added} new edges")
    return graph


def create_default_graph() -> TypeGraph:
    """Create a new graph holding only the built-in hierarchy."""
    return load_builtin_hierarchy(TypeGraph())
