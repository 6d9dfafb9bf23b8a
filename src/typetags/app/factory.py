"""Composition root for typetags.

Example:
    from typetags.app import create_type_system
    from typetags.core.config import Config

    with create_type_system(Config.from_env()) as types:
        types.is_a("type/Integer", "type/Number")
"""

from __future__ import annotations

from loguru import logger

from ..core.config import Config
from ..core.exceptions import DatabaseError
from ..hierarchy.builtin import create_default_graph
from ..hierarchy.custom import CustomTypeRegistry
from ..store.database import Database
from ..store.settings import JsonSetting, SettingsRepository
from .application import TypeSystem


def create_type_system(config: Config, *, connect: bool = True) -> TypeSystem:
    """Create a TypeSystem with all components wired together.

    The graph gets the built-in hierarchy, then persisted custom types are
    reconciled once. A database that fails to open leaves the system usable
    with built-ins only; registration will then report the store as
    unavailable.

    Args:
        config: Application configuration.
        connect: Open the settings database immediately.

    Returns:
        Configured TypeSystem.
    """
    db = Database(config.db_path)
    if connect:
        try:
            db.connect()
        except DatabaseError as e:
            logger.warning(f"Settings database unavailable: {e}")

    graph = create_default_graph()
    setting = JsonSetting(SettingsRepository(db), config.settings_key)
    registry = CustomTypeRegistry(graph, setting)
    result = registry.reload_custom_types()

    logger.info(
        f"Type system ready: {len(graph)} tags, "
        f"{result.applied} custom types loaded"
    )
    return TypeSystem(db=db, graph=graph, registry=registry, config=config)
