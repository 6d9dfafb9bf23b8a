"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from typetags.core.config import Config
from typetags.hierarchy import CustomTypeRegistry, TypeGraph, create_default_graph
from typetags.store.database import Database
from typetags.store.settings import JsonSetting, SettingsRepository

from tests.fakes import InMemorySetting


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path for tests."""
    return tmp_path / "test.db"


@pytest.fixture
def config(test_db_path: Path) -> Config:
    """Provide a Config pointing at the temporary database."""
    cfg = Config()
    cfg.db_path = test_db_path
    return cfg


@pytest.fixture
def db(test_db_path: Path) -> Database:
    """Provide a connected database instance."""
    database = Database(test_db_path)
    database.connect()
    yield database
    database.close()


@pytest.fixture
def settings_repo(db: Database) -> SettingsRepository:
    """Provide a SettingsRepository instance."""
    return SettingsRepository(db)


@pytest.fixture
def json_setting(settings_repo: SettingsRepository) -> JsonSetting:
    """Provide the custom-types JsonSetting."""
    return JsonSetting(settings_repo, "custom-types")


@pytest.fixture
def graph() -> TypeGraph:
    """Provide a graph holding the built-in hierarchy."""
    return create_default_graph()


@pytest.fixture
def setting() -> InMemorySetting:
    """Provide an in-memory setting."""
    return InMemorySetting()


@pytest.fixture
def registry(graph: TypeGraph, setting: InMemorySetting) -> CustomTypeRegistry:
    """Provide a registry over the built-in graph and in-memory setting."""
    return CustomTypeRegistry(graph, setting)


@pytest.fixture
def log_messages():
    """Capture loguru messages at WARNING and above."""
    from loguru import logger

    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
