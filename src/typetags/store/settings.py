"""Persisted key-value settings for typetags."""

import json
from datetime import datetime, timezone
from typing import Any

from loguru import logger

from ..core.exceptions import DatabaseError, PersistenceUnavailableError, SettingValueError
from .database import Database


class SettingsRepository:
    """Repository for JSON-valued settings."""

    def __init__(self, db: Database):
        """Initialize with database connection.

        Args:
            db: Database instance to use for operations.
        """
        self.db = db

    def get(self, key: str) -> Any | None:
        """Get a setting value.

        Args:
            key: Setting key.

        Returns:
            Decoded JSON value, or None if the key is not set.

        Raises:
            DatabaseError: If the database is unavailable or the query fails.
            SettingValueError: If the stored value is not valid JSON.
        """
        rows = self.db.execute("SELECT value FROM settings WHERE key = ?", (key,))
        if not rows:
            return None
        try:
            return json.loads(rows[0]["value"])
        except json.JSONDecodeError as e:
            raise SettingValueError(f"Setting {key!r} is not valid JSON: {e}") from e

    def set(self, key: str, value: Any) -> None:
        """Store a setting value as JSON, replacing any previous value.

        Args:
            key: Setting key.
            value: JSON-serializable value.

        Raises:
            DatabaseError: If the database is unavailable or the write fails.
        """
        now = datetime.now(timezone.utc).isoformat()
        with self.db.transaction() as cursor:
            cursor.execute(
                """
                INSERT INTO settings (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, json.dumps(value), now),
            )
        logger.debug(f"Setting stored: key={key!r}")


class JsonSetting:
    """A single named setting holding a string -> string mapping.

    Any database failure is reported as PersistenceUnavailableError so
    callers can tell an unreachable store from a bad value.
    """

    def __init__(self, repo: SettingsRepository, key: str):
        """Initialize the setting.

        Args:
            repo: Settings repository backing this setting.
            key: Key the mapping is stored under.
        """
        self.repo = repo
        self.key = key

    def get(self) -> dict[str, str]:
        """Get the stored mapping ({} if never set).

        Individual entries are returned as stored; callers validate each
        pair so one bad entry does not hide the rest.

        Raises:
            PersistenceUnavailableError: If the store cannot be read.
            SettingValueError: If the stored value is not a mapping.
        """
        try:
            value = self.repo.get(self.key)
        except DatabaseError as e:
            raise PersistenceUnavailableError(f"Cannot read setting {self.key!r}: {e}") from e

        if value is None:
            return {}
        if not isinstance(value, dict):
            raise SettingValueError(f"Setting {self.key!r} must be a mapping")
        return value

    def set(self, value: dict[str, str]) -> None:
        """Replace the stored mapping.

        Raises:
            PersistenceUnavailableError: If the store cannot be written.
        """
        try:
            self.repo.set(self.key, dict(value))
        except DatabaseError as e:
            raise PersistenceUnavailableError(f"Cannot write setting {self.key!r}: {e}") from e
