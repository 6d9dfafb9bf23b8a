"""Tests for database connection and management."""

from pathlib import Path

import threading

import pytest

from typetags.core.exceptions import DatabaseError
from typetags.store.database import Database


class TestDatabaseConnection:
    """Tests for database connection lifecycle."""

    def test_connect_creates_database_file(self, test_db_path: Path):
        """Database file should be created on connect."""
        db = Database(test_db_path)
        db.connect()

        assert test_db_path.exists()
        assert db.is_connected
        db.close()

    def test_connect_creates_parent_directories(self, tmp_path: Path):
        """Connect should create parent directories if needed."""
        db_path = tmp_path / "subdir" / "nested" / "test.db"
        db = Database(db_path)
        db.connect()

        assert db_path.exists()
        db.close()

    def test_close_without_connect(self, test_db_path: Path):
        """Close should not raise if not connected."""
        Database(test_db_path).close()

    def test_double_connect(self, test_db_path: Path):
        """Connecting twice should work without error."""
        db = Database(test_db_path)
        db.connect()
        db.connect()
        db.close()

    def test_execute_requires_connection(self, test_db_path: Path):
        """Queries on a closed database should fail."""
        db = Database(test_db_path)
        db.connect()
        db.close()

        with pytest.raises(DatabaseError, match="not connected"):
            db.execute("SELECT 1")

    def test_connect_failure_raises(self, tmp_path: Path):
        """A path that cannot hold a database should raise DatabaseError."""
        blocker = tmp_path / "file"
        blocker.write_text("x")
        db = Database(blocker / "test.db")

        with pytest.raises(DatabaseError, match="Failed to connect"):
            db.connect()
        assert not db.is_connected


class TestDatabaseSchema:
    """Tests for schema initialization."""

    def test_schema_creates_settings_table(self, db: Database):
        """Schema should create the settings table."""
        rows = db.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='settings'"
        )
        assert len(rows) == 1


class TestTransactions:
    """Tests for transaction handling."""

    def test_transaction_rolls_back_on_error(self, db: Database):
        """A failing transaction should leave no partial writes."""
        with pytest.raises(DatabaseError, match="Transaction failed"):
            with db.transaction() as cursor:
                cursor.execute(
                    "INSERT INTO settings (key, value, updated_at) VALUES ('k', '1', 'now')"
                )
                raise ValueError("fail")

        assert db.execute("SELECT * FROM settings") == []

    def test_close_waits_for_open_transaction(self, db: Database):
        """close() from another thread should wait until the transaction ends."""
        closer = threading.Thread(target=db.close)

        with db.transaction() as cursor:
            cursor.execute(
                "INSERT INTO settings (key, value, updated_at) VALUES ('k', '1', 'now')"
            )
            closer.start()
            closer.join(timeout=0.2)
            assert closer.is_alive()
            assert db.is_connected

        closer.join(timeout=5)
        assert not closer.is_alive()
        assert not db.is_connected
