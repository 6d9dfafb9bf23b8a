"""SQLite database connection manager for typetags."""

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from loguru import logger

from ..core.exceptions import DatabaseError
from .schema import get_schema


class Database:
    """SQLite database connection manager.

    The connection may be shared between threads; every statement runs
    under an internal lock.
    """

    def __init__(self, path: Path):
        """Initialize database with path.

        Args:
            path: Path to the SQLite database file.
        """
        self.path = path
        self._connection: sqlite3.Connection | None = None
        self._lock = threading.RLock()

    @property
    def is_connected(self) -> bool:
        """Whether a connection is open."""
        return self._connection is not None

    def connect(self) -> None:
        """Open the database connection and initialize the schema."""
        if self._connection:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = sqlite3.connect(str(self.path), check_same_thread=False)
            self._connection.row_factory = sqlite3.Row
            self._init_schema()
        except Exception as e:
            self._connection = None
            raise DatabaseError(f"Failed to connect to database: {e}") from e
        logger.debug(f"Connected to settings database: {self.path}")

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self._connection:
                try:
                    self._connection.close()
                except Exception as e:
                    raise DatabaseError(f"Failed to close database: {e}") from e
                finally:
                    self._connection = None

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Context manager for database transactions.

        Yields:
            A cursor for executing SQL statements.

        Raises:
            DatabaseError: If connection is not available or transaction fails.
        """
        with self._lock:
            if not self._connection:
                raise DatabaseError("Database not connected")

            cursor = self._connection.cursor()
            try:
                yield cursor
                self._connection.commit()
            except Exception as e:
                self._connection.rollback()
                raise DatabaseError(f"Transaction failed: {e}") from e
            finally:
                cursor.close()

    def execute(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        """Execute a SQL query and fetch all rows.

        Args:
            sql: SQL statement to execute.
            params: Parameters for the SQL statement.

        Returns:
            Rows returned by the statement.

        Raises:
            DatabaseError: If connection is not available or query fails.
        """
        with self._lock:
            if not self._connection:
                raise DatabaseError("Database not connected")

            try:
                return self._connection.execute(sql, params).fetchall()
            except Exception as e:
                raise DatabaseError(f"Query execution failed: {e}") from e

    def executescript(self, sql: str) -> None:
        """Execute multiple SQL statements.

        Args:
            sql: SQL script with multiple statements.

        Raises:
            DatabaseError: If connection is not available or script fails.
        """
        with self._lock:
            if not self._connection:
                raise DatabaseError("Database not connected")

            try:
                self._connection.executescript(sql)
            except Exception as e:
                raise DatabaseError(f"Script execution failed: {e}") from e

    def _init_schema(self) -> None:
        """Initialize database schema."""
        self.executescript(get_schema())
