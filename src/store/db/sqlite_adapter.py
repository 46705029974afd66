"""SQLite database adapter implementation.

This adapter wraps sqlite3 to provide the DatabaseAdapter interface the book
store is written against.
"""

import sqlite3
from pathlib import Path
from typing import Any

from .interface import DatabaseAdapter
from .types import ConnectionError as DBConnectionError
from .types import DatabaseError, Row, SchemaError
from .types import IntegrityError as DBIntegrityError


class SQLiteAdapter(DatabaseAdapter):
    """SQLite database adapter.

    Foreign keys are switched on for every connection, so ``read`` rows must
    point at an existing book and go away with it.
    """

    def __init__(self, db_path: str | Path):
        """Initialize SQLite adapter.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self._conn: sqlite3.Connection | None = None
        self._schema_file = Path(__file__).parent / "schema_sqlite.sql"

    def connect(self) -> None:
        """Establish database connection."""
        try:
            # Create parent directory if it doesn't exist
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

            self._conn = sqlite3.connect(str(self.db_path))
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA foreign_keys = ON")
        except (sqlite3.Error, OSError) as e:
            if self._conn:
                self._conn.close()
                self._conn = None
            raise DBConnectionError(f"Failed to connect to SQLite database: {e}") from e

    def close(self) -> None:
        """Close database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def commit(self) -> None:
        """Commit current transaction."""
        if not self._conn:
            raise DatabaseError("No active connection")
        try:
            self._conn.commit()
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to commit transaction: {e}") from e

    def rollback(self) -> None:
        """Rollback current transaction."""
        if not self._conn:
            raise DatabaseError("No active connection")
        try:
            self._conn.rollback()
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to rollback transaction: {e}") from e

    def create_schema(self) -> None:
        """Create all tables from the bundled SQL file."""
        if not self._conn:
            raise DatabaseError("No active connection")

        if not self._schema_file.exists():
            raise SchemaError(f"Schema file not found: {self._schema_file}")

        try:
            schema_sql = self._schema_file.read_text()
            self._conn.executescript(schema_sql)
            self._conn.commit()
        except sqlite3.Error as e:
            raise SchemaError(f"Failed to create schema: {e}") from e
        except OSError as e:
            raise SchemaError(f"Failed to read schema file: {e}") from e

    def get_tables(self) -> list[str]:
        """Get list of all tables in database."""
        if not self._conn:
            raise DatabaseError("No active connection")

        try:
            cursor = self._conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
            )
            return [row[0] for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to get table list: {e}") from e

    def execute(self, query: str, params: tuple | None = None) -> Any:
        """Execute a query and return cursor."""
        if not self._conn:
            raise DatabaseError("No active connection")

        try:
            cursor = self._conn.cursor()
            if params:
                cursor.execute(query, params)
            else:
                cursor.execute(query)
            return cursor
        except sqlite3.IntegrityError as e:
            raise DBIntegrityError(f"Integrity constraint violation: {e}") from e
        except sqlite3.Error as e:
            raise DatabaseError(f"Query execution failed: {e}") from e
        except (OverflowError, UnicodeEncodeError) as e:
            # Values sqlite3 cannot bind: integers past 64 bits, lone surrogates
            raise DatabaseError(f"Cannot bind query parameters: {e}") from e

    def fetchone(self, query: str, params: tuple | None = None) -> Row | None:
        """Execute query and fetch one result as dictionary."""
        cursor = self.execute(query, params)
        row = cursor.fetchone()
        if row is None:
            return None
        return dict(row)

    def fetchall(self, query: str, params: tuple | None = None) -> list[Row]:
        """Execute query and fetch all results as list of dictionaries."""
        cursor = self.execute(query, params)
        return [dict(row) for row in cursor.fetchall()]

    def fetchscalar(self, query: str, params: tuple | None = None) -> Any:
        """Execute query and return first column of first row."""
        result = self.fetchone(query, params)
        if result is None:
            return None
        return next(iter(result.values()))

    def __repr__(self) -> str:
        """String representation."""
        status = "connected" if self._conn else "disconnected"
        return f"SQLiteAdapter(db_path={self.db_path}, status={status})"
