"""Abstract database adapter interface.

The book store only talks to this interface, so the storage engine behind it
can change without touching the queries that build on it.
"""

from abc import ABC, abstractmethod
from typing import Any

from .types import Row


class DatabaseAdapter(ABC):
    """Abstract database adapter interface."""

    @abstractmethod
    def connect(self) -> None:
        """Establish database connection.

        Raises:
            ConnectionError: If connection fails
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close database connection."""
        pass

    @abstractmethod
    def commit(self) -> None:
        """Commit current transaction.

        Raises:
            DatabaseError: If commit fails
        """
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Rollback current transaction.

        Raises:
            DatabaseError: If rollback fails
        """
        pass

    @abstractmethod
    def create_schema(self) -> None:
        """Create all tables if they don't already exist.

        Raises:
            SchemaError: If schema creation fails
        """
        pass

    @abstractmethod
    def get_tables(self) -> list[str]:
        """Get list of all tables in database.

        Raises:
            DatabaseError: If query fails
        """
        pass

    @abstractmethod
    def execute(self, query: str, params: tuple | None = None) -> Any:
        """Execute a query and return cursor.

        Raises:
            DatabaseError: If execution fails
            IntegrityError: If integrity constraint violated
        """
        pass

    @abstractmethod
    def fetchone(self, query: str, params: tuple | None = None) -> Row | None:
        """Execute query and fetch one result as dictionary."""
        pass

    @abstractmethod
    def fetchall(self, query: str, params: tuple | None = None) -> list[Row]:
        """Execute query and fetch all results as list of dictionaries."""
        pass

    @abstractmethod
    def fetchscalar(self, query: str, params: tuple | None = None) -> Any:
        """Execute query and return first column of first row.

        Returns:
            First column of first row, or None if no results
        """
        pass
