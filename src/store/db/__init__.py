"""Database abstraction layer for the book tracker.

Example:
    >>> from store.db import DatabaseConfig, create_database
    >>>
    >>> config = DatabaseConfig(db_path="data/tbr.db")
    >>> adapter = create_database(config)
    >>> adapter.connect()
    >>> adapter.create_schema()
    >>> adapter.execute(
    ...     "INSERT INTO books (name, author, year) VALUES (?, ?, ?)",
    ...     ("Dune", "Frank Herbert", 1965),
    ... )
    >>> adapter.commit()
    >>> adapter.close()
"""

from .factory import DatabaseConfig, create_database, get_adapter
from .interface import DatabaseAdapter
from .types import (
    ConnectionError,
    DatabaseError,
    IntegrityError,
    Row,
    SchemaError,
)

__all__ = [
    # Factory
    "DatabaseConfig",
    "create_database",
    "get_adapter",
    # Interface
    "DatabaseAdapter",
    # Types and exceptions
    "DatabaseError",
    "ConnectionError",
    "IntegrityError",
    "SchemaError",
    "Row",
]
