"""Shared types and exceptions for the database adapter layer."""

from typing import Any


class DatabaseError(Exception):
    """Base exception for database operations."""

    pass


class ConnectionError(DatabaseError):
    """Error opening the database."""

    pass


class IntegrityError(DatabaseError):
    """Database integrity constraint violation."""

    pass


class SchemaError(DatabaseError):
    """Error creating the database schema."""

    pass


# Type alias for database rows
Row = dict[str, Any]
