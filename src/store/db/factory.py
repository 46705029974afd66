"""Database factory for creating database adapters.

This module provides a configuration class and factory functions that turn a
database location into a ready-to-connect adapter.
"""

from dataclasses import dataclass
from pathlib import Path

from .interface import DatabaseAdapter
from .sqlite_adapter import SQLiteAdapter


@dataclass
class DatabaseConfig:
    """Database configuration container.

    Attributes:
        db_path: Path to the SQLite database file
    """

    db_path: Path | str

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.db_path is None or str(self.db_path) == "":
            raise ValueError("db_path is required for SQLite")
        if isinstance(self.db_path, str):
            self.db_path = Path(self.db_path)


def create_database(config: DatabaseConfig) -> DatabaseAdapter:
    """Create a database adapter for the given configuration.

    Example:
        >>> config = DatabaseConfig(db_path=Path("./data/tbr.db"))
        >>> adapter = create_database(config)
    """
    return SQLiteAdapter(config.db_path)


def get_adapter(db_path: str | Path | None = None) -> DatabaseAdapter:
    """Get database adapter, falling back to the environment configuration.

    Args:
        db_path: Explicit database location; TBR_DATABASE_PATH is used if None

    Example:
        >>> adapter = get_adapter()
        >>> adapter.connect()
    """
    from common.env import env

    if db_path is None:
        db_path = env.database_path()

    return create_database(DatabaseConfig(db_path=db_path))
