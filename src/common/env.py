"""Environment configuration interface for the book tracker.

This module centralizes all environment variable access in one place.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from common.constants import DATABASE_PATH

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def database_path() -> Path:
        """Get the SQLite database file path.

        Returns:
            Path to SQLite database file, defaults to ./data/tbr.db
        """
        return Path(os.getenv("TBR_DATABASE_PATH", str(DATABASE_PATH)))

    @staticmethod
    def log_level() -> str:
        """Get the logging level for the CLI.

        Returns:
            Upper-cased level name, defaults to 'WARNING'
        """
        return os.getenv("LOG_LEVEL", "WARNING").upper()


# Singleton instance for convenient access
env = Environment()
