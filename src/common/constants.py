"""Shared constants for the book tracker.

For environment-based configuration (database location, log level), use the
env module:
    from common.env import env
    db_path = env.database_path()
"""

from pathlib import Path

# Data directories
DATA_DIR = Path("./data")
DATABASE_PATH = DATA_DIR / "tbr.db"

# Kind assumed for plain books; it is never shown as a suffix
DEFAULT_KIND = "book"
