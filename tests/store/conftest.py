"""Shared fixtures for store tests."""

import pytest

from store.book_store import BookStore
from store.db import DatabaseConfig, create_database


@pytest.fixture
def book_store(tmp_path):
    """An initialized book store backed by a temporary SQLite file."""
    adapter = create_database(DatabaseConfig(db_path=tmp_path / "tbr.db"))
    with BookStore(adapter) as store:
        store.initialize()
        yield store
