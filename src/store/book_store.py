"""Persistence for the to-be-read list.

The store keeps two tables: ``books`` holds every catalogued title and
``read`` holds one row per finished title. The unread set is the books with no
row in ``read``; the read set is ``read`` joined back onto ``books``.

The store never owns a global connection. It is handed an adapter and is used
as a context manager around one unit of work:

    with BookStore(get_adapter()) as store:
        store.initialize()
        store.replace_book("Dune", "Frank Herbert", 1965)
"""

from datetime import datetime

from common.logger import get_logger
from store.db import DatabaseAdapter, DatabaseError, IntegrityError

from .errors import (
    AlreadyReadError,
    StorageReadError,
    StorageUnavailable,
    StorageWriteError,
    UnknownBookError,
)
from .models import Book, ReplaceBook

logger = get_logger(__name__)

UNREAD_QUERY = """
    SELECT books.name, books.author, books.year, books.type, books.hyperlink
    FROM books
    WHERE books.name NOT IN (SELECT read.bookName FROM read)
    ORDER BY books.name
"""

READ_QUERY = """
    SELECT books.name, books.author, books.year, books.type, books.hyperlink
    FROM read
    JOIN books ON read.bookName = books.name
    ORDER BY books.name
"""

# Updates in place rather than REPLACE INTO, which would delete the row and
# cascade to its read event.
REPLACE_BOOK_SQL = """
    INSERT INTO books (name, author, year, type, hyperlink)
    VALUES (?, ?, ?, NULL, NULL)
    ON CONFLICT(name) DO UPDATE SET
        author = excluded.author,
        year = excluded.year,
        type = NULL,
        hyperlink = NULL
"""


class BookStore:
    """Books and read events behind a database adapter."""

    def __init__(self, adapter: DatabaseAdapter):
        self.adapter = adapter

    def __enter__(self) -> "BookStore":
        try:
            self.adapter.connect()
        except DatabaseError as e:
            raise StorageUnavailable(f"Cannot open book store: {e}") from e
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.adapter.close()
        return False

    def initialize(self) -> None:
        """Create the books and read tables if they are missing.

        Raises:
            StorageUnavailable: If the schema cannot be created
        """
        try:
            self.adapter.create_schema()
        except DatabaseError as e:
            raise StorageUnavailable(f"Cannot initialize book store: {e}") from e
        logger.debug(f"Book store ready at {self.adapter!r}")

    def apply(self, op: ReplaceBook) -> None:
        """Apply a full-replace write.

        Raises:
            StorageWriteError: If the write fails
        """
        self._write(REPLACE_BOOK_SQL, op.params())
        logger.debug(f"Stored '{op.name}' by {op.author} ({op.year})")

    def replace_book(self, name: str, author: str, year: int) -> None:
        """Insert a book, or overwrite every column of the one with this name.

        kind and url always end up empty.

        Raises:
            StorageWriteError: If the write fails
        """
        self.apply(ReplaceBook(name=name, author=author, year=year))

    def remove_book(self, name: str) -> None:
        """Delete a book and its read event.

        Removing a title that isn't stored is not an error.

        Raises:
            StorageWriteError: If the delete fails
        """
        cursor = self._write("DELETE FROM books WHERE name = ?", (name,))
        if cursor.rowcount:
            logger.debug(f"Removed '{name}'")
        else:
            logger.debug(f"Nothing to remove for '{name}'")

    def mark_read(self, name: str, when: datetime | None = None) -> None:
        """Record that a book has been read.

        Args:
            name: Title of a stored book
            when: Time of reading, defaults to now

        Raises:
            AlreadyReadError: If the book already has a read event
            UnknownBookError: If no book has this title
            StorageWriteError: If the insert fails for any other reason
        """
        when = when or datetime.now()
        try:
            self._write(
                "INSERT INTO read (bookName, dateRead) VALUES (?, ?)",
                (name, when.isoformat(sep=" ")),
            )
        except StorageWriteError as e:
            if not isinstance(e.__cause__, IntegrityError):
                raise
            if self._has_read_event(name):
                raise AlreadyReadError(name) from e.__cause__
            raise UnknownBookError(name) from e.__cause__

        logger.debug(f"Marked '{name}' as read")

    def list_unread(self) -> list[Book]:
        """Books with no read event, ordered by title.

        Raises:
            StorageReadError: If the query fails
        """
        return self._query(UNREAD_QUERY)

    def list_read(self) -> list[Book]:
        """Books with a read event, ordered by title.

        Raises:
            StorageReadError: If the query fails
        """
        return self._query(READ_QUERY)

    def _write(self, sql: str, params: tuple):
        try:
            cursor = self.adapter.execute(sql, params)
            self.adapter.commit()
            return cursor
        except DatabaseError as e:
            self._rollback_quietly()
            raise StorageWriteError(f"Write failed: {e}") from e

    def _query(self, sql: str) -> list[Book]:
        try:
            rows = self.adapter.fetchall(sql)
        except DatabaseError as e:
            raise StorageReadError(f"Query failed: {e}") from e
        return [Book.from_row(row) for row in rows]

    def _has_read_event(self, name: str) -> bool:
        try:
            found = self.adapter.fetchscalar(
                "SELECT COUNT(*) FROM read WHERE bookName = ?", (name,)
            )
        except DatabaseError as e:
            raise StorageReadError(f"Query failed: {e}") from e
        return bool(found)

    def _rollback_quietly(self) -> None:
        try:
            self.adapter.rollback()
        except DatabaseError as e:
            logger.warning(f"Rollback failed: {e}")
