"""Errors raised by the book store.

Every error chains the adapter-level DatabaseError that caused it.
"""


class StorageError(Exception):
    """Base exception for book store operations."""

    pass


class StorageUnavailable(StorageError):
    """The store could not be opened or its schema created."""

    pass


class StorageWriteError(StorageError):
    """An insert, replace or delete failed."""

    pass


class AlreadyReadError(StorageWriteError):
    """The book already has a read event."""

    def __init__(self, name: str):
        super().__init__(f"'{name}' is already marked as read")
        self.name = name


class UnknownBookError(StorageWriteError):
    """No book with that title exists."""

    def __init__(self, name: str):
        super().__init__(f"No book titled '{name}'")
        self.name = name


class StorageReadError(StorageError):
    """A query against the store failed."""

    pass
