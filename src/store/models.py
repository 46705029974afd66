"""Data models for books and the writes applied to them."""

from dataclasses import dataclass

from store.db import Row


@dataclass(frozen=True)
class Book:
    """A catalogued title.

    Attributes:
        name: Title, unique within the store
        author: Author as typed by the user
        year: Year of release
        kind: Optional format such as 'audiobook'; None means a plain book
        url: Optional link used by the HTML rendering
    """

    name: str
    author: str
    year: int
    kind: str | None = None
    url: str | None = None

    @classmethod
    def from_row(cls, row: Row) -> "Book":
        """Build a Book from a ``books`` table row."""
        return cls(
            name=row["name"],
            author=row["author"],
            year=row["year"],
            kind=row.get("type"),
            url=row.get("hyperlink"),
        )


@dataclass(frozen=True)
class ReplaceBook:
    """Write that fully replaces the row stored under ``name``.

    kind and url are not carried, so applying it always clears them. A
    partial update that keeps them would need a separate operation.
    """

    name: str
    author: str
    year: int

    def params(self) -> tuple:
        return (self.name, self.author, self.year)
