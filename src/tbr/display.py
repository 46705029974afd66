"""Text renderings of a book for listings."""

from html import escape

from common.constants import DEFAULT_KIND
from store.models import Book


def format_plain(book: Book) -> str:
    """Render a book as ``Title, by Author (Year)``."""
    return f"{book.name}, by {book.author} ({book.year})"


def format_html(book: Book) -> str:
    """Render a book as an HTML fragment.

    The title is emphasised, and linked when the book has a url. Kinds other
    than the default one are appended in brackets.

    Example:
        >>> format_html(Book("Dune", "Frank Herbert", 1965, kind="audiobook"))
        '<em>Dune</em>, by Frank Herbert (1965) [audiobook]'
    """
    title = f"<em>{escape(book.name)}</em>"
    if book.url:
        title = f'<a href="{escape(book.url)}">{title}</a>'

    output = f"{title}, by {escape(book.author)} ({book.year})"

    if book.kind and book.kind != DEFAULT_KIND:
        output = f"{output} [{escape(book.kind)}]"

    return output
