"""Tests for book renderings."""

from store.models import Book
from tbr.display import format_html, format_plain


class TestFormatPlain:
    """Tests for plain text rendering."""

    def test_plain(self):
        """Test the plain text form."""
        book = Book("Dune", "Frank Herbert", 1965)
        assert format_plain(book) == "Dune, by Frank Herbert (1965)"

    def test_plain_ignores_kind_and_url(self):
        """Test that plain text never shows kind or url."""
        book = Book("Dune", "Frank Herbert", 1965, kind="audiobook", url="http://x")
        assert format_plain(book) == "Dune, by Frank Herbert (1965)"


class TestFormatHtml:
    """Tests for HTML rendering."""

    def test_emphasis_only(self):
        """Test a book without url or kind."""
        book = Book("Title", "Author", 2000)
        assert format_html(book) == "<em>Title</em>, by Author (2000)"

    def test_default_kind_has_no_suffix(self):
        """Test that the default kind is not shown."""
        book = Book("Title", "Author", 2000, kind="book")
        assert format_html(book) == "<em>Title</em>, by Author (2000)"

    def test_hyperlink(self):
        """Test that a url wraps the title in a link."""
        book = Book("Title", "Author", 2000, url="http://x")
        assert format_html(book) == '<a href="http://x"><em>Title</em></a>, by Author (2000)'

    def test_kind_suffix(self):
        """Test that other kinds are appended in brackets."""
        book = Book("Title", "Author", 2000, kind="audiobook")
        assert format_html(book) == "<em>Title</em>, by Author (2000) [audiobook]"

    def test_kind_suffix_with_hyperlink(self):
        """Test kind suffix together with a link."""
        book = Book("Title", "Author", 2000, kind="audiobook", url="http://x")
        assert format_html(book) == (
            '<a href="http://x"><em>Title</em></a>, by Author (2000) [audiobook]'
        )

    def test_escapes_markup(self):
        """Test that HTML special characters are escaped."""
        book = Book("Dungeons & <Dragons>", 'A "B"', 1974, url="http://x?a=1&b=2")
        assert format_html(book) == (
            '<a href="http://x?a=1&amp;b=2"><em>Dungeons &amp; &lt;Dragons&gt;</em></a>, '
            "by A &quot;B&quot; (1974)"
        )
