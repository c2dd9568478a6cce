"""Fake BookRepositoryPort implementation for testing."""

from bookloan.core.models import Book
from bookloan.core.ports import BookRepositoryPort


class FakeBookRepositoryPort(BookRepositoryPort):
    """In-memory book repository for testing.

    Stores the exact Book handles it is given and records every call
    for test assertions.
    """

    def __init__(self, books: list[Book] | None = None):
        """Initialize with an optional seeded catalog."""
        self.books: dict[str, Book] = {book.title: book for book in books or []}
        self.find_by_title_calls: list[str] = []
        self.saved_books: list[Book] = []
        self.list_all_call_count = 0

    def find_by_title(self, title: str) -> Book | None:
        """Get a book by title.

        Returns the stored handle if found, None otherwise.
        """
        self.find_by_title_calls.append(title)
        return self.books.get(title)

    def save(self, book: Book) -> None:
        """Save a book and record the call."""
        self.books[book.title] = book
        self.saved_books.append(book)

    def list_all(self) -> list[Book]:
        """Return all stored books in insertion order."""
        self.list_all_call_count += 1
        return list(self.books.values())

    @property
    def save_call_count(self) -> int:
        """Number of times save() was called."""
        return len(self.saved_books)

    def reset(self) -> None:
        """Reset all stored books and recorded calls."""
        self.books.clear()
        self.find_by_title_calls.clear()
        self.saved_books.clear()
        self.list_all_call_count = 0
