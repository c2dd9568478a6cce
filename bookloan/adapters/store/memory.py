"""In-memory book repository adapter.

Implements BookRepositoryPort with a dict keyed by title. Records live
for the lifetime of the process; useful for demos and the CLI when no
database is wanted.
"""

import logging

from bookloan.core.models import Book
from bookloan.core.ports import BookRepositoryPort

logger = logging.getLogger(__name__)


class InMemoryBookRepository(BookRepositoryPort):
    """Stores Book handles in insertion order.

    The stored object is the one handed to save(), so callers that mutate
    a book they found see the same instance on the next lookup.
    """

    def __init__(self, books: list[Book] | None = None):
        """Initialize the repository.

        Args:
            books: Optional initial catalog, stored in the given order.
        """
        self._books: dict[str, Book] = {}
        for book in books or []:
            self._books[book.title] = book

    def find_by_title(self, title: str) -> Book | None:
        """Look up a book by its title."""
        return self._books.get(title)

    def save(self, book: Book) -> None:
        """Store a book, replacing any record with the same title."""
        self._books[book.title] = book
        logger.debug(
            f"Saved '{book.title}'",
            extra={"title": book.title, "copies": book.copies},
        )

    def list_all(self) -> list[Book]:
        """Return every stored book in insertion order."""
        return list(self._books.values())
