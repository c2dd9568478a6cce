"""Port interfaces for the bookloan lending system.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - BookRepositoryPort: Persist and retrieve books by title
   - MemberDirectoryPort: Decide whether a member may borrow
   - NotificationPort: Tell members about loans and returns

2. **Driving Ports** (adapters/external systems call into core)
   - CatalogPort: Add, borrow, return and list books
"""

from abc import ABC, abstractmethod

from .models import Book


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class BookRepositoryPort(ABC):
    """Port for persisting and querying books.

    Adapters implementing this port own the persisted Book records.
    The title is the identity key: saving a book whose title already
    exists replaces the stored record for that title.
    """

    @abstractmethod
    def find_by_title(self, title: str) -> Book | None:
        """Retrieve a book by its title.

        Args:
            title: Exact title of the book.

        Returns:
            Book object if found, None otherwise.

        Raises:
            Exception: If the backing store is unavailable.
        """

    @abstractmethod
    def save(self, book: Book) -> None:
        """Persist a new book or the new state of an existing one.

        Args:
            book: Book to persist, keyed by its title.

        Raises:
            Exception: If the backing store is unavailable.
        """

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return every book in the catalog.

        Returns:
            List of books in a stable order (insertion order for the
            bundled adapters). Empty list if the catalog is empty.

        Raises:
            Exception: If the backing store is unavailable.
        """


class MemberDirectoryPort(ABC):
    """Port for checking whether a member is currently allowed to borrow."""

    @abstractmethod
    def is_valid(self, member_id: int) -> bool:
        """Check the validity of a member.

        Args:
            member_id: Integer member identifier.

        Returns:
            True if the member may borrow books, False otherwise.
        """


class NotificationPort(ABC):
    """Port for telling members about loan activity.

    Adapters implementing this port deliver notices via various channels
    (stdout, markdown log, HTTP webhook, etc.).
    """

    @abstractmethod
    def notify_borrow(self, member_id: int, title: str) -> None:
        """Send a notice that a member borrowed a book.

        Args:
            member_id: Member who borrowed the book.
            title: Title of the borrowed book.

        Raises:
            Exception: If the notification channel is unavailable.
        """

    @abstractmethod
    def notify_return(self, member_id: int, title: str) -> None:
        """Send a notice that a member returned a book.

        Args:
            member_id: Member who returned the book.
            title: Title of the returned book.

        Raises:
            Exception: If the notification channel is unavailable.
        """


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class CatalogPort(ABC):
    """Port for catalog operations.

    Driving port: the CLI (or any other boundary) invokes these methods.
    The implementation lives in the core (catalog_service.py).
    """

    @abstractmethod
    def add_book(self, title: str, copies_to_add: int) -> None:
        """Add copies of a book, creating the catalog entry if needed.

        Raises:
            ValueError: If the title is blank or copies_to_add is not positive.
        """

    @abstractmethod
    def borrow_book(self, member_id: int, title: str) -> bool:
        """Lend one copy of a book to a member.

        Returns:
            True if a copy was lent, False if the book is unknown or
            has no copies left.

        Raises:
            InvalidOperationError: If the member is not valid.
        """

    @abstractmethod
    def return_book(self, member_id: int, title: str) -> bool:
        """Take back one copy of a book.

        Returns:
            True if the copy was taken back, False if the book is unknown.
        """

    @abstractmethod
    def get_available_books(self) -> list[Book]:
        """List the books that have at least one copy available."""
