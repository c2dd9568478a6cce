"""Catalog service: implements CatalogPort for the lending desk.

This is the core service that orchestrates add, borrow, return and list
operations against the book repository, the member directory and the
notification channel. Absent books and exhausted copies are ordinary
outcomes reported as False; only bad input and invalid members raise.
"""

import logging

from .errors import InvalidOperationError
from .models import Book
from .ports import (
    BookRepositoryPort,
    CatalogPort,
    MemberDirectoryPort,
    NotificationPort,
)

logger = logging.getLogger(__name__)


class BookCatalogService(CatalogPort):
    """Core implementation of CatalogPort.

    Every successful state change is persisted with exactly one save call
    on the same Book handle the repository returned.
    """

    def __init__(
        self,
        repository: BookRepositoryPort,
        members: MemberDirectoryPort,
        notification: NotificationPort,
    ):
        """Initialize the catalog service.

        Args:
            repository: BookRepositoryPort implementation for persistence.
            members: MemberDirectoryPort implementation for member checks.
            notification: NotificationPort implementation for loan notices.
        """
        self.repository = repository
        self.members = members
        self.notification = notification

    def add_book(self, title: str | None, copies_to_add: int) -> None:
        """Add copies of a book, creating the catalog entry if needed.

        Args:
            title: Title of the book. Must not be blank.
            copies_to_add: Number of copies to add. Must be positive.

        Raises:
            ValueError: If the title is blank or copies_to_add is not positive.
        """
        if title is None or not title.strip():
            raise ValueError("Title must be a non-empty string")
        if copies_to_add <= 0:
            raise ValueError(
                f"Copies to add must be positive, got {copies_to_add}"
            )

        book = self.repository.find_by_title(title)
        if book is None:
            book = Book(title=title, copies=copies_to_add)
        else:
            book.add_copies(copies_to_add)

        self.repository.save(book)

        logger.info(
            f"Added {copies_to_add} copies of '{title}'",
            extra={"title": title, "copies": book.copies},
        )

    def borrow_book(self, member_id: int, title: str) -> bool:
        """Lend one copy of a book to a member.

        Args:
            member_id: Member borrowing the book.
            title: Title of the book.

        Returns:
            True if a copy was lent, False if the book is unknown or
            has no copies left.

        Raises:
            InvalidOperationError: If the member is not valid. The
                repository is not consulted in that case.
        """
        if not self.members.is_valid(member_id):
            raise InvalidOperationError(
                f"Member {member_id} is not allowed to borrow books",
                member_id=member_id,
            )

        book = self.repository.find_by_title(title)
        if book is None:
            logger.debug(
                f"Borrow rejected: '{title}' not in catalog",
                extra={"member_id": member_id, "title": title},
            )
            return False

        if not book.is_available:
            logger.debug(
                f"Borrow rejected: no copies of '{title}' left",
                extra={"member_id": member_id, "title": title},
            )
            return False

        book.check_out()
        self.repository.save(book)
        self.notification.notify_borrow(member_id, title)

        logger.info(
            f"Member {member_id} borrowed '{title}'",
            extra={"member_id": member_id, "title": title, "copies": book.copies},
        )
        return True

    def return_book(self, member_id: int, title: str) -> bool:
        """Take back one copy of a book.

        Member validity is not checked: a lapsed member can always
        bring a book back.

        Args:
            member_id: Member returning the book.
            title: Title of the book.

        Returns:
            True if the copy was taken back, False if the book is unknown.
        """
        book = self.repository.find_by_title(title)
        if book is None:
            logger.debug(
                f"Return rejected: '{title}' not in catalog",
                extra={"member_id": member_id, "title": title},
            )
            return False

        book.check_in()
        self.repository.save(book)
        self.notification.notify_return(member_id, title)

        logger.info(
            f"Member {member_id} returned '{title}'",
            extra={"member_id": member_id, "title": title, "copies": book.copies},
        )
        return True

    def get_available_books(self) -> list[Book]:
        """List the books that have at least one copy available.

        Returns:
            Books with copies > 0, in the repository's listing order.
            Empty list if nothing is available.
        """
        available = [book for book in self.repository.list_all() if book.is_available]

        logger.debug(
            "Listed available books",
            extra={"count": len(available)},
        )

        return available
