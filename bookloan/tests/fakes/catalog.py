"""Fake CatalogPort implementation for testing driving adapters."""

from bookloan.core.errors import InvalidOperationError
from bookloan.core.models import Book
from bookloan.core.ports import CatalogPort


class FakeCatalogPort(CatalogPort):
    """Catalog with canned answers that records every operation."""

    def __init__(self, available: list[Book] | None = None):
        self.available: list[Book] = list(available or [])
        self.borrow_result = True
        self.return_result = True
        self.invalid_members: set[int] = set()
        self.added: list[tuple[str, int]] = []
        self.borrowed: list[tuple[int, str]] = []
        self.returned: list[tuple[int, str]] = []

    def add_book(self, title: str, copies_to_add: int) -> None:
        if not title or not title.strip():
            raise ValueError("Title must be a non-empty string")
        if copies_to_add <= 0:
            raise ValueError(f"Copies to add must be positive, got {copies_to_add}")
        self.added.append((title, copies_to_add))

    def borrow_book(self, member_id: int, title: str) -> bool:
        if member_id in self.invalid_members:
            raise InvalidOperationError(
                f"Member {member_id} is not allowed to borrow books",
                member_id=member_id,
            )
        self.borrowed.append((member_id, title))
        return self.borrow_result

    def return_book(self, member_id: int, title: str) -> bool:
        self.returned.append((member_id, title))
        return self.return_result

    def get_available_books(self) -> list[Book]:
        return list(self.available)
