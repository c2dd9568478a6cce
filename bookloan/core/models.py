"""Domain models for the bookloan lending system.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass


@dataclass
class Book:
    """A catalog entry and its count of copies available for loan.

    The title is the identity key. Books are mutable: the catalog service
    adjusts ``copies`` in place on the handle it received from the
    repository and then saves that same object back.
    """

    title: str
    copies: int = 0

    def __post_init__(self) -> None:
        """Validate book invariants on creation."""
        if not self.title or not self.title.strip():
            raise ValueError("title must be a non-empty string")
        if self.copies < 0:
            raise ValueError(f"copies must be non-negative, got {self.copies}")

    @property
    def is_available(self) -> bool:
        """True if at least one copy can be borrowed."""
        return self.copies > 0

    def add_copies(self, count: int) -> None:
        """Increase the available copy count.

        Raises:
            ValueError: If count is not positive.
        """
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        self.copies += count

    def check_out(self) -> None:
        """Take one copy off the shelf.

        Raises:
            ValueError: If no copies are available.
        """
        if self.copies == 0:
            raise ValueError(f"No copies of '{self.title}' available")
        self.copies -= 1

    def check_in(self) -> None:
        """Put one copy back on the shelf."""
        self.copies += 1
