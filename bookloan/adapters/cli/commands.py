"""CLI command implementations for the lending desk.

This adapter maps CLI commands (add, borrow, return, available) to
CatalogPort operations. It handles CLI-specific formatting and error
reporting: expected failures come back as result dictionaries with
``"status": "error"`` instead of raising.
"""

import logging
from typing import Any

from bookloan.core.errors import InvalidOperationError
from bookloan.core.models import Book
from bookloan.core.ports import CatalogPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to CatalogPort."""

    def __init__(self, catalog: CatalogPort):
        """Initialize the CLI command handler.

        Args:
            catalog: CatalogPort implementation to execute commands.
        """
        self.catalog = catalog

    def execute(self, command: str, args: dict[str, Any]) -> dict[str, Any]:
        """Dispatch a command name to the matching handler method.

        Raises:
            ValueError: If the command is not recognized or a required
                argument is missing.
        """
        if command == "add":
            _require(args, "title", "copies")
            return self.add_book(args["title"], int(args["copies"]))

        elif command == "borrow":
            _require(args, "member_id", "title")
            return self.borrow_book(int(args["member_id"]), args["title"])

        elif command == "return":
            _require(args, "member_id", "title")
            return self.return_book(int(args["member_id"]), args["title"])

        elif command == "available":
            return self.list_available(args.get("format", "json"))

        else:
            raise ValueError(f"Unknown command: {command}")

    def add_book(self, title: str, copies: int) -> dict[str, Any]:
        """Add copies of a book via CLI.

        Args:
            title: Title of the book.
            copies: Number of copies to add.

        Returns:
            Dictionary with status and message.
        """
        try:
            self.catalog.add_book(title, copies)
        except ValueError as e:
            logger.error(f"Failed to add book: {e}")
            return {
                "status": "error",
                "operation": "add",
                "title": title,
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "add",
            "title": title,
            "message": f"Added {copies} copies of '{title}'",
        }

    def borrow_book(self, member_id: int, title: str) -> dict[str, Any]:
        """Borrow a book via CLI.

        Args:
            member_id: Member borrowing the book.
            title: Title of the book.

        Returns:
            Dictionary with status and message. A book that is unknown or
            out of copies yields status "unavailable".
        """
        try:
            borrowed = self.catalog.borrow_book(member_id, title)
        except InvalidOperationError as e:
            logger.error(f"Failed to borrow book: {e}")
            return {
                "status": "error",
                "operation": "borrow",
                "member_id": member_id,
                "title": title,
                "message": str(e),
            }

        if not borrowed:
            return {
                "status": "unavailable",
                "operation": "borrow",
                "member_id": member_id,
                "title": title,
                "message": f"'{title}' is not available",
            }

        return {
            "status": "success",
            "operation": "borrow",
            "member_id": member_id,
            "title": title,
            "message": f"Member {member_id} borrowed '{title}'",
        }

    def return_book(self, member_id: int, title: str) -> dict[str, Any]:
        """Return a book via CLI.

        Args:
            member_id: Member returning the book.
            title: Title of the book.

        Returns:
            Dictionary with status and message. An unknown title yields
            status "not_found".
        """
        returned = self.catalog.return_book(member_id, title)

        if not returned:
            return {
                "status": "not_found",
                "operation": "return",
                "member_id": member_id,
                "title": title,
                "message": f"'{title}' is not in the catalog",
            }

        return {
            "status": "success",
            "operation": "return",
            "member_id": member_id,
            "title": title,
            "message": f"Member {member_id} returned '{title}'",
        }

    def list_available(self, output_format: str = "json") -> dict[str, Any]:
        """List available books via CLI.

        Args:
            output_format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with the available books or an error message.
        """
        books = self.catalog.get_available_books()

        if output_format == "json":
            data: Any = [self._book_to_dict(book) for book in books]
        elif output_format == "text":
            data = self._format_books_as_text(books)
        else:
            return {
                "status": "error",
                "operation": "available",
                "message": f"Unsupported format: {output_format}",
            }

        return {
            "status": "success",
            "operation": "available",
            "count": len(books),
            "data": data,
        }

    @staticmethod
    def _book_to_dict(book: Book) -> dict[str, Any]:
        return {"title": book.title, "copies": book.copies}

    @staticmethod
    def _format_books_as_text(books: list[Book]) -> str:
        """Format books as an aligned two-column listing."""
        if not books:
            return "No books available."

        width = max(len("Title"), *(len(book.title) for book in books))
        lines = [f"{'Title'.ljust(width)}  Copies", "-" * (width + 8)]
        for book in books:
            lines.append(f"{book.title.ljust(width)}  {book.copies}")
        return "\n".join(lines)


def run_command(
    catalog: CatalogPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing one-off CLI commands.

    Args:
        catalog: CatalogPort implementation.
        command: Command name ('add', 'borrow', 'return', 'available').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If the command is not recognized or a required
            argument is missing.
    """
    return CLICommandHandler(catalog).execute(command, args)


def _require(args: dict[str, Any], *names: str) -> None:
    """Raise ValueError naming the first missing argument."""
    for name in names:
        if name not in args:
            raise ValueError(f"Missing required parameter: {name}")
