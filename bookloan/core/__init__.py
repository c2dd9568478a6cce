"""Core domain logic for the bookloan lending system.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .errors import InvalidOperationError
from .models import Book

__all__ = [
    "Book",
    "InvalidOperationError",
]
