"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeBookRepositoryPort: In-memory book storage with call recording
- FakeMemberDirectoryPort: Configurable member validity
- FakeNotificationPort: Captured notices for assertion
- FakeCatalogPort: Canned catalog answers for CLI tests
"""

from .catalog import FakeCatalogPort
from .members import FakeMemberDirectoryPort
from .notification import FakeNotificationPort
from .repository import FakeBookRepositoryPort

__all__ = [
    "FakeBookRepositoryPort",
    "FakeCatalogPort",
    "FakeMemberDirectoryPort",
    "FakeNotificationPort",
]
