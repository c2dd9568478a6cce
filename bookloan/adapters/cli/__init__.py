"""Command-line interface adapters.

Provides CLI commands for the lending desk:
- add: Add copies of a book to the catalog
- borrow: Lend a copy to a member
- return: Take a copy back
- available: List books with copies on the shelf
"""
