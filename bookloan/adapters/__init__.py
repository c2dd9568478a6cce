"""External adapters for the bookloan lending system.

This package contains all external dependencies (SQLite, HTTP webhooks,
files, the terminal) and provides implementations of the core port
interfaces.

Adapter Organization:

- store/: Adapters for book persistence (in-memory, SQLite)
- members/: Adapters for member validity checks (static allow-list)
- notification/: Adapters for loan notices (stdout, markdown, webhook)
- cli/: Command-line interface for the lending desk
"""
