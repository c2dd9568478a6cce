"""Book repository adapters for persistence and querying.

Implementations support multiple backends:
- In-memory (process lifetime only)
- SQLite (zero-config, single-file)
"""
