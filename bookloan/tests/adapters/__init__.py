"""Integration tests for adapter implementations.

Adapters are exercised against real local resources (temporary files,
SQLite databases, captured stdout) or mocked HTTP transports.
"""
