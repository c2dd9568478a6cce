"""Test suite for the bookloan lending system.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No third-party dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Integration tests for adapter implementations
   - Tests against temporary files, SQLite and mocked HTTP transports

3. fakes/: Port implementations for testing
   - In-memory implementations of BookRepositoryPort, MemberDirectoryPort, etc.
   - Used by core unit tests and CLI tests
"""
