"""SQLite book repository adapter.

Implements BookRepositoryPort using the standard library sqlite3 module.
Provides durable storage for the catalog with zero operational overhead.
"""

import logging
import sqlite3
from datetime import UTC, datetime
from pathlib import Path

from bookloan.core.models import Book
from bookloan.core.ports import BookRepositoryPort

logger = logging.getLogger(__name__)


class SQLiteBookRepository(BookRepositoryPort):
    """SQLite-backed book repository.

    Rows are keyed by title. Listing follows insertion order (rowid), which
    an upsert of an existing title does not change.
    """

    def __init__(self, db_path: str):
        """Initialize SQLite repository.

        Args:
            db_path: Path to SQLite database file. Parent directories are
                created if missing. Use ":memory:" for a throwaway database.
        """
        self.db_path = db_path
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._conn: sqlite3.Connection | None = None
        self._schema_initialized = False

    def _get_connection(self) -> sqlite3.Connection:
        """Get the open connection, creating it and the schema on first use."""
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path)
            self._conn.row_factory = sqlite3.Row
        if not self._schema_initialized:
            self._init_schema(self._conn)
        return self._conn

    def _init_schema(self, conn: sqlite3.Connection) -> None:
        """Initialize database schema on first use.

        Only runs once per instance. Subsequent calls are no-ops.
        """
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS books (
                title TEXT PRIMARY KEY,
                copies INTEGER NOT NULL CHECK (copies >= 0),
                added_at TIMESTAMP NOT NULL
            )
            """
        )
        conn.commit()
        self._schema_initialized = True

    def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            self._schema_initialized = False

    def find_by_title(self, title: str) -> Book | None:
        """Look up a book by its title."""
        conn = self._get_connection()
        row = conn.execute(
            "SELECT title, copies FROM books WHERE title = ?", (title,)
        ).fetchone()
        if row is None:
            return None
        return self._row_to_book(row)

    def save(self, book: Book) -> None:
        """Insert a new book or update the copy count of an existing one."""
        conn = self._get_connection()
        try:
            conn.execute(
                """
                INSERT INTO books (title, copies, added_at)
                VALUES (?, ?, ?)
                ON CONFLICT(title) DO UPDATE SET copies = excluded.copies
                """,
                (book.title, book.copies, datetime.now(UTC).isoformat()),
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(
                f"Failed to save '{book.title}': {e}",
                extra={"title": book.title},
            )
            raise

    def list_all(self) -> list[Book]:
        """Return every book in insertion order."""
        conn = self._get_connection()
        rows = conn.execute("SELECT title, copies FROM books ORDER BY rowid").fetchall()
        return [self._row_to_book(row) for row in rows]

    @staticmethod
    def _row_to_book(row: sqlite3.Row) -> Book:
        """Convert a database row to a Book."""
        return Book(title=row["title"], copies=row["copies"])
