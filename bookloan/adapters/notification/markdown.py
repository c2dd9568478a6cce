"""Markdown file notification adapter.

Implements NotificationPort by appending loan notices to a markdown log
file. Useful for keeping a persistent audit trail of the lending desk.
"""

import logging
from datetime import UTC, datetime
from pathlib import Path

from bookloan.core.ports import NotificationPort

logger = logging.getLogger(__name__)

_HEADER = "# Loan Activity\n\n"


class MarkdownNotificationAdapter(NotificationPort):
    """Appends one markdown bullet per borrow or return."""

    def __init__(self, report_path: str):
        """Initialize markdown notification adapter.

        Args:
            report_path: Markdown file to append to. Parent directories
                are created if missing; the file gets a header when new.

        Raises:
            ValueError: If report_path points at an existing directory.
            OSError: If the parent directory cannot be created.
        """
        self.report_path = Path(report_path).resolve()

        if self.report_path.is_dir():
            raise ValueError(f"report_path is a directory: {report_path}")

        try:
            self.report_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(
                f"Failed to create directory {self.report_path.parent}: {e}"
            ) from e

    def notify_borrow(self, member_id: int, title: str) -> None:
        """Append a borrow entry."""
        self._append(self._format_entry("Borrowed", member_id, title))

    def notify_return(self, member_id: int, title: str) -> None:
        """Append a return entry."""
        self._append(self._format_entry("Returned", member_id, title))

    def _append(self, entry: str) -> None:
        """Append an entry, writing the header first if the file is new."""
        is_new = not self.report_path.exists() or self.report_path.stat().st_size == 0
        try:
            with self.report_path.open("a", encoding="utf-8") as f:
                if is_new:
                    f.write(_HEADER)
                f.write(entry)
        except OSError as e:
            logger.error(
                f"Failed to write loan log {self.report_path}: {e}",
                exc_info=True,
            )
            raise

    @staticmethod
    def _format_entry(action: str, member_id: int, title: str) -> str:
        """Format one markdown bullet."""
        timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
        return f"- {timestamp} **{action}** *{title}* by member `{member_id}`\n"
