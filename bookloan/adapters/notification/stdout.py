"""Stdout notification adapter.

Implements NotificationPort by printing loan notices to the terminal.
"""

import logging

from bookloan.core.ports import NotificationPort

logger = logging.getLogger(__name__)


class StdoutNotificationAdapter(NotificationPort):
    """Prints borrow and return notices to stdout."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout notification adapter.

        Args:
            verbose: If True, log each notice in addition to printing it.
        """
        self.verbose = verbose

    def notify_borrow(self, member_id: int, title: str) -> None:
        """Print a borrow notice."""
        self._emit(self._format_notice("BORROWED", member_id, title))

    def notify_return(self, member_id: int, title: str) -> None:
        """Print a return notice."""
        self._emit(self._format_notice("RETURNED", member_id, title))

    def _emit(self, line: str) -> None:
        print(line)
        if self.verbose:
            logger.info(line)

    @staticmethod
    def _format_notice(action: str, member_id: int, title: str) -> str:
        """Format a single-line notice."""
        return f"[{action}] member={member_id} title={title!r}"
