"""Fake NotificationPort implementation for testing."""

from bookloan.core.ports import NotificationPort


class FakeNotificationPort(NotificationPort):
    """In-memory notification adapter for testing.

    Captures all notifications sent through this port for test assertions.
    """

    def __init__(self):
        """Initialize with empty notification history."""
        self.borrow_notices: list[tuple[int, str]] = []
        self.return_notices: list[tuple[int, str]] = []
        self.should_fail: bool = False
        self.fail_message: str = "Notification failed"

    def notify_borrow(self, member_id: int, title: str) -> None:
        """Capture a borrow notice."""
        if self.should_fail:
            raise RuntimeError(self.fail_message)
        self.borrow_notices.append((member_id, title))

    def notify_return(self, member_id: int, title: str) -> None:
        """Capture a return notice."""
        if self.should_fail:
            raise RuntimeError(self.fail_message)
        self.return_notices.append((member_id, title))

    @property
    def total_notices(self) -> int:
        """Count of all captured notices."""
        return len(self.borrow_notices) + len(self.return_notices)

    def set_should_fail(self, should_fail: bool, message: str = "Notification failed") -> None:
        """Configure the adapter to fail on the next operation."""
        self.should_fail = should_fail
        self.fail_message = message

    def reset(self) -> None:
        """Reset all collected notifications and state."""
        self.borrow_notices.clear()
        self.return_notices.clear()
        self.should_fail = False
        self.fail_message = "Notification failed"
