"""Unit tests for MarkdownNotificationAdapter."""

from pathlib import Path

import pytest

from bookloan.adapters.notification.markdown import MarkdownNotificationAdapter


@pytest.fixture
def report_path(tmp_path: Path) -> Path:
    return tmp_path / "logs" / "loans.md"


def test_creates_parent_directory(report_path: Path) -> None:
    MarkdownNotificationAdapter(str(report_path))
    assert report_path.parent.is_dir()


def test_first_entry_writes_header(report_path: Path) -> None:
    adapter = MarkdownNotificationAdapter(str(report_path))

    adapter.notify_borrow(1, "1984")

    content = report_path.read_text(encoding="utf-8")
    assert content.startswith("# Loan Activity")
    assert "**Borrowed** *1984* by member `1`" in content


def test_entries_are_appended(report_path: Path) -> None:
    adapter = MarkdownNotificationAdapter(str(report_path))

    adapter.notify_borrow(1, "1984")
    adapter.notify_return(1, "1984")
    MarkdownNotificationAdapter(str(report_path)).notify_borrow(2, "Dune")

    content = report_path.read_text(encoding="utf-8")
    assert content.count("# Loan Activity") == 1
    bullets = [line for line in content.splitlines() if line.startswith("- ")]
    assert len(bullets) == 3
    assert "**Returned** *1984*" in bullets[1]
    assert "member `2`" in bullets[2]


def test_rejects_directory_path(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="directory"):
        MarkdownNotificationAdapter(str(tmp_path))
