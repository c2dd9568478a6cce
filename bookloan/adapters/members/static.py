"""Static member directory adapter.

Implements MemberDirectoryPort with a fixed allow-list of member ids,
typically loaded from configuration.
"""

import logging
from collections.abc import Iterable

from bookloan.core.ports import MemberDirectoryPort

logger = logging.getLogger(__name__)


class StaticMemberDirectory(MemberDirectoryPort):
    """Treats exactly the configured member ids as valid."""

    def __init__(self, valid_member_ids: Iterable[int] = ()):
        """Initialize the directory.

        Args:
            valid_member_ids: Ids of members allowed to borrow.
        """
        self._valid_ids = frozenset(valid_member_ids)

    def is_valid(self, member_id: int) -> bool:
        """Check whether member_id is on the allow-list."""
        valid = member_id in self._valid_ids
        if not valid:
            logger.debug(
                f"Member {member_id} not in directory",
                extra={"member_id": member_id},
            )
        return valid
