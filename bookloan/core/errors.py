"""Exceptions raised by the core catalog service.

Bad input is reported with the built-in ``ValueError``. The one error kind
that has no built-in counterpart lives here.
"""


class InvalidOperationError(RuntimeError):
    """The requested operation is not allowed in the current state.

    Raised when a member who fails validation tries to borrow a book.
    The caller must resolve membership status before retrying.
    """

    def __init__(self, message: str, member_id: int | None = None):
        super().__init__(message)
        self.member_id = member_id
