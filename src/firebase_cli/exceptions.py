"""Custom exceptions for the Firebase CLI."""

from __future__ import annotations

from typing import Any


class FirebaseError(Exception):
    """Structured error surfaced to the command layer.

    Every failure in the request pipeline ends up as one of these: a
    transport failure, a translated HTTP error response or an unexpected
    response body. The command layer prints ``message`` and exits with
    ``exit_code``.

    Args:
        message: Human-readable error description
        context: Machine-readable diagnostic context (e.g. the offending result)
        exit_code: Suggested process exit code
        status: HTTP status code associated with the error
        original: Underlying exception that caused this error

    Example:
        >>> raise FirebaseError("Server Error. connection refused", exit_code=2)
    """

    def __init__(
        self,
        message: str,
        context: Any = None,
        exit_code: int = 1,
        status: int = 500,
        original: BaseException | None = None,
    ) -> None:
        """Initialize FirebaseError.

        Args:
            message: Human-readable error description
            context: Machine-readable diagnostic context
            exit_code: Suggested process exit code
            status: HTTP status code associated with the error
            original: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context
        self.exit_code = exit_code
        self.status = status
        self.original = original

    def __str__(self) -> str:
        """Return the human-readable message."""
        return self.message
