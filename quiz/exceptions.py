"""Quiz Exceptions - Hierarquia de erros do modulo."""

from typing import Any


class QuizError(Exception):
    """Base error for the quiz package.

    Args:
        message: Human readable message, surfaced as-is to GraphQL callers
        details: Optional structured context for logs
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class AuthorizationError(QuizError):
    """Caller identity does not satisfy the operation's access rule."""


class NotFoundError(QuizError):
    """A write targeted a record that does not exist."""


class TransportError(QuizError):
    """GraphQL transport failure (HTTP error or a non-empty ``errors`` list)."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.errors = errors or []
