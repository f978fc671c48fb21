"""Exception types raised by the quiz catalog and session engine."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for quiz core errors."""


class NotFoundError(QuizError, LookupError):
    """Raised when an identifier does not resolve to a catalog entry."""


class InvalidStateError(QuizError, RuntimeError):
    """Raised when an operation is not allowed in the current session state."""


class InvalidInputError(QuizError, ValueError):
    """Raised when required content is empty or inconsistent."""
