# textreg/utils/errors.py
from __future__ import annotations


class TextRegError(RuntimeError):
    """Root of every error raised by textreg."""


class UserInputError(TextRegError):
    """
    Raised for invalid user-provided config (paths, columns, grid bounds).
    Should NOT print traceback.
    """


class InvalidInputError(TextRegError, ValueError):
    """Malformed document, label vector, feature matrix or parameter."""


class EmptyVocabularyError(TextRegError):
    """No token survived stop-word filtering / truncation."""


class InsufficientDataError(TextRegError):
    """Corpus too small for the requested split or fold count."""


class DegenerateInputError(TextRegError):
    """A metric is undefined for the given observations."""


class ConvergenceError(TextRegError):
    """
    Solver did not converge within its iteration / time budget.

    Recoverable: callers may retry with a relaxed tolerance,
    or record the failure and move on.
    """

    def __init__(
        self,
        message: str,
        *,
        penalty: float | None = None,
        iterations: int | None = None,
        delta: float | None = None,
    ):
        super().__init__(message)
        self.penalty = penalty
        self.iterations = iterations
        self.delta = delta
