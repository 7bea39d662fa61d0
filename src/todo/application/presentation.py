"""Maps errors to what a user-facing surface shows."""

from __future__ import annotations

from dataclasses import dataclass

from todo.domain.exceptions import (
    AppException,
    TodoDuplicateError,
    TodoNotFoundError,
    TodoValidationError,
)

# Stable, machine-readable error codes.
NOT_FOUND = "NOT_FOUND"
VALIDATION_ERROR = "VALIDATION_ERROR"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


@dataclass(frozen=True)
class ErrorView:
    """Output: an error as displayed to the user."""

    code: str
    title: str
    message: str
    retryable: bool

    def __str__(self) -> str:
        return f"{self.title}: {self.message}"


def present(error: AppException) -> ErrorView:
    """Pick the presentation for *error* by its concrete type.

    Only unexpected failures are offered a retry; the Todo variants need
    different input before trying again.
    """
    message = error.describe()
    if isinstance(error, TodoNotFoundError):
        return ErrorView(NOT_FOUND, "Not found", message, retryable=False)
    if isinstance(error, TodoValidationError):
        return ErrorView(VALIDATION_ERROR, "Invalid input", message, retryable=False)
    if isinstance(error, TodoDuplicateError):
        return ErrorView(DUPLICATE_RESOURCE, "Already exists", message, retryable=False)
    return ErrorView(UNEXPECTED_ERROR, "Something went wrong", message, retryable=True)
