"""Domain-level exceptions.

Every failure the application reports is an AppException so each boundary
(CLI, log sink) can catch one type and show ``describe()``.

Known conditions are raised as one of the Todo variants below. Anything
else is wrapped once, where it is first observed, into an UnexpectedError
that keeps the original failure as ``cause``.
"""

from __future__ import annotations

import traceback


class AppException(Exception):
    """Base class for all application errors.

    Abstract: only subclasses are instantiated. Construction has no side
    effects; callers decide whether and how to report the error.
    """

    def __new__(cls, *args: object, **kwargs: object) -> AppException:
        if cls is AppException:
            raise TypeError("AppException is abstract; raise a concrete subclass")
        return super().__new__(cls, *args)

    def __init__(
        self,
        message: str,
        *,
        cause: object | None = None,
        trace: traceback.StackSummary | None = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._cause = cause
        self._trace = trace
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> object | None:
        """The originating failure, held by reference."""
        return self._cause

    @property
    def trace(self) -> traceback.StackSummary | None:
        return self._trace

    def describe(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    @staticmethod
    def wrap(exc: BaseException) -> AppException:
        """Return *exc* as an AppException.

        Typed errors come back unchanged. Foreign ones become an
        UnexpectedError carrying *exc* as its cause and the stack at which
        it was raised (or, if it was never raised, the stack of this call).
        """
        if isinstance(exc, AppException):
            return exc
        if exc.__traceback__ is not None:
            trace = traceback.extract_tb(exc.__traceback__)
        else:
            trace = traceback.StackSummary.from_list(traceback.extract_stack()[:-1])
        return UnexpectedError(exc, trace=trace)


class UnexpectedError(AppException):
    """A foreign failure wrapped at the boundary where it was first seen."""

    def __init__(
        self,
        cause: object,
        *,
        message: str | None = None,
        trace: traceback.StackSummary | None = None,
    ) -> None:
        if message is None:
            text = str(cause) or type(cause).__name__
            message = f"unexpected error: {text}"
        super().__init__(message, cause=cause, trace=trace)


# --- Todo variants ---


class TodoNotFoundError(AppException):
    """No Todo matches the requested identifier.

    Not worth retrying unless the collection may have changed meanwhile.
    """

    def __init__(
        self,
        todo_id: str,
        *,
        cause: object | None = None,
        trace: traceback.StackSummary | None = None,
    ) -> None:
        super().__init__(f"entity not found: {todo_id}", cause=cause, trace=trace)
        self._todo_id = todo_id

    @property
    def todo_id(self) -> str:
        return self._todo_id


class TodoValidationError(AppException):
    """Caller-supplied input broke a business rule; *detail* names the rule."""

    def __init__(
        self,
        detail: str,
        *,
        cause: object | None = None,
        trace: traceback.StackSummary | None = None,
    ) -> None:
        super().__init__(detail, cause=cause, trace=trace)

    @property
    def detail(self) -> str:
        return self.message


class TodoDuplicateError(AppException):
    """A create collided with an existing Todo of the same title."""

    def __init__(
        self,
        title: str,
        *,
        cause: object | None = None,
        trace: traceback.StackSummary | None = None,
    ) -> None:
        super().__init__(f"entity already exists: {title}", cause=cause, trace=trace)
        self._title = title

    @property
    def title(self) -> str:
        return self._title
