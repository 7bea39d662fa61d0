"""Error boundary: the single place foreign failures become AppExceptions.

Typed errors pass through unchanged. Anything else is wrapped exactly
once, logged with its original traceback, and re-raised as an
UnexpectedError chained to the original.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from todo.domain.exceptions import AppException


@contextmanager
def error_boundary(logger: logging.Logger, operation: str) -> Iterator[None]:
    try:
        yield
    except AppException as exc:
        logger.warning("%s failed: %s", operation, exc.describe())
        raise
    except Exception as exc:
        wrapped = AppException.wrap(exc)
        logger.error("%s failed: %s", operation, wrapped.describe(), exc_info=exc)
        raise wrapped from exc
