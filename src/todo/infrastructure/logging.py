"""Logger construction.

The application logger is built once by the composition root and handed
to whoever needs it; nothing looks it up by name.
"""

from __future__ import annotations

import logging
from typing import TextIO

from todo.infrastructure.config import AppConfig

LOGGER_NAME = "todo"


class ElapsedFormatter(logging.Formatter):
    """Wall-clock time plus milliseconds since the process started."""

    default_format = "%(asctime)s (+%(elapsed)s) %(levelname)s %(name)s: %(message)s"

    def __init__(self) -> None:
        super().__init__(fmt=self.default_format, datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        record.elapsed = f"{record.relativeCreated:.0f}ms"
        return super().format(record)


def build_logger(config: AppConfig, stream: TextIO | None = None) -> logging.Logger:
    """Configure and return the application logger.

    Rebuilding replaces the previous handler, so tests and repeated
    entry-point calls never end up with duplicated output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ElapsedFormatter())
    logger.addHandler(handler)
    logger.setLevel(config.effective_log_level)
    logger.propagate = False
    return logger
