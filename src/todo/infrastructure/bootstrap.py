"""Composition root: builds the objects every layer shares.

This is the only place that constructs the logger. Everything else
receives it through the AppContainer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TextIO

from todo.infrastructure.config import AppConfig
from todo.infrastructure.logging import build_logger


@dataclass
class AppContainer:
    config: AppConfig
    logger: logging.Logger


def build_container(
    config: AppConfig | None = None, stream: TextIO | None = None
) -> AppContainer:
    if config is None:
        config = AppConfig.from_env()
    logger = build_logger(config, stream)
    logger.info("application started")
    return AppContainer(config=config, logger=logger)
