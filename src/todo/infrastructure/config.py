"""Application configuration, resolved from ``TODO_*`` environment variables."""

from __future__ import annotations

import logging

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from todo.domain.exceptions import TodoValidationError


def _describe_validation_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    original = error.get("ctx", {}).get("error")
    if isinstance(original, ValueError):
        return str(original)
    field = ".".join(str(part) for part in error["loc"]) or "settings"
    return f"Invalid setting {field}: {error['msg']}"


class AppConfig(BaseSettings):
    """Settings shared by every layer.

    ``debug`` mirrors a development build: verbose logging unless an
    explicit ``log_level`` says otherwise. Invalid values surface as
    TodoValidationError.
    """

    title: str = "Todo"
    debug: bool = False
    # Level name ("info") or number ("20").
    log_level: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="TODO_",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    def __init__(self, **values: object) -> None:
        try:
            super().__init__(**values)
        except ValidationError as exc:
            raise TodoValidationError(_describe_validation_error(exc), cause=exc) from exc

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str | None) -> str | None:
        """Normalize to an upper-case level name or a non-negative number."""
        if v is None:
            return None
        v = v.strip()
        if v.isdigit():
            return v
        if not isinstance(logging.getLevelName(v.upper()), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return v.upper()

    @property
    def effective_log_level(self) -> int:
        if self.log_level is not None:
            if self.log_level.isdigit():
                return int(self.log_level)
            return logging.getLevelName(self.log_level)
        return logging.DEBUG if self.debug else logging.WARNING

    @classmethod
    def from_env(cls) -> AppConfig:
        return cls()
