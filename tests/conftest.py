import pytest

from todo.infrastructure.config import AppConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """AppConfig reads TODO_* variables; keep the host's out of the tests."""
    for name in AppConfig.model_fields:
        monkeypatch.delenv(f"TODO_{name.upper()}", raising=False)
