"""End-to-end tests for the click entry point."""

import pytest
from click.testing import CliRunner

from todo.domain.exceptions import TodoNotFoundError
from todo.infrastructure.cli import screens
from todo.infrastructure.cli.main import cli
from tests.fakes import ExplodingScreen


@pytest.fixture
def runner():
    return CliRunner()


class TestHomeScreen:

    def test_no_subcommand_renders_todo_list(self, runner):
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "Todo"
        assert screens.EMPTY_LIST_MESSAGE in result.output

    def test_home_command(self, runner):
        result = runner.invoke(cli, ["home"])
        assert result.exit_code == 0
        assert screens.EMPTY_LIST_MESSAGE in result.output

    def test_title_from_environment(self, runner):
        result = runner.invoke(cli, ["home"], env={"TODO_TITLE": "Chores"})
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "Chores"

    def test_release_mode_is_quiet(self, runner):
        result = runner.invoke(cli, [])
        assert "application started" not in result.output

    def test_debug_flag_enables_startup_log(self, runner):
        result = runner.invoke(cli, ["--debug", "home"])
        assert result.exit_code == 0
        assert "application started" in result.output


class TestErrorSurface:

    def test_typed_error_shown_via_presentation(self, runner, monkeypatch):
        monkeypatch.setattr(
            screens, "render_todo_list", ExplodingScreen(TodoNotFoundError("todo-123"))
        )
        result = runner.invoke(cli, ["home"])
        assert result.exit_code == 1
        assert "Error: Not found: entity not found: todo-123" in result.output

    def test_foreign_error_is_wrapped_before_reaching_user(self, runner, monkeypatch):
        screen = ExplodingScreen(RuntimeError("boom"))
        monkeypatch.setattr(screens, "render_todo_list", screen)
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "Error: Something went wrong: unexpected error: boom" in result.output
        assert screen.calls == 1

    def test_invalid_log_level_reported(self, runner):
        result = runner.invoke(cli, ["home"], env={"TODO_LOG_LEVEL": "LOUD"})
        assert result.exit_code == 1
        assert "Error: Invalid input: Unknown log level: 'LOUD'" in result.output

    def test_unparseable_debug_reported(self, runner):
        result = runner.invoke(cli, ["home"], env={"TODO_DEBUG": "nope"})
        assert result.exit_code == 1
        assert "Error: Invalid input: Invalid setting debug" in result.output

    def test_numeric_log_level_accepted(self, runner):
        result = runner.invoke(cli, ["home"], env={"TODO_LOG_LEVEL": "20"})
        assert result.exit_code == 0
        assert "application started" in result.output
