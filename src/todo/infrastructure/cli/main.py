"""Application entry point."""

from __future__ import annotations

from collections.abc import Callable

import click

from todo.application.error_boundary import error_boundary
from todo.application.presentation import present
from todo.domain.exceptions import AppException
from todo.infrastructure.bootstrap import AppContainer, build_container
from todo.infrastructure.cli import screens
from todo.infrastructure.config import AppConfig


def _run(container: AppContainer, operation: str, action: Callable[[], None]) -> None:
    """Run *action* behind the error boundary and show failures to the user."""
    try:
        with error_boundary(container.logger, operation):
            action()
    except AppException as exc:
        raise click.ClickException(str(present(exc)))


@click.group(invoke_without_command=True)
@click.option("--debug", is_flag=True, help="Verbose logging.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Todo: a minimal task list."""
    try:
        config = AppConfig.from_env()
    except AppException as exc:
        raise click.ClickException(str(present(exc)))
    if debug:
        config = config.model_copy(update={"debug": True})

    container = build_container(config)
    ctx.obj = container

    if ctx.invoked_subcommand is None:
        _run(container, "home", lambda: screens.render_todo_list(container))


@cli.command("home")
@click.pass_obj
def home(container: AppContainer) -> None:
    """Show the Todo list screen."""
    _run(container, "home", lambda: screens.render_todo_list(container))
