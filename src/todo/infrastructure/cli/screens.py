"""Screens rendered by the CLI."""

from __future__ import annotations

import click

from todo.infrastructure.bootstrap import AppContainer

EMPTY_LIST_MESSAGE = "No todos yet."


def render_todo_list(container: AppContainer) -> None:
    """The home screen: app title followed by the (empty) Todo list."""
    title = container.config.title
    container.logger.debug("rendering todo list screen")
    click.echo(title)
    click.echo("-" * max(len(title), 20))
    click.echo(EMPTY_LIST_MESSAGE)
