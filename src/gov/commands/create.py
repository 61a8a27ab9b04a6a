"""Command: create a new project directory and initialize it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gov.commands._base import GovCommand

if TYPE_CHECKING:
    from gov.commands._context import AppContext


@click.command(
    cls=GovCommand,
    examples="""\
  gov create hello
  gov --json create services/api""",
)
@click.argument("name")
@click.pass_obj
def create(app: AppContext, name: str) -> None:
    """Create a new virtual environment Go project."""
    from gov.services.project import ProjectService

    app.emit(ProjectService(app.settings, app.workspace, app.runner).create(name))
