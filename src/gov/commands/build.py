"""Command: go build."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gov.commands._base import GovCommand

if TYPE_CHECKING:
    from gov.commands._context import AppContext


@click.command(
    cls=GovCommand,
    examples="""\
  gov build
  gov -q build""",
)
@click.pass_obj
def build(app: AppContext) -> None:
    """Build the project."""
    from gov.services.project import ProjectService

    app.emit(ProjectService(app.settings, app.workspace, app.runner).build())
