"""Command: go mod tidy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gov.commands._base import GovCommand

if TYPE_CHECKING:
    from gov.commands._context import AppContext


@click.command(cls=GovCommand, examples="  gov deps")
@click.pass_obj
def deps(app: AppContext) -> None:
    """Manage dependencies."""
    from gov.services.project import ProjectService

    app.emit(ProjectService(app.settings, app.workspace, app.runner).deps())
