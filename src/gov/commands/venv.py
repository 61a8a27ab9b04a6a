"""Commands: activate, deactivate, use."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gov.commands._base import GovCommand

if TYPE_CHECKING:
    from gov.commands._context import AppContext
    from gov.services.venv import VenvService


def _service(app: AppContext) -> VenvService:
    from gov.services.venv import VenvService

    return VenvService(app.settings, app.workspace, app.runner)


@click.command(
    cls=GovCommand,
    examples="""\
  gov activate
  gov --json activate""",
)
@click.pass_obj
def activate(app: AppContext) -> None:
    """Activate virtual environment."""
    app.emit(_service(app).activate())


@click.command(cls=GovCommand, examples="  gov deactivate")
@click.pass_obj
def deactivate(app: AppContext) -> None:
    """Deactivate virtual environment."""
    app.emit(_service(app).deactivate())


@click.command(cls=GovCommand, examples="  gov use 1.22.4")
@click.argument("version")
@click.pass_obj
def use(app: AppContext, version: str) -> None:
    """Use specified Go version in virtual environment."""
    app.emit(_service(app).use(version))
