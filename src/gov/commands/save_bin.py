"""Command: stash the Go binary in the configuration directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gov.commands._base import GovCommand

if TYPE_CHECKING:
    from gov.commands._context import AppContext


@click.command(
    "save-bin",
    cls=GovCommand,
    examples="""\
  gov save-bin
  GOV_TOOLCHAIN__SOURCE_BINARY=/opt/go/bin/go gov save-bin""",
)
@click.pass_obj
def save_bin(app: AppContext) -> None:
    """Save Go binary to .gov directory."""
    from gov.services.venv import VenvService

    app.emit(VenvService(app.settings, app.workspace, app.runner).save_bin())
