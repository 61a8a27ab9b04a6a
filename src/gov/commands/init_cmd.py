"""Command: project initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gov.commands._base import GovCommand

if TYPE_CHECKING:
    from gov.commands._context import AppContext

_INIT_EXAMPLES = """\
  gov init
  gov --json init
  GOV_TOOLCHAIN__MODULE_NAME=example.com/app gov init"""


@click.command("init", cls=GovCommand, examples=_INIT_EXAMPLES)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Initialize a new Go project (git init + go mod init)."""
    from gov.services.project import ProjectService

    app.emit(ProjectService(app.settings, app.workspace, app.runner).init())
