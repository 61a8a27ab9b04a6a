"""Subcommand modules for gov.

Provides register_commands() which uses deferred imports to keep
``gov --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the root CLI group."""
    from gov.commands.build import build
    from gov.commands.create import create
    from gov.commands.deps import deps
    from gov.commands.init_cmd import init_cmd
    from gov.commands.save_bin import save_bin
    from gov.commands.venv import activate, deactivate, use

    cli.add_command(init_cmd)
    cli.add_command(build)
    cli.add_command(create)
    cli.add_command(deps)
    cli.add_command(activate)
    cli.add_command(deactivate)
    cli.add_command(use)
    cli.add_command(save_bin)
