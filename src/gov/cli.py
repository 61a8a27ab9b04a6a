"""Root CLI group for gov with global flags and command registration."""

from __future__ import annotations

from collections.abc import Sequence

import click

from gov import __version__
from gov.commands import register_commands
from gov.commands._context import AppContext
from gov.config.logging import bind_command
from gov.config.settings import GovSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="gov")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """gov — Go virtual environment tool."""
    ctx.ensure_object(dict)
    settings = GovSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    bind_command(ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main(argv: Sequence[str] | None = None) -> int:
    """Console-script entry point.

    Dispatch errors (unknown command, missing argument, bad config) are
    printed to stdout and exit with 1.
    """
    try:
        rv = cli.main(
            args=list(argv) if argv is not None else None,
            prog_name="gov",
            standalone_mode=False,
        )
    except click.exceptions.Abort:
        click.echo("Aborted!")
        return 1
    except click.ClickException as exc:
        click.echo(f"Error: {exc.format_message()}")
        return 1
    return rv if isinstance(rv, int) else 0
