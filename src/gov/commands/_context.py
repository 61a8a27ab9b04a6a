"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the workspace (cwd + environment) and the
process runner, and centralizes result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gov.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from gov.config.settings import GovSettings
    from gov.infrastructure.process import CommandRunner
    from gov.infrastructure.workspace import Workspace
    from gov.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The workspace is bound to the running process on first use, so
    ``--help`` and ``--version`` never touch the environment.
    """

    def __init__(
        self,
        settings: GovSettings,
        *,
        workspace: Workspace | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.settings = settings
        self._workspace = workspace
        self._runner = runner

        from gov.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def workspace(self) -> Workspace:
        if self._workspace is None:
            from gov.infrastructure.workspace import Workspace

            self._workspace = Workspace.from_process()
        return self._workspace

    @property
    def runner(self) -> CommandRunner:
        if self._runner is None:
            from gov.infrastructure.process import CommandRunner

            self._runner = CommandRunner()
        return self._runner

    def emit(self, result: ServiceResult) -> None:
        """Format and print a ServiceResult to stdout.

        Failures are printed like successes and the command returns
        normally; only dispatch errors change the exit code.  Warnings go
        to stderr so they don't pollute piped output.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        click.echo(format_result(result, settings=settings))
        # In JSON mode, warnings are already in the serialized payload.
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
