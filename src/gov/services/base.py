"""BaseService — shared foundation for gov services.

Every service receives the frozen :class:`GovSettings`, the mutable
:class:`Workspace` it operates on, and a :class:`CommandRunner` used for
all external processes.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, Any

from gov.infrastructure.process import CommandRunner, describe_failure
from gov.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from gov.config.settings import GovSettings
    from gov.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)

PROCESS_ERRORS = (OSError, subprocess.CalledProcessError)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ProjectService(BaseService):
            def build(self) -> ServiceResult:
                self._run(self._settings.toolchain.go, "build")
                ...
    """

    def __init__(
        self,
        settings: GovSettings,
        workspace: Workspace,
        runner: CommandRunner | None = None,
    ) -> None:
        self._settings = settings
        self._workspace = workspace
        self._runner = runner or CommandRunner()

    @property
    def config_dir(self) -> Path:
        """Home-relative configuration directory (``~/.gov`` by default)."""
        return self._workspace.home / self._settings.env.dir_name

    def _run(self, *argv: str) -> subprocess.CompletedProcess[str]:
        """Run a command in the workspace cwd with the workspace environment."""
        return self._runner.run(*argv, cwd=self._workspace.cwd, env=self._workspace.env)

    @staticmethod
    def _process_error(
        code: str,
        prefix: str,
        exc: OSError | subprocess.CalledProcessError,
    ) -> ServiceError:
        """Wrap an external process failure as a ServiceError."""
        logger.debug("%s: %s", prefix, exc)
        detail: dict[str, Any] = {}
        if isinstance(exc, subprocess.CalledProcessError):
            detail = {"command": " ".join(map(str, exc.cmd)), "returncode": exc.returncode}
        return ServiceError(
            code=code,
            message=f"{prefix}: {describe_failure(exc)}",
            detail=detail,
        )

    @staticmethod
    def _failed(
        op: str,
        error: ServiceError,
        steps: list[str] | None = None,
        **data: Any,
    ) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            data={"steps": steps or [], **data},
            error=error,
        )
