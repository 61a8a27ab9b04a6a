"""ProjectService — Go project scaffolding and builds.

Operations:
  init    git init, then ``go mod init`` when go.mod is absent
  build   go build
  create  mkdir <name>, move the workspace into it, then init
  deps    go mod tidy
"""

from __future__ import annotations

import logging

from gov.services.base import PROCESS_ERRORS, BaseService
from gov.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

GO_MOD = "go.mod"


class ProjectService(BaseService):
    """Runs the git/go command sequences for a project directory."""

    def init(self) -> ServiceResult:
        """Initialize git and the Go module in the workspace cwd."""
        op = "init"
        steps: list[str] = []
        error = self._initialize(steps)
        if error is not None:
            return self._failed(op, error, steps, path=str(self._workspace.cwd))
        return ServiceResult(
            ok=True,
            op=op,
            data={"steps": steps, "path": str(self._workspace.cwd)},
        )

    def build(self) -> ServiceResult:
        op = "build"
        try:
            self._run(self._settings.toolchain.go, "build")
        except PROCESS_ERRORS as exc:
            return self._failed(op, self._process_error("BUILD_FAILED", "Failed to build", exc))
        return ServiceResult(
            ok=True,
            op=op,
            data={"steps": ["Project built successfully."], "path": str(self._workspace.cwd)},
        )

    def create(self, name: str) -> ServiceResult:
        """Create directory *name*, make it the workspace cwd, then init it."""
        op = "create"
        if not name.strip():
            return self._failed(
                op,
                ServiceError(
                    code="MKDIR_FAILED",
                    message="Failed to create directory: project name must not be empty",
                    detail={"name": name},
                ),
            )
        target = self._workspace.cwd / name
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            return self._failed(
                op,
                ServiceError(
                    code="MKDIR_FAILED",
                    message=f"Failed to create directory: {exc}",
                    detail={"path": str(target)},
                ),
            )

        self._workspace.chdir(target)
        logger.debug("Workspace moved to %s", target)

        steps: list[str] = []
        error = self._initialize(steps)
        if error is not None:
            return self._failed(op, error, steps, name=name, path=str(target))

        steps.append(f"Virtual environment project '{name}' created.")
        return ServiceResult(
            ok=True,
            op=op,
            data={"steps": steps, "name": name, "path": str(target)},
        )

    def deps(self) -> ServiceResult:
        op = "deps"
        try:
            self._run(self._settings.toolchain.go, "mod", "tidy")
        except PROCESS_ERRORS as exc:
            return self._failed(op, self._process_error("DEPS_FAILED", "Failed to tidy deps", exc))
        return ServiceResult(ok=True, op=op, data={"steps": ["Dependencies managed."]})

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _initialize(self, steps: list[str]) -> ServiceError | None:
        """git init + conditional go mod init. Appends a message per completed step."""
        toolchain = self._settings.toolchain
        try:
            self._run(toolchain.git, "init")
        except PROCESS_ERRORS as exc:
            return self._process_error("GIT_INIT_FAILED", "Failed to init git", exc)
        steps.append("Git repository initialized.")

        if (self._workspace.cwd / GO_MOD).exists():
            logger.debug("%s present in %s, skipping go mod init", GO_MOD, self._workspace.cwd)
            return None

        try:
            self._run(toolchain.go, "mod", "init", toolchain.module_name)
        except PROCESS_ERRORS as exc:
            return self._process_error("GO_MOD_INIT_FAILED", "Failed to init go mod", exc)
        steps.append("Go module initialized.")
        return None
