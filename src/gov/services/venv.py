"""VenvService — the "virtual environment" operations.

A virtual environment here is only a set of environment-variable
overrides applied to the workspace: ``GOROOT`` points into the
configuration directory and its ``bin`` is prepended to ``PATH``.
"""

from __future__ import annotations

import logging
import os

from gov.services.base import PROCESS_ERRORS, BaseService
from gov.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class VenvService(BaseService):
    """activate / deactivate / use / save-bin."""

    @property
    def goroot(self) -> str:
        return str(self.config_dir / "go")

    @property
    def goroot_bin(self) -> str:
        return str(self.config_dir / "go" / "bin")

    def activate(self) -> ServiceResult:
        """Point GOROOT at the configuration directory and prepend its bin to PATH."""
        op = "activate"
        env = self._workspace.env
        path = env.get("PATH", "")
        env["GOROOT"] = self.goroot
        env["PATH"] = f"{self.goroot_bin}{os.pathsep}{path}" if path else self.goroot_bin
        logger.debug("GOROOT=%s", env["GOROOT"])
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "steps": ["Virtual environment activated."],
                "GOROOT": env["GOROOT"],
                "PATH": env["PATH"],
            },
        )

    def deactivate(self) -> ServiceResult:
        """Unset GOROOT and drop the PATH entries added by :meth:`activate`."""
        op = "deactivate"
        env = self._workspace.env
        warnings: list[str] = []
        goroot = env.pop("GOROOT", None)
        if goroot is not None and goroot != self.goroot:
            warnings.append(f"Unset GOROOT={goroot}, which was not set by gov activate")

        removed = 0
        if "PATH" in env:
            entries = env["PATH"].split(os.pathsep)
            kept = [entry for entry in entries if entry != self.goroot_bin]
            removed = len(entries) - len(kept)
            if removed and not kept:
                # PATH held only our entries: activate created it.
                del env["PATH"]
            else:
                env["PATH"] = os.pathsep.join(kept)
        logger.debug("Removed %d PATH entries", removed)
        return ServiceResult(
            ok=True,
            op=op,
            warnings=warnings,
            data={"steps": ["Virtual environment deactivated."], "path_entries_removed": removed},
        )

    def use(self, version: str) -> ServiceResult:
        """Report the requested toolchain version. Nothing is downloaded or switched."""
        return ServiceResult(
            ok=True,
            op="use",
            data={
                "steps": [f"Using Go version {version} in virtual environment."],
                "version": version,
            },
        )

    def save_bin(self) -> ServiceResult:
        """Copy the configured Go binary into the configuration directory."""
        op = "save_bin"
        dir_name = self._settings.env.dir_name
        gov_dir = self.config_dir
        try:
            gov_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            return self._failed(
                op,
                ServiceError(
                    code="MKDIR_FAILED",
                    message=f"Failed to create {dir_name} dir: {exc}",
                    detail={"path": str(gov_dir)},
                ),
            )

        toolchain = self._settings.toolchain
        destination = gov_dir / "go"
        try:
            self._run(toolchain.cp, toolchain.source_binary, str(destination))
        except PROCESS_ERRORS as exc:
            return self._failed(
                op, self._process_error("COPY_FAILED", "Failed to copy go binary", exc)
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "steps": [f"Go binary saved to {dir_name} directory."],
                "source": toolchain.source_binary,
                "destination": str(destination),
            },
        )
