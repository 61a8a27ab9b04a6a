"""CommandRunner — synchronous external process execution.

Every toolchain step (``git``, ``go``, ``cp``) goes through
:meth:`CommandRunner.run`.  Commands run to completion; a missing binary
raises :class:`OSError` and a non-zero exit raises
:class:`subprocess.CalledProcessError`.  Callers decide how to report them.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class CommandRunner:
    """Run external commands inside a workspace directory."""

    def run(
        self,
        *argv: str,
        cwd: Path,
        env: Mapping[str, str] | None = None,
    ) -> subprocess.CompletedProcess[str]:
        """Run *argv* in *cwd* with *env*. Raises on failure."""
        logger.debug("Running %s in %s", " ".join(argv), cwd)
        return subprocess.run(
            list(argv),
            cwd=cwd,
            env=dict(env) if env is not None else None,
            capture_output=True,
            text=True,
            check=True,
        )


def describe_failure(exc: OSError | subprocess.CalledProcessError) -> str:
    """Render a process failure as a single message, including stderr."""
    if isinstance(exc, subprocess.CalledProcessError):
        stderr = (exc.stderr or "").strip()
        if stderr:
            return f"{exc} ({stderr})"
    return str(exc)
