"""Tests for CommandRunner — real subprocesses via the running interpreter."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from gov.infrastructure.process import CommandRunner, describe_failure


class TestCommandRunner:
    def test_runs_in_given_cwd(self, tmp_path: Path) -> None:
        result = CommandRunner().run(
            sys.executable, "-c", "import os; print(os.getcwd())", cwd=tmp_path
        )
        assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()

    def test_passes_environment(self, tmp_path: Path) -> None:
        env = {**os.environ, "GOROOT": "/opt/gov-probe"}
        result = CommandRunner().run(
            sys.executable,
            "-c",
            "import os; print(os.environ['GOROOT'])",
            cwd=tmp_path,
            env=env,
        )
        assert result.stdout.strip() == "/opt/gov-probe"

    def test_nonzero_exit_raises(self, tmp_path: Path) -> None:
        with pytest.raises(subprocess.CalledProcessError) as excinfo:
            CommandRunner().run(sys.executable, "-c", "import sys; sys.exit(3)", cwd=tmp_path)
        assert excinfo.value.returncode == 3

    def test_missing_binary_raises_oserror(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            CommandRunner().run("gov-definitely-not-a-binary", cwd=tmp_path)


class TestDescribeFailure:
    def test_includes_stderr(self) -> None:
        exc = subprocess.CalledProcessError(1, ["go", "build"], stderr="  no Go files\n")
        message = describe_failure(exc)
        assert "exit status 1" in message or "returned non-zero exit status 1" in message
        assert message.endswith("(no Go files)")

    def test_without_stderr(self) -> None:
        exc = subprocess.CalledProcessError(1, ["go", "build"])
        assert describe_failure(exc) == str(exc)

    def test_oserror(self) -> None:
        exc = FileNotFoundError(2, "No such file or directory", "git")
        assert describe_failure(exc) == str(exc)
