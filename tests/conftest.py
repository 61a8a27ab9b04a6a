"""Shared pytest fixtures and test helpers for gov tests."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Generator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from gov.config.settings import GovSettings
from gov.infrastructure.process import CommandRunner
from gov.infrastructure.workspace import Workspace


@dataclass
class Call:
    argv: tuple[str, ...]
    cwd: Path
    env: dict[str, str]


@dataclass
class RecordingRunner:
    """Stand-in for CommandRunner that records argv instead of spawning.

    ``failures`` maps a space-joined argv to the exception to raise.
    """

    calls: list[Call] = field(default_factory=list)
    failures: dict[str, BaseException] = field(default_factory=dict)

    def run(
        self,
        *argv: str,
        cwd: Path,
        env: Mapping[str, str] | None = None,
    ) -> subprocess.CompletedProcess[str]:
        self.calls.append(Call(argv=argv, cwd=cwd, env=dict(env or {})))
        exc = self.failures.get(" ".join(argv))
        if exc is not None:
            raise exc
        return subprocess.CompletedProcess(list(argv), 0, stdout="", stderr="")

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        return [call.argv for call in self.calls]


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """AppContext reconfigures logging on every CLI invocation; undo it."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    gov = logging.getLogger("gov")
    gov_level = gov.level
    yield
    structlog.contextvars.clear_contextvars()
    root.handlers = original_handlers
    root.setLevel(original_level)
    gov.setLevel(gov_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def workspace(project_dir: Path, home: Path) -> Workspace:
    """Workspace over a plain dict, detached from os.environ."""
    return Workspace(
        cwd=project_dir,
        env={"HOME": str(home), "PATH": os.pathsep.join(["/usr/local/bin", "/usr/bin"])},
    )


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> GovSettings:
    """Default settings, unaffected by the caller's GOV_* environment."""
    for key in list(os.environ):
        if key.startswith("GOV_"):
            monkeypatch.delenv(key)
    return GovSettings()


@pytest.fixture
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def patched_runner(
    monkeypatch: pytest.MonkeyPatch, recording_runner: RecordingRunner
) -> RecordingRunner:
    """Route every CommandRunner.run through a RecordingRunner."""

    def fake_run(
        self: CommandRunner, *argv: str, cwd: Path, env: Mapping[str, str] | None = None
    ) -> subprocess.CompletedProcess[str]:
        return recording_runner.run(*argv, cwd=cwd, env=env)

    monkeypatch.setattr(CommandRunner, "run", fake_run)
    return recording_runner


@pytest.fixture
def _isolated_project(
    project_dir: Path, home: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Run CLI commands from a temp project dir with a temp HOME.

    GOROOT and PATH are recorded first so in-process changes made by
    ``activate``/``deactivate`` are undone after the test.
    """
    for key in list(os.environ):
        if key.startswith("GOV_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(project_dir)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("PATH", os.environ.get("PATH", ""))
    monkeypatch.setenv("GOROOT", "unset-me")
    monkeypatch.delenv("GOROOT")
