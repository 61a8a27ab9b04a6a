"""Tests for the root gov CLI and the main() entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from gov import __version__
from gov.cli import cli, main

EXPECTED_COMMANDS = [
    "init",
    "build",
    "create",
    "deps",
    "activate",
    "deactivate",
    "use",
    "save-bin",
]


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Go virtual environment tool" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert result.exit_code == 0, result.output


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_examples(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--examples"])
    assert result.exit_code == 0
    assert f"gov {name}" in result.output


class TestMain:
    def test_unknown_command_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["frobnicate"]) == 1
        assert "No such command" in capsys.readouterr().out

    def test_missing_argument_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["create"]) == 1
        assert "Missing argument" in capsys.readouterr().out

    def test_version_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--version"]) == 0
        assert __version__ in capsys.readouterr().out

    @pytest.mark.usefixtures("_isolated_project")
    def test_use_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-q", "use", "1.22.4"]) == 0
        assert capsys.readouterr().out.strip() == "OK: use"

    @pytest.mark.usefixtures("_isolated_project")
    def test_wrongly_typed_config_exits_one(
        self, project_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (project_dir / "gov.toml").write_text("[env]\ndir_name = 3\n", encoding="utf-8")

        assert main(["use", "1.22"]) == 1
        out = capsys.readouterr().out
        assert "Invalid config in" in out
        assert "gov.toml" in out
