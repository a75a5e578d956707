"""Tests for the root wirectl group: help, version, global flags, config errors."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from wirectl import __version__
from wirectl.cli import cli

COMMANDS = ["add", "remove", "list", "draw", "dot"]


@pytest.mark.usefixtures("_isolated_workspace")
class TestRootGroup:
    def test_no_args_prints_help(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert result.stdout.startswith("Usage")
        for name in COMMANDS:
            assert name in result.stdout
        assert not (tmp_path / "links_data.xml").exists()

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert result.stdout.strip() == f"wirectl, version {__version__}"

    @pytest.mark.parametrize("command", COMMANDS)
    def test_command_help(self, cli_runner: CliRunner, command: str) -> None:
        result = cli_runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0, result.output
        usage = result.stdout.splitlines()[0]
        assert usage.startswith("Usage:")
        assert f" {command} " in usage


@pytest.mark.usefixtures("_isolated_workspace")
class TestGlobalFlags:
    def test_json_applies_to_every_command(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["add", "A::p", "B::q"])
        for args in (["list", "A"], ["draw"], ["remove", "A::p", "B::q"]):
            payload = json.loads(cli_runner.invoke(cli, ["--json", *args]).stdout)
            assert payload["ok"] is True

    def test_json_beats_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-q", "draw"])
        assert json.loads(result.stdout)["op"] == "draw"

    def test_verbose_logs_to_stderr_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "--log-json", "add", "A::p", "B::q"])
        assert result.exit_code == 0
        assert result.stdout.startswith("Linked:")
        events = [json.loads(line) for line in result.stderr.splitlines()]
        assert "Linked A::p:unknown -> B::q:unknown" in [e["event"] for e in events]


@pytest.mark.usefixtures("_isolated_workspace")
class TestConfigErrors:
    def test_missing_config_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", "missing.toml", "draw"])
        assert result.exit_code == 1
        assert "Config file not found" in result.stderr
        assert not (tmp_path / "links_data.xml").exists()

    def test_invalid_config_value(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "wirectl.toml").write_text('[export]\nrankdir = "UP"\n')
        result = cli_runner.invoke(cli, ["draw"])
        assert result.exit_code == 1
        assert "Invalid config" in result.stderr

    def test_config_not_read_for_version(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["-c", "missing.toml", "--version"]).exit_code == 0
