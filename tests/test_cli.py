"""Tests for the root sflang CLI."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from sflang import __version__
from sflang.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "sflang" in result.output


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


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/none.toml", "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("command", ["compile", "format", "tags"])
def test_commands_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0


def test_short_help_and_version(cli_runner: CliRunner) -> None:
    assert cli_runner.invoke(cli, ["-h"]).exit_code == 0
    result = cli_runner.invoke(cli, ["-V"])
    assert result.exit_code == 0
    assert __version__ in result.output
