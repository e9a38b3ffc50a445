"""Tests for the root passmatch CLI."""

from click.testing import CliRunner

from passmatch import __version__
from passmatch.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "passmatch" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_commands_registered(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for name in ("lookup", "search", "sites", "open"):
        assert name in result.output


def test_examples_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["lookup", "--examples"])
    assert result.exit_code == 0
    assert "passmatch lookup github.com" in result.output


def test_help_without_store(cli_runner: CliRunner) -> None:
    """--help never touches the password store."""
    result = cli_runner.invoke(cli, ["--store", "/definitely/missing", "lookup", "--help"])
    assert result.exit_code == 0
