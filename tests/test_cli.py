"""Tests for the root isoval CLI."""

from pathlib import Path

from click.testing import CliRunner

from isoval import __version__
from isoval.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "isoval" in result.output
    for command in ("validate", "decode", "encode", "messages"):
        assert command in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_invalid_config_reported(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "broken.toml"
    config.write_text("[codec\n")
    result = cli_runner.invoke(cli, ["-c", str(config), "messages"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
