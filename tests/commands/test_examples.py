"""Tests for --examples and --help on CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from durctl.cli import cli

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["add", "--examples"], ["durctl add 7d", "--tz America/Chicago", "--start 1741500000000"]),
    (["parse", "--examples"], ["durctl parse", "5:30:15"]),
]

HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["add", "parse", "--json", "--quiet", "--verbose", "--log-json", "--config"]),
    (["add", "--help"], ["DURATION", "--start", "--tz", "--calendar", "--examples"]),
    (["parse", "--help"], ["DURATION", "--examples"]),
]


@pytest.mark.usefixtures("isolated_cwd")
class TestExamples:
    @pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
    def test_examples(self, cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert f"Examples for 'cli {args[0]}':" in result.output
        for keyword in keywords:
            assert keyword in result.output

    @pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS)
    def test_help(self, cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        for keyword in keywords:
            assert keyword in result.output


def test_examples_skips_argument_validation(cli_runner: CliRunner, isolated_cwd: Path) -> None:
    result = cli_runner.invoke(cli, ["add", "--examples"])
    assert "Missing argument" not in result.output
