"""Tests for the add command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from durctl.cli import cli
from durctl.services.duration import NAIVE_WARNING


@pytest.mark.usefixtures("isolated_cwd")
class TestAddCommand:
    def test_quiet_prints_end_instant(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["-q", "add", "1 day", "--start", "2025-03-09 00:00", "--tz", "America/Chicago"],
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "2025-03-10T05:00:00Z"

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["add", "7d", "--start", "2025-06-01T10:00:00Z", "--tz", "Asia/Tokyo"]
        )
        assert result.exit_code == 0, result.output
        assert "OK add_duration" in result.output
        assert "2025-06-08T10:00:00Z" in result.output
        assert "Asia/Tokyo" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "add", "1:30", "--start", "1741500000000", "--tz", "America/Chicago"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["ends_at"] == "2025-03-09T07:30:00Z"
        assert data["data"]["starts_at"] == "2025-03-09T06:00:00Z"
        assert data["data"]["duration"] == "PT1H30M"

    def test_default_start_is_now(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "add", "1 hour"])
        assert result.exit_code == 0, result.output
        assert result.output.strip().endswith("Z")

    def test_timezone_from_config(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        (isolated_cwd / "durctl.toml").write_text('[engine]\ntimezone = "Asia/Tokyo"\n')
        result = cli_runner.invoke(cli, ["-q", "add", "1 hour", "--start", "2025-03-01T10:00"])
        assert result.output.strip() == "2025-03-01T02:00:00Z"

    def test_timezone_from_env(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DURCTL_ENGINE__TIMEZONE", "America/Chicago")
        result = cli_runner.invoke(cli, ["-q", "add", "1 hour", "--start", "2025-03-01T10:00"])
        assert result.output.strip() == "2025-03-01T17:00:00Z"

    def test_tz_flag_beats_config(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        (isolated_cwd / "durctl.toml").write_text('[engine]\ntimezone = "Asia/Tokyo"\n')
        result = cli_runner.invoke(
            cli,
            ["-q", "add", "1 hour", "--start", "2025-03-01T10:00", "--tz", "America/Chicago"],
        )
        assert result.output.strip() == "2025-03-01T17:00:00Z"

    def test_naive_calendar_warns_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "add", "1 day", "--start", "0", "--calendar", "naive"]
        )
        assert result.exit_code == 0, result.output
        assert "1970-01-02T00:00:00Z" in result.output
        assert f"WARNING: {NAIVE_WARNING}" in result.output

    def test_naive_warning_in_json_payload(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "add", "1 day", "--start", "0", "--calendar", "naive"]
        )
        assert result.exit_code == 0, result.output
        payload = result.output[result.output.index("{") :]
        data = json.loads(payload)
        assert data["warnings"] == [NAIVE_WARNING]
        assert data["data"]["calendar"] == "naive"

    def test_invalid_calendar_choice(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add", "1 day", "--calendar", "lunar"])
        assert result.exit_code == 2

    @pytest.mark.parametrize(
        "args,code",
        [
            (["add", "1 day", "--tz", "Mars/Base"], "INVALID_TIMEZONE"),
            (["add", "soon"], "DURATION_UNPARSABLE"),
            (["add", "elephant minutes"], "UNRECOGNIZED_NUMBER_WORD"),
            (["add", "5:75"], "INVALID_COLON_FORM"),
            (["add", "1 day", "--start", "next tuesday"], "UNSUPPORTED_START_VALUE"),
            (["add", "1 day", "--start", "2025-02-30"], "INVALID_START_DATE"),
        ],
    )
    def test_errors_exit_1(self, cli_runner: CliRunner, args: list[str], code: str) -> None:
        result = cli_runner.invoke(cli, ["--json", *args])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == code

    def test_human_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add", "1 day", "--tz", "Mars/Base"])
        assert result.exit_code == 1
        assert "ERROR add_duration: Unknown IANA timezone: 'Mars/Base'" in result.output

    def test_epoch_default_start_from_config(
        self, cli_runner: CliRunner, isolated_cwd: Path
    ) -> None:
        (isolated_cwd / "durctl.toml").write_text("[engine]\ndefault_start = 1741500000000\n")
        result = cli_runner.invoke(cli, ["-q", "add", "1 day", "--tz", "America/Chicago"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "2025-03-10T05:00:00Z"

    @pytest.mark.parametrize(
        "args,code",
        [
            (
                ["add", "1 hour", "--start", "0001-01-01T00:00:00Z", "--tz", "America/Chicago"],
                "INVALID_START_DATE",
            ),
            (["add", "--", "-5 minutes"], "DURATION_UNPARSABLE"),
            (["add", "1 day", "--calendar", "naive", "--tz", "Not/AZone"], "INVALID_TIMEZONE"),
        ],
    )
    def test_rejected_inputs_exit_1(
        self, cli_runner: CliRunner, args: list[str], code: str
    ) -> None:
        result = cli_runner.invoke(cli, ["--json", *args])
        assert result.exit_code == 1, result.output
        data = json.loads(result.output)
        assert data["error"]["code"] == code
