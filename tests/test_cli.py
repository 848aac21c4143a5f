"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from lib_messages import __init__conf__
from lib_messages import cli as cli_mod
from lib_messages import config as messages_config
from lib_messages.lib_messages import summary_info


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (messages_config.ENV_DUMP_FORMAT, messages_config.ENV_NO_COLOR, messages_config.DOTENV_ENV_VAR):
        monkeypatch.delenv(name, raising=False)


def test_cli_without_subcommand_prints_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, [])
    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_info_command_matches_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["info"])
    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_version_option() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == __init__conf__.version


def test_cli_demo_json_prints_serialised_collection() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo", "--format", "json"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert list(payload) == ["debug", "info", "success", "notice", "validation", "warning", "error", "critical", "alert", "emergency"]
    assert payload["validation"][0]["message"] == "Email address is invalid"


def test_cli_demo_text_lists_highest_severity_first() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo", "--no-color"])
    assert result.exit_code == 0
    lines = [line for line in result.output.splitlines() if line.strip()]
    assert lines[0].split()[0] == "EMERGENCY"
    assert lines[-1].split()[0] == "DEBUG"
    assert "\x1b[" not in result.output


def test_cli_demo_reads_format_from_environment() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo"], env={messages_config.ENV_DUMP_FORMAT: "json"})
    assert result.exit_code == 0
    assert json.loads(result.output)["emergency"][0]["message"] == "Service unavailable"


def test_cli_rejects_unknown_format_option() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo", "--format", "yaml"])
    assert result.exit_code == 2


def test_cli_rejects_unknown_format_in_environment() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["info"], env={messages_config.ENV_DUMP_FORMAT: "yaml"})
    assert result.exit_code == 2
    assert "Unsupported dump format" in result.output


def test_main_returns_zero_for_info(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["info"]) == 0
    assert "Info for lib_messages" in capsys.readouterr().out


def test_main_returns_usage_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["no-such-command"]) == 2
    assert "No such command" in capsys.readouterr().err
