import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from neural_echo.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_analyze_command_prints_structure(tmp_path: Path, runner: CliRunner) -> None:
    output = tmp_path / "analysis.json"
    result = runner.invoke(app, ["analyze", "I love quiet mornings", "--seed", "3", "--output", str(output)])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["scaling_strategy"]["tier_name"] == "micro_enhance"
    assert len(payload["structure"]["nodes"]) == payload["scaling_strategy"]["node_count"]
    assert json.loads(output.read_text())["words"] == ["I", "love", "quiet", "mornings"]


def test_analyze_summary_from_file(tmp_path: Path, runner: CliRunner) -> None:
    source = tmp_path / "input.txt"
    source.write_text(" ".join(["table"] * 101), encoding="utf-8")
    result = runner.invoke(app, ["analyze", "--file", str(source), "--summary"])
    assert result.exit_code == 0, result.output
    summary = json.loads(result.stdout)
    assert summary["words"] == 101
    assert summary["tier"] == "medium_standard"
    assert summary["multiplier"] == 0.95


def test_analyze_requires_text(runner: CliRunner) -> None:
    result = runner.invoke(app, ["analyze"])
    assert result.exit_code == 2


def test_analyze_rejects_bad_config(tmp_path: Path, runner: CliRunner) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump({"cache": {"ttl_seconds": -1}}))
    result = runner.invoke(app, ["analyze", "hello", "--config", str(config_path)])
    assert result.exit_code == 2


def test_tiers_command(runner: CliRunner) -> None:
    result = runner.invoke(app, ["tiers"])
    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert len(lines) == 17
    assert lines[0].startswith("micro_boost")
    assert lines[-1].startswith("epic_maximum")


def test_diagnostics_command(tmp_path: Path, runner: CliRunner) -> None:
    report = tmp_path / "diagnostics.json"
    result = runner.invoke(app, ["diagnostics", "--output", str(report)])
    assert result.exit_code == 0, result.output
    assert json.loads(report.read_text())["passed"] is True


def test_unknown_log_level(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--log-level", "chatty", "tiers"])
    assert result.exit_code != 0
