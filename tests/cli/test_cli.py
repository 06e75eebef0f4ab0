"""CLI tests using click.testing.CliRunner."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from octocatalog.cli.main import cli
from octocatalog.signature import compute_signature, verify_signature


@pytest.fixture
def runner():
    """Click CliRunner for CLI testing."""
    return CliRunner()


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([
        {"actionId": "repo_select", "options": [
            {"text": "InnerGate", "value": "innergate"},
            {"text": "Gateway", "value": "gateway"},
        ]},
        {"actionId": "team_select", "options": []},
    ]))
    return path


def test_cli_help(runner: CliRunner):
    """--help lists every command."""
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for cmd in ("serve", "check-catalog", "sign"):
        assert cmd in result.output


def test_cli_version(runner: CliRunner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


# ---------------------------------------------------------------------------
# check-catalog
# ---------------------------------------------------------------------------


def test_check_catalog_ok(runner: CliRunner, catalog_path: Path):
    result = runner.invoke(cli, ["check-catalog", str(catalog_path)])
    assert result.exit_code == 0
    assert "repo_select\t2 option(s)" in result.output
    assert "team_select\t0 option(s)" in result.output
    assert "2 catalog entries OK" in result.output


def test_check_catalog_malformed(runner: CliRunner, tmp_path: Path):
    path = tmp_path / "bad.json"
    path.write_text("[{")
    result = runner.invoke(cli, ["check-catalog", str(path)])
    assert result.exit_code == 1
    assert "parsing catalog JSON" in result.output


def test_check_catalog_missing_file(runner: CliRunner, tmp_path: Path):
    result = runner.invoke(cli, ["check-catalog", str(tmp_path / "nope.json")])
    assert result.exit_code == 1
    assert "reading catalog file" in result.output


# ---------------------------------------------------------------------------
# sign
# ---------------------------------------------------------------------------


def test_sign_with_fixed_timestamp(runner: CliRunner):
    body = 'payload={"action_id":"repo_select"}'
    result = runner.invoke(cli, ["sign", "--secret", "s3cret", "--timestamp", "1700000000", body])
    assert result.exit_code == 0
    expected = compute_signature("s3cret", "1700000000", body.encode())
    assert "X-Slack-Request-Timestamp: 1700000000" in result.output
    assert f"X-Slack-Signature: {expected}" in result.output


def test_sign_defaults_to_now(runner: CliRunner):
    result = runner.invoke(cli, ["sign", "--secret", "s3cret", "hello"])
    assert result.exit_code == 0
    lines = dict(line.split(": ", 1) for line in result.output.strip().splitlines())
    ts = lines["X-Slack-Request-Timestamp"]
    assert verify_signature("s3cret", ts, b"hello", lines["X-Slack-Signature"])


def test_sign_reads_secret_from_env(runner: CliRunner):
    result = runner.invoke(
        cli, ["sign", "--timestamp", "1", "x"], env={"SLACK_SIGNING_SECRET": "from-env"}
    )
    assert result.exit_code == 0
    assert compute_signature("from-env", "1", b"x") in result.output


# ---------------------------------------------------------------------------
# serve
# ---------------------------------------------------------------------------


def test_serve_without_secret(runner: CliRunner):
    result = runner.invoke(cli, ["serve"], env={"SLACK_SIGNING_SECRET": ""})
    assert result.exit_code == 1
    assert "SLACK_SIGNING_SECRET" in result.output


def test_serve_with_bad_catalog(runner: CliRunner, tmp_path: Path):
    result = runner.invoke(
        cli,
        ["serve"],
        env={"SLACK_SIGNING_SECRET": "s3cret", "CONFIG_FILE": str(tmp_path / "nope.json")},
    )
    assert result.exit_code == 1
    assert "reading catalog file" in result.output


def test_serve_runs_uvicorn(runner: CliRunner, catalog_path: Path):
    with patch("octocatalog.cli.main.uvicorn.run") as mock_run:
        result = runner.invoke(
            cli,
            ["serve", "--port", "9999"],
            env={"SLACK_SIGNING_SECRET": "s3cret", "CONFIG_FILE": str(catalog_path)},
        )
    assert result.exit_code == 0, result.output
    mock_run.assert_called_once()
    _, kwargs = mock_run.call_args
    assert kwargs["port"] == 9999
    assert kwargs["host"] == "0.0.0.0"
