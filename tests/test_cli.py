"""Tests for the pipegit CLI."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from conftest import git, requires_git
from pipegit.cli import main
from pipegit.exceptions import CommandExecutionError
from pipegit.models.gerrit import GERRIT_ENV_VARS


@pytest.fixture
def cli() -> CliRunner:
    return CliRunner()


class TestIntrospectionCommands:
    """Tests for commit and describe commands."""

    def test_commit(self, cli: CliRunner) -> None:
        with patch("pipegit.cli.get_commit", return_value="abc123") as get_commit:
            result = cli.invoke(main, ["commit"])

        assert result.exit_code == 0
        assert result.output.strip() == "abc123"
        get_commit.assert_called_once()

    def test_describe_short(self, cli: CliRunner) -> None:
        with patch("pipegit.cli.get_describe", return_value="v1.2.0-5") as get_describe:
            result = cli.invoke(main, ["describe", "--short"])

        assert result.exit_code == 0
        assert "v1.2.0-5" in result.output
        assert get_describe.call_args.args[0] is True

    def test_failure_exits_non_zero(self, cli: CliRunner) -> None:
        error = CommandExecutionError(["git", "describe", "--tags"], 128, stderr="fatal: No names found")
        with patch("pipegit.cli.get_describe", side_effect=error):
            result = cli.invoke(main, ["describe"])

        assert result.exit_code == 1
        assert "No names found" in result.output

    def test_long_error_stays_on_one_line(self, cli: CliRunner) -> None:
        """Error messages are not wrapped at the console width."""
        stderr = "fatal: " + " ".join(["no tag can describe this commit"] * 6)
        error = CommandExecutionError(["git", "describe", "--tags"], 128, stderr=stderr)
        with patch("pipegit.cli.get_describe", side_effect=error):
            result = cli.invoke(main, ["describe"])

        assert result.exit_code == 1
        error_lines = [line for line in result.output.splitlines() if line.startswith("Error:")]
        assert len(error_lines) == 1
        assert error_lines[0].endswith(stderr)

    @requires_git
    def test_commit_real_repo(self, cli: CliRunner, make_repo) -> None:
        repo: Path = make_repo()
        result = cli.invoke(main, ["--repo", str(repo), "commit"])

        assert result.exit_code == 0
        assert git(repo, "rev-parse", "HEAD") in result.output


class TestCheckoutCommands:
    """Tests for checkout commands in dry-run mode."""

    def test_ssh_dry_run(self, cli: CliRunner) -> None:
        result = cli.invoke(
            main,
            [
                "checkout", "ssh",
                "--credentials-id", "u",
                "--branch", "main",
                "--host", "h",
                "--project", "p",
                "--merge",
                "--dry-run",
            ],
        )

        assert result.exit_code == 0, result.output
        assert '"url": "ssh://u@h:29418/p.git"' in result.output
        assert '"localBranch": "main"' in result.output
        assert '"relativeTargetDir": "./"' in result.output

    def test_ssh_empty_field(self, cli: CliRunner) -> None:
        result = cli.invoke(
            main,
            ["checkout", "ssh", "--credentials-id", "", "--branch", "main",
             "--host", "h", "--project", "p", "--dry-run"],
        )

        assert result.exit_code == 1
        assert "credentials" in result.output

    def test_gerrit_dry_run(
        self, cli: CliRunner, gerrit_env: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        for key, value in gerrit_env.items():
            monkeypatch.setenv(key, value)

        result = cli.invoke(main, ["checkout", "gerrit", "--credentials-id", "c", "--wipe-out", "--dry-run"])

        assert result.exit_code == 0, result.output
        assert '"refspec": "refs/changes/45/12345/2"' in result.output
        assert '"$class": "WipeWorkspace"' in result.output
        assert "LocalBranch" not in result.output

    def test_gerrit_outside_review_event(
        self, cli: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        for var in GERRIT_ENV_VARS.values():
            monkeypatch.delenv(var, raising=False)

        result = cli.invoke(main, ["checkout", "gerrit", "--credentials-id", "c", "--dry-run"])

        assert result.exit_code == 1
        assert "GERRIT_REFSPEC" in result.output

    def test_plan_dry_run(self, cli: CliRunner, temp_dir: Path) -> None:
        plan = temp_dir / "plan.yaml"
        plan.write_text(
            "checkouts:\n"
            "  - type: ssh\n"
            "    credentialsId: u\n"
            "    branch: main\n"
            "    host: h\n"
            "    project: p\n"
        )

        result = cli.invoke(main, ["checkout", "plan", str(plan), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert '"name": "origin"' in result.output

    def test_plan_malformed_yaml(self, cli: CliRunner, temp_dir: Path) -> None:
        plan = temp_dir / "plan.yaml"
        plan.write_text("checkouts: [\n  - type: ssh\n")

        result = cli.invoke(main, ["checkout", "plan", str(plan), "--dry-run"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error:" in result.output
        assert "Cannot parse checkout plan" in result.output

    @requires_git
    def test_ssh_real_checkout_failure(self, cli: CliRunner, temp_dir: Path) -> None:
        """An unreachable remote aborts with an error."""
        result = cli.invoke(
            main,
            ["--repo", str(temp_dir), "checkout", "ssh", "--credentials-id", "u",
             "--branch", "main", "--host", "invalid.invalid", "--project", "p", "--port", "1"],
            env={"GIT_SSH_COMMAND": "false"},
        )

        assert result.exit_code == 1
        assert "Checkout into" in result.output
