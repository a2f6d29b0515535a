"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import shutil
import subprocess
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Generator

import pytest

from pipegit.models.gerrit import GerritTriggerContext

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git binary not available")


def git(repo: Path, *args: str) -> str:
    """Run a git command in ``repo`` with a fixed identity."""
    result = subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_repo(temp_dir: Path) -> Callable[[str], Path]:
    """Factory for git repositories on branch ``main`` with one commit."""

    def _make(name: str = "repo") -> Path:
        repo = temp_dir / name
        repo.mkdir()
        git(repo, "init", "-q")
        git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
        (repo / "README").write_text("initial\n")
        git(repo, "add", "README")
        git(repo, "commit", "-q", "-m", "initial")
        return repo

    return _make


@pytest.fixture
def gerrit_env() -> dict[str, str]:
    """Environment exported by a gerrit patchset-created event."""
    return {
        "GERRIT_BRANCH": "master",
        "GERRIT_NAME": "jenkins",
        "GERRIT_HOST": "review.example.org",
        "GERRIT_PORT": "29418",
        "GERRIT_PROJECT": "tools/ci",
        "GERRIT_REFSPEC": "refs/changes/45/12345/2",
    }


@pytest.fixture
def gerrit_context(gerrit_env: dict[str, str]) -> GerritTriggerContext:
    return GerritTriggerContext.from_env(gerrit_env)
