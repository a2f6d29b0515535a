"""Git introspection helpers: HEAD commit and tag-based describe."""

from __future__ import annotations

import re
from dataclasses import dataclass

from pipegit.runner import CommandRunner

# Abbreviated-commit suffix appended by `git describe` when HEAD is past the tag
DESCRIBE_SUFFIX_RE = re.compile(r"-g[0-9a-f]+$")
DESCRIBE_RE = re.compile(r"^(?P<tag>.+)-(?P<commits>\d+)-g(?P<sha>[0-9a-f]+)$")


@dataclass(frozen=True)
class DescribeResult:
    """Parsed output of ``git describe --tags``."""

    tag: str
    commits: int = 0
    sha: str | None = None

    @property
    def short(self) -> str:
        """Describe string without the abbreviated commit suffix."""
        if self.sha is None:
            return self.tag
        return f"{self.tag}-{self.commits}"

    def __str__(self) -> str:
        if self.sha is None:
            return self.tag
        return f"{self.tag}-{self.commits}-g{self.sha}"


def get_commit(runner: CommandRunner | None = None) -> str:
    """Return the commit hash HEAD points at in the working directory."""
    runner = runner or CommandRunner()
    return runner.run(["git", "rev-parse", "HEAD"])


def get_describe(use_short: bool = False, runner: CommandRunner | None = None) -> str:
    """Describe HEAD using the most recent reachable tag.

    Args:
        use_short: Return ``{tag}-{numCommits}`` instead of the default
            ``{tag}-{numCommits}-g{sha}``.
        runner: Command runner to use, defaults to the current directory.
    """
    runner = runner or CommandRunner()
    describe = runner.run(["git", "describe", "--tags"])
    if use_short:
        return strip_describe_suffix(describe)
    return describe


def strip_describe_suffix(describe: str) -> str:
    """Remove a trailing ``-g<hex>`` suffix from a describe string."""
    return DESCRIBE_SUFFIX_RE.sub("", describe)


def parse_describe(describe: str) -> DescribeResult:
    """Split a describe string into tag, commit count and sha.

    An exact tag match (no suffix) yields ``commits=0`` and ``sha=None``.
    """
    describe = describe.strip()
    match = DESCRIBE_RE.match(describe)
    if match is None:
        return DescribeResult(tag=describe)
    return DescribeResult(
        tag=match.group("tag"),
        commits=int(match.group("commits")),
        sha=match.group("sha"),
    )
