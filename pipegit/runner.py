"""Command execution for git invocations."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping
from pathlib import Path

from pipegit.exceptions import CommandExecutionError

logger = logging.getLogger(__name__)


class CommandRunner:
    """Run commands synchronously in a fixed working directory.

    String commands are passed to the shell, lists are executed directly.
    No retries are attempted; a non-zero exit raises CommandExecutionError.
    """

    def __init__(
        self,
        cwd: Path | str | None = None,
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> None:
        self.cwd = Path(cwd) if cwd is not None else None
        self.env = dict(env) if env is not None else None
        self.timeout = timeout

    def run(self, cmd: list[str] | str, capture: bool = True) -> str:
        """Run a command and return its stripped standard output.

        Returns an empty string when ``capture`` is False.
        """
        logger.debug("Running %s (cwd=%s)", cmd, self.cwd or ".")
        result = subprocess.run(
            cmd,
            cwd=self.cwd,
            env=self.env,
            shell=isinstance(cmd, str),
            capture_output=True,
            text=True,
            timeout=self.timeout,
        )

        if result.returncode != 0:
            logger.debug("Command failed (%d): %s", result.returncode, result.stderr.strip())
            raise CommandExecutionError(cmd, result.returncode, result.stdout, result.stderr)

        return result.stdout.strip() if capture else ""
