"""Exception hierarchy for pipegit."""

from __future__ import annotations


class PipeGitError(Exception):
    """Base class for all pipegit errors."""


class CommandExecutionError(PipeGitError):
    """A shell command exited with a non-zero status."""

    def __init__(
        self,
        cmd: list[str] | str,
        returncode: int,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        command_line = cmd if isinstance(cmd, str) else " ".join(cmd)
        message = f"Command '{command_line}' exited with status {returncode}"
        if stderr.strip():
            message += f": {stderr.strip()}"
        super().__init__(message)


class CheckoutError(PipeGitError):
    """The checkout collaborator could not complete a clone/checkout."""


class MissingConfigurationError(PipeGitError):
    """Required configuration values are absent or empty."""

    def __init__(self, missing: list[str], context: str = "configuration") -> None:
        self.missing = list(missing)
        super().__init__(f"Missing {context}: {', '.join(self.missing)}")


class InvalidConfigurationError(PipeGitError):
    """A configuration file could not be parsed."""
