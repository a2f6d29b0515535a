"""Checkout collaborator backed by the local git binary."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

from pipegit.checkout.base import SCMCheckout
from pipegit.exceptions import CheckoutError, CommandExecutionError
from pipegit.models.checkout import ExtensionKind, GitSCMSpec
from pipegit.runner import CommandRunner

logger = logging.getLogger(__name__)


class GitCLICheckout(SCMCheckout):
    """Perform checkout specs with plain git commands in a workspace.

    Credentials are not managed here: the SSH user embedded in the remote
    URL and whatever SSH agent the caller runs are used as-is.
    """

    def __init__(
        self,
        workspace: Path | str,
        runner_factory: Callable[[Path], CommandRunner] = CommandRunner,
    ) -> None:
        self.workspace = Path(workspace)
        self.runner_factory = runner_factory

    def target_dir(self, spec: GitSCMSpec) -> Path:
        """Directory the spec checks out into."""
        ext = spec.extension(ExtensionKind.RELATIVE_TARGET_DIRECTORY)
        if ext is None or not ext.relative_target_dir:
            return self.workspace
        return self.workspace / ext.relative_target_dir

    def checkout(self, spec: GitSCMSpec) -> None:
        if not spec.remotes or spec.branch is None:
            raise CheckoutError("Checkout spec needs at least one remote and a branch")

        target = self.target_dir(spec)
        try:
            self._checkout(spec, target)
        except (CommandExecutionError, OSError) as e:
            raise CheckoutError(f"Checkout into {target} failed: {e}") from e

    def _checkout(self, spec: GitSCMSpec, target: Path) -> None:
        if spec.has_extension(ExtensionKind.WIPE_WORKSPACE) and target.exists():
            logger.info("Wiping %s", target)
            self._wipe(target)
        target.mkdir(parents=True, exist_ok=True)

        runner = self.runner_factory(target)
        self._configure_remotes(spec, target, runner)

        branch = spec.branch
        for remote in spec.remotes:
            refspec = remote.refspec or f"+refs/heads/{branch}:refs/remotes/{remote.name}/{branch}"
            runner.run(["git", "fetch", remote.name, refspec], capture=False)

        # The gerrit chooser builds exactly what the refspec fetch brought in
        if spec.has_extension(ExtensionKind.BUILD_CHOOSER_SETTING):
            revision = "FETCH_HEAD"
        else:
            revision = f"{spec.remotes[0].name}/{branch}"
        runner.run(["git", "checkout", "-f", revision], capture=False)

        local = spec.extension(ExtensionKind.LOCAL_BRANCH)
        if local is not None and local.local_branch:
            runner.run(["git", "checkout", "-B", local.local_branch], capture=False)

        if spec.has_extension(ExtensionKind.CLEAN_CHECKOUT):
            runner.run(["git", "clean", "-fdx"], capture=False)

        logger.info("Checked out %s in %s", revision, target)

    def _configure_remotes(self, spec: GitSCMSpec, target: Path, runner: CommandRunner) -> None:
        if not (target / ".git").exists():
            runner.run(["git", "init"], capture=False)
            existing: set[str] = set()
        else:
            existing = set(runner.run(["git", "remote"]).split())

        for remote in spec.remotes:
            action = "set-url" if remote.name in existing else "add"
            runner.run(["git", "remote", action, remote.name, remote.url], capture=False)

    @staticmethod
    def _wipe(target: Path) -> None:
        # Only the contents go: the target may be the current directory
        for entry in target.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
