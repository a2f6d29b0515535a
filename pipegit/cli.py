"""CLI commands for pipegit."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from pipegit.checkout import (
    GitCLICheckout,
    RecordingCheckout,
    SCMCheckout,
    gerrit_patchset_checkout,
    ssh_checkout,
)
from pipegit.config import CheckoutPlan, run_plan
from pipegit.exceptions import PipeGitError
from pipegit.introspect import get_commit, get_describe
from pipegit.models.requests import GerritCheckoutRequest, SSHCheckoutRequest
from pipegit.runner import CommandRunner

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    raise SystemExit(1)


def _get_scm(ctx: click.Context, dry_run: bool) -> SCMCheckout:
    if dry_run:
        return RecordingCheckout()
    return GitCLICheckout(ctx.obj["repo"])


def _echo_specs(specs: list) -> None:
    natives = [spec.to_native() for spec in specs]
    click.echo(json.dumps(natives[0] if len(natives) == 1 else natives, indent=2))


@click.group()
@click.option("--repo", default=".", type=click.Path(file_okay=False), help="Working directory")
@click.option("--verbose", "-v", is_flag=True, help="Log every git command")
@click.pass_context
def main(ctx: click.Context, repo: str, verbose: bool) -> None:
    """pipegit - git helpers for CI pipelines."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    ctx.ensure_object(dict)
    ctx.obj["repo"] = Path(repo)
    ctx.obj["runner"] = CommandRunner(repo)


@main.command()
@click.pass_context
def commit(ctx: click.Context) -> None:
    """Print the commit hash of HEAD."""
    try:
        click.echo(get_commit(ctx.obj["runner"]))
    except PipeGitError as e:
        _fail(str(e))


@main.command()
@click.option("--short", "use_short", is_flag=True, help="Drop the -g<sha> suffix")
@click.pass_context
def describe(ctx: click.Context, use_short: bool) -> None:
    """Describe HEAD using the most recent tag."""
    try:
        click.echo(get_describe(use_short, ctx.obj["runner"]))
    except PipeGitError as e:
        _fail(str(e))


@main.group()
def checkout() -> None:
    """Clone and check out sources."""
    pass


@checkout.command("ssh")
@click.option("--credentials-id", required=True, help="User id for the SSH remote")
@click.option("--branch", required=True, help="Branch to check out")
@click.option("--host", required=True, help="Gerrit/CI hostname")
@click.option("--project", required=True, help="Project name")
@click.option("--target-dir", default="./", help="Directory relative to the workspace")
@click.option("--port", default="29418", help="SSH port")
@click.option("--merge", "with_merge", is_flag=True, help="Check out to a local branch")
@click.option("--dry-run", is_flag=True, help="Print the checkout spec only")
@click.pass_context
def checkout_ssh(
    ctx: click.Context,
    credentials_id: str,
    branch: str,
    host: str,
    project: str,
    target_dir: str,
    port: str,
    with_merge: bool,
    dry_run: bool,
) -> None:
    """Check out a branch of a project over SSH."""
    try:
        request = SSHCheckoutRequest(
            credentials_id=credentials_id,
            branch=branch,
            host=host,
            project=project,
            target_dir=target_dir,
            port=port,
            with_merge=with_merge,
        )
        spec = ssh_checkout(request, _get_scm(ctx, dry_run))
    except (PipeGitError, ValidationError) as e:
        _fail(str(e))

    if dry_run:
        _echo_specs([spec])


@checkout.command("gerrit")
@click.option("--credentials-id", required=True, help="Credentials for the gerrit remote")
@click.option("--merge", "with_merge", is_flag=True, help="Check out onto GERRIT_BRANCH")
@click.option("--wipe-out", "with_wipe_out", is_flag=True, help="Wipe the workspace first")
@click.option("--dry-run", is_flag=True, help="Print the checkout spec only")
@click.pass_context
def checkout_gerrit(
    ctx: click.Context,
    credentials_id: str,
    with_merge: bool,
    with_wipe_out: bool,
    dry_run: bool,
) -> None:
    """Check out the patchset that triggered the build (GERRIT_* variables)."""
    try:
        request = GerritCheckoutRequest(
            credentials_id=credentials_id,
            with_merge=with_merge,
            with_wipe_out=with_wipe_out,
        )
        spec = gerrit_patchset_checkout(request, _get_scm(ctx, dry_run))
    except (PipeGitError, ValidationError) as e:
        _fail(str(e))

    if dry_run:
        _echo_specs([spec])


@checkout.command("plan")
@click.argument("plan_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--dry-run", is_flag=True, help="Print the checkout specs only")
@click.pass_context
def checkout_plan(ctx: click.Context, plan_file: str, dry_run: bool) -> None:
    """Run every checkout listed in a YAML plan."""
    try:
        plan = CheckoutPlan.from_yaml(Path(plan_file))
        specs = run_plan(plan, _get_scm(ctx, dry_run))
    except (PipeGitError, ValidationError) as e:
        _fail(str(e))

    if dry_run:
        _echo_specs(specs)
    else:
        console.print(f"[green]Completed {len(specs)} checkout(s)[/green]")


if __name__ == "__main__":
    main()
