"""Build and submit checkout specifications.

Two flavours are supported:

1. SSH checkout of a named branch of a project (remote ``origin``)
2. Gerrit patchset checkout driven by the review-trigger context
   (remote ``gerrit``)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pipegit.models.checkout import CheckoutExtension, GitSCMSpec, RemoteConfig
from pipegit.models.gerrit import GerritTriggerContext

if TYPE_CHECKING:
    from pipegit.checkout.base import SCMCheckout
    from pipegit.models.requests import GerritCheckoutRequest, SSHCheckoutRequest

logger = logging.getLogger(__name__)


def build_ssh_checkout(request: SSHCheckoutRequest) -> GitSCMSpec:
    """Build the checkout spec for a branch of a project over SSH."""
    extensions = [
        CheckoutExtension.clean(),
        CheckoutExtension.relative_target_directory(request.target_dir),
    ]
    # Without a local branch the checkout leaves HEAD detached
    if request.with_merge:
        extensions.append(CheckoutExtension.local(request.branch))

    return GitSCMSpec(
        branches=[request.branch],
        extensions=extensions,
        remotes=[
            RemoteConfig(
                name="origin",
                url=request.remote_url,
                credentials_id=request.credentials_id,
            )
        ],
    )


def build_gerrit_checkout(
    request: GerritCheckoutRequest, context: GerritTriggerContext
) -> GitSCMSpec:
    """Build the checkout spec for the patchset that triggered the build."""
    extensions = [
        CheckoutExtension.clean(),
        CheckoutExtension.gerrit_trigger_chooser(),
    ]
    # "merge" the patchset onto a local copy of the target branch
    if request.with_merge:
        extensions.append(CheckoutExtension.local(context.branch))
    if request.with_wipe_out:
        extensions.append(CheckoutExtension.wipe_workspace())

    return GitSCMSpec(
        branches=[context.branch],
        extensions=extensions,
        remotes=[
            RemoteConfig(
                name="gerrit",
                url=context.remote_url,
                credentials_id=request.credentials_id,
                refspec=context.refspec,
            )
        ],
    )


def ssh_checkout(request: SSHCheckoutRequest, scm: SCMCheckout) -> GitSCMSpec:
    """Build an SSH checkout spec and submit it to ``scm``.

    Returns the submitted spec.
    """
    spec = build_ssh_checkout(request)
    logger.info("Checking out %s from %s", request.branch, request.remote_url)
    scm.checkout(spec)
    return spec


def gerrit_patchset_checkout(
    request: GerritCheckoutRequest,
    scm: SCMCheckout,
    context: GerritTriggerContext | None = None,
) -> GitSCMSpec:
    """Build a gerrit patchset checkout spec and submit it to ``scm``.

    When ``context`` is omitted it is read from the ``GERRIT_*``
    environment, raising MissingConfigurationError outside a review event.
    """
    if context is None:
        context = GerritTriggerContext.from_env()
    spec = build_gerrit_checkout(request, context)
    logger.info(
        "Checking out %s (%s) from %s", context.refspec, context.branch, context.remote_url
    )
    scm.checkout(spec)
    return spec
