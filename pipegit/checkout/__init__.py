"""Checkout builders and SCM collaborators."""

from pipegit.checkout.base import RecordingCheckout, SCMCheckout
from pipegit.checkout.builders import (
    build_gerrit_checkout,
    build_ssh_checkout,
    gerrit_patchset_checkout,
    ssh_checkout,
)
from pipegit.checkout.git import GitCLICheckout

__all__ = [
    "SCMCheckout",
    "RecordingCheckout",
    "GitCLICheckout",
    "build_ssh_checkout",
    "build_gerrit_checkout",
    "ssh_checkout",
    "gerrit_patchset_checkout",
]
