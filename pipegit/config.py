"""Checkout plans: several checkouts described in one YAML file.

Example::

    checkouts:
      - type: ssh
        credentialsId: mcp-ci-gerrit
        branch: mcp-0.1
        host: ci.mcp-ci.local
        project: project
        targetDir: src/project
      - type: gerrit
        credentialsId: mcp-ci-gerrit
        withMerge: true
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Literal, Union

import yaml
from pydantic import BaseModel, Field

from pipegit.checkout.builders import gerrit_patchset_checkout, ssh_checkout
from pipegit.exceptions import InvalidConfigurationError
from pipegit.models.gerrit import GerritTriggerContext
from pipegit.models.requests import GerritCheckoutRequest, SSHCheckoutRequest

if TYPE_CHECKING:
    from pipegit.checkout.base import SCMCheckout
    from pipegit.models.checkout import GitSCMSpec

logger = logging.getLogger(__name__)


class SSHPlanEntry(SSHCheckoutRequest):
    """SSH checkout entry in a plan."""

    type: Literal["ssh"] = "ssh"


class GerritPlanEntry(GerritCheckoutRequest):
    """Gerrit patchset checkout entry in a plan."""

    type: Literal["gerrit"] = "gerrit"


PlanEntry = Annotated[Union[SSHPlanEntry, GerritPlanEntry], Field(discriminator="type")]


class CheckoutPlan(BaseModel):
    """Ordered list of checkouts to perform."""

    checkouts: list[PlanEntry] = Field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: Path) -> CheckoutPlan:
        """Load a checkout plan from a YAML file."""
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise InvalidConfigurationError(f"Cannot parse checkout plan {path}: {e}") from e
        return cls.model_validate(data or {})


def run_plan(
    plan: CheckoutPlan,
    scm: SCMCheckout,
    context: GerritTriggerContext | None = None,
) -> list[GitSCMSpec]:
    """Submit every checkout of ``plan`` in order.

    Stops at the first failure. The gerrit context is read from the
    environment only if a gerrit entry needs it and none was given.
    """
    submitted: list[GitSCMSpec] = []
    for entry in plan.checkouts:
        if isinstance(entry, GerritPlanEntry):
            if context is None:
                context = GerritTriggerContext.from_env()
            submitted.append(gerrit_patchset_checkout(entry, scm, context))
        else:
            submitted.append(ssh_checkout(entry, scm))
    logger.info("Completed %d checkout(s)", len(submitted))
    return submitted
