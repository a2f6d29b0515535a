"""Review-trigger context exported by gerrit-triggered builds."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

from pipegit.exceptions import MissingConfigurationError

# Field name -> environment variable set by the gerrit trigger
GERRIT_ENV_VARS = {
    "branch": "GERRIT_BRANCH",
    "name": "GERRIT_NAME",
    "host": "GERRIT_HOST",
    "port": "GERRIT_PORT",
    "project": "GERRIT_PROJECT",
    "refspec": "GERRIT_REFSPEC",
}


class GerritTriggerContext(BaseModel):
    """Values describing the patchset that triggered the current build."""

    branch: str = Field(..., min_length=1, description="Target branch of the change")
    name: str = Field(..., min_length=1, description="User name for the SSH remote")
    host: str = Field(..., min_length=1)
    port: str = Field(..., min_length=1)
    project: str = Field(..., min_length=1)
    refspec: str = Field(..., min_length=1, description="Patchset ref, e.g. refs/changes/45/12345/2")

    model_config = {"frozen": True}

    @property
    def remote_url(self) -> str:
        return f"ssh://{self.name}@{self.host}:{self.port}/{self.project}.git"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GerritTriggerContext:
        """Read the context from ``GERRIT_*`` environment variables.

        Raises:
            MissingConfigurationError: If any variable is unset or empty,
                which happens when not running from a review event.
        """
        environ = os.environ if environ is None else environ
        values = {field: environ.get(var, "") for field, var in GERRIT_ENV_VARS.items()}
        missing = [GERRIT_ENV_VARS[field] for field, value in values.items() if not value]
        if missing:
            raise MissingConfigurationError(missing, context="gerrit trigger variables")
        return cls(**values)
