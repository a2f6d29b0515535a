"""Checkout request models supplied by pipeline callers."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_GERRIT_PORT = "29418"


class SSHCheckoutRequest(BaseModel):
    """Checkout of a named branch and project over SSH.

    Field names accept both snake_case and the pipeline DSL spelling
    (``credentialsId``, ``targetDir``, ``withMerge``).
    """

    credentials_id: str = Field(..., min_length=1, alias="credentialsId",
                                description="User id used in the SSH URL and as credentials")
    branch: str = Field(..., min_length=1)
    host: str = Field(..., min_length=1, description="Gerrit/CI hostname")
    project: str = Field(..., min_length=1)
    target_dir: str = Field(default="./", alias="targetDir")
    port: str = Field(default=DEFAULT_GERRIT_PORT)
    with_merge: bool = Field(default=False, alias="withMerge",
                             description="Check out to a local branch to avoid detached HEAD")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("port", mode="before")
    @classmethod
    def port_as_str(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def remote_url(self) -> str:
        return f"ssh://{self.credentials_id}@{self.host}:{self.port}/{self.project}.git"


class GerritCheckoutRequest(BaseModel):
    """Checkout of the gerrit patchset that triggered the build."""

    credentials_id: str = Field(..., min_length=1, alias="credentialsId")
    with_merge: bool = Field(default=False, alias="withMerge")
    with_wipe_out: bool = Field(default=False, alias="withWipeOut",
                                description="Wipe the workspace and force a fresh clone")

    model_config = {"populate_by_name": True, "frozen": True}
