"""Declarative checkout specification passed to an SCM collaborator."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

GERRIT_TRIGGER_CHOOSER = "GerritTriggerBuildChooser"


class ExtensionKind(str, Enum):
    """Checkout behaviours understood by the SCM collaborator."""

    CLEAN_CHECKOUT = "CleanCheckout"
    RELATIVE_TARGET_DIRECTORY = "RelativeTargetDirectory"
    LOCAL_BRANCH = "LocalBranch"
    WIPE_WORKSPACE = "WipeWorkspace"
    BUILD_CHOOSER_SETTING = "BuildChooserSetting"


class CheckoutExtension(BaseModel):
    """A single checkout behaviour with its parameter, if any."""

    kind: ExtensionKind
    relative_target_dir: str | None = None
    local_branch: str | None = None
    build_chooser: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def clean(cls) -> CheckoutExtension:
        return cls(kind=ExtensionKind.CLEAN_CHECKOUT)

    @classmethod
    def relative_target_directory(cls, target_dir: str) -> CheckoutExtension:
        return cls(kind=ExtensionKind.RELATIVE_TARGET_DIRECTORY, relative_target_dir=target_dir)

    @classmethod
    def local(cls, branch: str) -> CheckoutExtension:
        """Check out to a local branch instead of a detached HEAD."""
        return cls(kind=ExtensionKind.LOCAL_BRANCH, local_branch=branch)

    @classmethod
    def wipe_workspace(cls) -> CheckoutExtension:
        return cls(kind=ExtensionKind.WIPE_WORKSPACE)

    @classmethod
    def gerrit_trigger_chooser(cls) -> CheckoutExtension:
        """Select the revision of the triggering gerrit event."""
        return cls(kind=ExtensionKind.BUILD_CHOOSER_SETTING, build_chooser=GERRIT_TRIGGER_CHOOSER)

    def to_native(self) -> dict[str, Any]:
        """Translate to the collaborator's ``$class`` dictionary form."""
        native: dict[str, Any] = {"$class": self.kind.value}
        if self.kind == ExtensionKind.RELATIVE_TARGET_DIRECTORY:
            native["relativeTargetDir"] = self.relative_target_dir
        elif self.kind == ExtensionKind.LOCAL_BRANCH:
            native["localBranch"] = self.local_branch
        elif self.kind == ExtensionKind.BUILD_CHOOSER_SETTING:
            native["buildChooser"] = {"$class": self.build_chooser}
        return native


class RemoteConfig(BaseModel):
    """A named remote with credentials, URL and optional refspec."""

    name: str = Field(..., description="Remote name (origin, gerrit, ...)")
    url: str = Field(..., description="Clone URL")
    credentials_id: str = Field(..., description="Credentials used to reach the remote")
    refspec: str | None = Field(default=None, description="Refspec to fetch instead of the branch")

    model_config = {"frozen": True}

    def to_native(self) -> dict[str, Any]:
        native: dict[str, Any] = {
            "credentialsId": self.credentials_id,
            "name": self.name,
            "url": self.url,
        }
        if self.refspec is not None:
            native["refspec"] = self.refspec
        return native


class GitSCMSpec(BaseModel):
    """Complete checkout specification: branches, extensions and remotes."""

    branches: tuple[str, ...] = Field(default_factory=tuple)
    extensions: tuple[CheckoutExtension, ...] = Field(default_factory=tuple)
    remotes: tuple[RemoteConfig, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @property
    def branch(self) -> str | None:
        """First requested branch, if any."""
        return self.branches[0] if self.branches else None

    def has_extension(self, kind: ExtensionKind) -> bool:
        return any(ext.kind == kind for ext in self.extensions)

    def extension(self, kind: ExtensionKind) -> CheckoutExtension | None:
        """Return the first extension of the given kind, or None."""
        for ext in self.extensions:
            if ext.kind == kind:
                return ext
        return None

    def to_native(self) -> dict[str, Any]:
        """Translate to the collaborator's ``GitSCM`` dictionary form."""
        return {
            "$class": "GitSCM",
            "branches": [{"name": name} for name in self.branches],
            "extensions": [ext.to_native() for ext in self.extensions],
            "userRemoteConfigs": [remote.to_native() for remote in self.remotes],
        }
