"""Data models for pipegit."""

from pipegit.models.checkout import (
    CheckoutExtension,
    ExtensionKind,
    GitSCMSpec,
    RemoteConfig,
)
from pipegit.models.gerrit import GerritTriggerContext
from pipegit.models.requests import GerritCheckoutRequest, SSHCheckoutRequest

__all__ = [
    # Checkout specification
    "CheckoutExtension",
    "ExtensionKind",
    "GitSCMSpec",
    "RemoteConfig",
    # Requests
    "SSHCheckoutRequest",
    "GerritCheckoutRequest",
    # Trigger context
    "GerritTriggerContext",
]
