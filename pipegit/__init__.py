"""pipegit - git introspection and checkout helpers for CI pipelines."""

from pipegit.checkout import (
    GitCLICheckout,
    RecordingCheckout,
    SCMCheckout,
    gerrit_patchset_checkout,
    ssh_checkout,
)
from pipegit.exceptions import (
    CheckoutError,
    CommandExecutionError,
    InvalidConfigurationError,
    MissingConfigurationError,
    PipeGitError,
)
from pipegit.introspect import get_commit, get_describe
from pipegit.models import GerritCheckoutRequest, GerritTriggerContext, SSHCheckoutRequest

__version__ = "0.1.0"
__all__ = [
    "get_commit",
    "get_describe",
    "ssh_checkout",
    "gerrit_patchset_checkout",
    "SSHCheckoutRequest",
    "GerritCheckoutRequest",
    "GerritTriggerContext",
    "SCMCheckout",
    "RecordingCheckout",
    "GitCLICheckout",
    "PipeGitError",
    "CommandExecutionError",
    "CheckoutError",
    "MissingConfigurationError",
    "InvalidConfigurationError",
]
