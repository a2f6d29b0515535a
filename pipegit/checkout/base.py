"""SCM checkout collaborator interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pipegit.models.checkout import GitSCMSpec


class SCMCheckout(ABC):
    """Abstract base class for anything that performs a checkout spec."""

    @abstractmethod
    def checkout(self, spec: GitSCMSpec) -> None:
        """Clone and check out according to ``spec``.

        Raises:
            CheckoutError: If the checkout cannot be completed.
        """
        ...


class RecordingCheckout(SCMCheckout):
    """Collaborator that only records submitted specs (dry runs)."""

    def __init__(self) -> None:
        self.submissions: list[GitSCMSpec] = []

    def checkout(self, spec: GitSCMSpec) -> None:
        self.submissions.append(spec)
