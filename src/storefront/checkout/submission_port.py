"""Order submission port (abstract interface).

The engine has no network dependency of its own: it hands the order intent to
whatever adapter is installed and reports the adapter's answer back to the
caller without retrying or interpreting transport failures.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.checkout.intent import OrderIntent


@dataclass(frozen=True)
class SubmissionResult:
    """Result of an order submission attempt."""

    success: bool
    order_id: str | None = None
    failure_reason: str | None = None


class OrderSubmission(ABC):
    """Abstract order submission interface."""

    @abstractmethod
    def submit(self, intent: OrderIntent) -> SubmissionResult:
        """Hand an order intent over for persistence and fulfilment."""
        ...
