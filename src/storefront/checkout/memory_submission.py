"""In-memory order submission for development and testing.

Records every intent it receives and can be configured at runtime to accept
or refuse them.
"""

from uuid import uuid4

from storefront.checkout.intent import OrderIntent
from storefront.checkout.submission_port import OrderSubmission, SubmissionResult


class InMemoryOrderSubmission(OrderSubmission):
    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Order creation failed"
        self.submitted: list[OrderIntent] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Order creation failed") -> None:
        """Configure submission behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def submit(self, intent: OrderIntent) -> SubmissionResult:
        self.submitted.append(intent)

        if self.should_succeed:
            return SubmissionResult(success=True, order_id=f"ord_{uuid4().hex[:12]}")
        return SubmissionResult(success=False, failure_reason=self.failure_reason)
