"""Order submission factory.

Provides get_submission() / set_submission() to swap implementations:
- InMemoryOrderSubmission for development and testing
- an adapter posting to the order service in a deployed storefront
"""

from storefront.checkout.memory_submission import InMemoryOrderSubmission
from storefront.checkout.submission_port import OrderSubmission

_current_submission: OrderSubmission | None = None


def get_submission() -> OrderSubmission:
    """Return the current order submission. Defaults to InMemoryOrderSubmission."""
    global _current_submission
    if _current_submission is None:
        _current_submission = InMemoryOrderSubmission()
    return _current_submission


def set_submission(submission: OrderSubmission) -> None:
    """Override the active order submission (useful for tests)."""
    global _current_submission
    _current_submission = submission


def reset_submission() -> None:
    """Reset to the default in-memory submission."""
    global _current_submission
    _current_submission = None
