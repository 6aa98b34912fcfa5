"""Checkout failures.

Both are recoverable user-input conditions: the shopper adds items (or a
chargeable item) and retries. Checkout raises them before touching the cart.
"""

from protean.exceptions import InvalidOperationError


class CheckoutError(InvalidOperationError):
    """Checkout preconditions were not met."""


class EmptyCartError(CheckoutError):
    def __init__(self, message: str = "Cart is empty", **kwargs) -> None:
        super().__init__(message, **kwargs)


class InvalidTotalError(CheckoutError):
    def __init__(self, total: float, minimum: float, **kwargs) -> None:
        super().__init__(
            f"Invalid total amount: {total:.2f} is below the minimum chargeable amount of {minimum:.2f}",
            **kwargs,
        )
        self.total = total
        self.minimum = minimum
