"""Discount code provider port (abstract interface).

Defines the contract for looking up discount rules by code. The resolver only
ever talks to this interface, so the rule catalogue can be swapped (in-memory
defaults, a promotions service, a test double) without touching pricing.
"""

from abc import ABC, abstractmethod

from storefront.discounts.rule import DiscountRule


class DiscountCodeProvider(ABC):
    """Abstract discount rule catalogue."""

    @abstractmethod
    def lookup(self, code: str) -> DiscountRule | None:
        """Return the rule registered under an already-normalized code, or None."""
        ...
