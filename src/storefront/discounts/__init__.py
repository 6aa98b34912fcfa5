"""Discount code provider factory.

Provides get_provider() / set_provider() to swap rule catalogues:
- InMemoryDiscountCodeProvider with the built-in codes by default
- any other DiscountCodeProvider (promotions service, test double)
"""

from storefront.discounts.memory_adapter import InMemoryDiscountCodeProvider
from storefront.discounts.port import DiscountCodeProvider

_current_provider: DiscountCodeProvider | None = None


def get_provider() -> DiscountCodeProvider:
    """Return the current discount code provider. Defaults to the built-in catalogue."""
    global _current_provider
    if _current_provider is None:
        _current_provider = InMemoryDiscountCodeProvider()
    return _current_provider


def set_provider(provider: DiscountCodeProvider) -> None:
    """Override the active discount code provider (useful for tests)."""
    global _current_provider
    _current_provider = provider


def reset_provider() -> None:
    """Reset to the built-in catalogue."""
    global _current_provider
    _current_provider = None
