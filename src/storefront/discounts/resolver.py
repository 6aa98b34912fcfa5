"""Discount resolution and the discount reducers.

``DiscountResolver`` answers "which rule does this code give me for this
subtotal?" as a pure query. ``apply_discount`` and ``remove_discount`` are the
only way the applied rule on a ``CartState`` changes.
"""

from dataclasses import dataclass

from storefront.cart.cart import CartState
from storefront.discounts import get_provider
from storefront.discounts.errors import DiscountRejection, InvalidDiscountCodeError
from storefront.discounts.port import DiscountCodeProvider
from storefront.discounts.rule import DiscountRule
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def normalize_code(code: str | None) -> str:
    return (code or "").strip().upper()


@dataclass(frozen=True)
class DiscountResolution:
    """Outcome of resolving a code: the rule, or the reason it was turned down."""

    rule: DiscountRule | None = None
    error: InvalidDiscountCodeError | None = None

    @property
    def ok(self) -> bool:
        return self.rule is not None


class DiscountResolver:
    def __init__(self, provider: DiscountCodeProvider | None = None) -> None:
        self._provider = provider

    @property
    def provider(self) -> DiscountCodeProvider:
        # Resolved lazily so set_provider() also affects resolvers built earlier
        return self._provider if self._provider is not None else get_provider()

    def resolve(self, code: str | None, subtotal_before_discount: float) -> DiscountRule | None:
        """Return the rule for ``code`` if it exists and the subtotal qualifies.

        Never raises: an unknown or ineligible code resolves to None.
        """
        return self.explain(code, subtotal_before_discount).rule

    def explain(self, code: str | None, subtotal_before_discount: float) -> DiscountResolution:
        normalized = normalize_code(code)
        if not normalized:
            return DiscountResolution(error=InvalidDiscountCodeError(normalized, DiscountRejection.BLANK_CODE))

        rule = self.provider.lookup(normalized)
        if rule is None:
            logger.debug("Unknown discount code", code=normalized)
            return DiscountResolution(error=InvalidDiscountCodeError(normalized, DiscountRejection.UNKNOWN_CODE))

        if not rule.is_eligible(subtotal_before_discount):
            logger.debug(
                "Discount code below minimum purchase",
                code=normalized,
                subtotal=subtotal_before_discount,
                min_purchase=rule.min_purchase,
            )
            return DiscountResolution(
                error=InvalidDiscountCodeError(
                    normalized,
                    DiscountRejection.MINIMUM_NOT_MET,
                    min_purchase=rule.min_purchase,
                )
            )

        return DiscountResolution(rule=rule)


def apply_discount(state: CartState, rule: DiscountRule | None) -> CartState:
    """Replace the applied rule. A failed resolution (None) leaves the state as is."""
    if rule is None:
        return state
    return state.replace(applied_discount=rule)


def remove_discount(state: CartState) -> CartState:
    return state.replace(applied_discount=None)
