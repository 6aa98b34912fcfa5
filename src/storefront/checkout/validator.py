"""Checkout validation, the last step of the cart's lifecycle.

State machine over the cart:

    EMPTY → HAS_ITEMS → HAS_ITEMS_WITH_DISCOUNT → (checkout) → EMPTY

Discounts can be applied and removed freely while the cart has items, and
clearing the cart from any phase returns it to EMPTY. Checkout is only
possible from a non-empty cart whose total reaches the minimum chargeable
amount. A successful checkout snapshots the cart into an ``OrderIntent`` and
clears it eagerly; a failed checkout raises without touching the cart.
"""

from enum import Enum

from storefront.cart.cart import CartState
from storefront.cart.ledger import clear_cart
from storefront.checkout.errors import EmptyCartError, InvalidTotalError
from storefront.checkout.intent import OrderIntent
from storefront.config import MINIMUM_CHARGEABLE_TOTAL
from storefront.pricing.calculator import Totals, totals_for


class CartPhase(Enum):
    EMPTY = "Empty"
    HAS_ITEMS = "Has_Items"
    HAS_ITEMS_WITH_DISCOUNT = "Has_Items_With_Discount"


def phase_of(state: CartState) -> CartPhase:
    if state.is_empty:
        return CartPhase.EMPTY
    if state.applied_discount is None:
        return CartPhase.HAS_ITEMS
    return CartPhase.HAS_ITEMS_WITH_DISCOUNT


class CheckoutValidator:
    def __init__(self, minimum_total: float = MINIMUM_CHARGEABLE_TOTAL) -> None:
        self.minimum_total = minimum_total

    def validate(self, state: CartState) -> Totals:
        """Check checkout preconditions and return the totals being charged."""
        if state.is_empty:
            raise EmptyCartError()

        totals = totals_for(state)
        if totals.total < self.minimum_total:
            raise InvalidTotalError(totals.total, self.minimum_total)

        return totals

    def checkout(self, state: CartState) -> tuple[CartState, OrderIntent]:
        """Turn the cart into an order intent.

        Returns the cleared cart together with the intent. Raises
        ``EmptyCartError`` or ``InvalidTotalError`` otherwise, in which case
        the caller's state is unchanged.
        """
        totals = self.validate(state)

        intent = OrderIntent(
            lines=list(state.lines),
            total=totals.total,
            currency_code=state.currency_code,
        )
        return clear_cart(state), intent
