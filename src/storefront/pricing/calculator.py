"""Pricing calculator. Derives the cart totals from lines, discount and tax rate.

Totals are never stored. They are recomputed together from the current
``CartState`` on every read so that subtotal, discount, tax and total can
never disagree with each other.

Rounding policy: only the tax amount is rounded, to the nearest cent with
halves rounded up. Subtotal, discount and total are left unrounded.
"""

from decimal import ROUND_HALF_UP, Decimal

from protean.fields import Float

from storefront.cart.cart import CartLine, CartState
from storefront.discounts.rule import DiscountRule
from storefront.domain import storefront

CENT = Decimal("0.01")


@storefront.value_object
class Totals:
    """Derived money amounts for a cart, in the cart's currency."""

    subtotal = Float(default=0.0)
    discount_amount = Float(default=0.0)
    taxable_amount = Float(default=0.0)
    tax_amount = Float(default=0.0)
    total = Float(default=0.0)


def round2(amount: float) -> float:
    """Round to the nearest cent, halves away from zero."""
    return float(Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP))


def subtotal_of(lines: list[CartLine]) -> float:
    return sum((line.unit_price * line.quantity for line in lines), 0.0)


def discount_amount_for(rule: DiscountRule | None, subtotal: float) -> float:
    if rule is None:
        return 0.0

    if rule.is_percentage:
        # Uncapped: max_discount is carried on the rule but not applied.
        return subtotal * rule.value / 100

    return max(0.0, min(rule.value, subtotal))


def calculate_totals(lines: list[CartLine], applied_discount: DiscountRule | None, tax_rate: float) -> Totals:
    subtotal = subtotal_of(lines)
    discount_amount = discount_amount_for(applied_discount, subtotal)
    taxable_amount = max(0.0, subtotal - discount_amount)
    tax_amount = round2(taxable_amount * tax_rate)

    return Totals(
        subtotal=subtotal,
        discount_amount=discount_amount,
        taxable_amount=taxable_amount,
        tax_amount=tax_amount,
        total=taxable_amount + tax_amount,
    )


def totals_for(state: CartState) -> Totals:
    return calculate_totals(state.lines, state.applied_discount, state.tax_rate)
