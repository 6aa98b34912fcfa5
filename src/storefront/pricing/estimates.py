"""Informational price estimates shown alongside the cart.

None of these feed the cart totals: shipping is quoted separately at checkout,
bulk pricing is advertised on the product page, and installment plans are
offered by the payment step.
"""

from protean.exceptions import ValidationError

from storefront.pricing.calculator import round2

SHIPPING_BASE_RATE = 5.0
SHIPPING_WEIGHT_RATE = 0.5
SHIPPING_DISTANCE_RATE = 0.01
EXPRESS_MULTIPLIER = 2

# (minimum quantity, price multiplier), highest tier first
BULK_TIERS = (
    (100, 0.85),
    (50, 0.90),
    (20, 0.95),
)


def shipping_cost(weight: float, distance: float, express: bool = False) -> float:
    cost = SHIPPING_BASE_RATE + weight * SHIPPING_WEIGHT_RATE + distance * SHIPPING_DISTANCE_RATE
    if express:
        cost *= EXPRESS_MULTIPLIER
    return round2(cost)


def bulk_unit_price(quantity: int, unit_price: float) -> float:
    """Unit price after the volume discount for ordering ``quantity`` units."""
    for minimum_quantity, multiplier in BULK_TIERS:
        if quantity >= minimum_quantity:
            return unit_price * multiplier
    return unit_price


def installment_payment(principal: float, annual_rate: float, months: int) -> float:
    """Monthly payment for an amortised plan. ``annual_rate`` is a percentage."""
    if months == 0:
        raise ValidationError({"months": ["Months must be greater than 0"]})

    if annual_rate == 0:
        return round2(principal / months)

    monthly_rate = annual_rate / 12 / 100
    growth = (1 + monthly_rate) ** months
    return round2(principal * (monthly_rate * growth) / (growth - 1))
