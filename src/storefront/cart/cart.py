"""Cart state value objects: the lines in a cart and the cart as a whole.

The cart is modelled as an immutable value rather than a mutable aggregate.
Every change produces a new ``CartState`` through the reducer functions in
``storefront.cart.ledger`` and ``storefront.discounts.resolver``; the
``CartController`` holds the single live instance.

Prices are captured on the line when the product is added, so later catalogue
price changes never reprice an existing cart.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, List, String, ValueObject

from storefront.discounts.rule import DiscountRule
from storefront.domain import storefront


@storefront.value_object
class CartLine:
    """One product's presence in the cart, with its merged quantity."""

    product_id = String(required=True, max_length=255)
    name = String(max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


@storefront.value_object
class CartState:
    """Everything the pricing engine needs to know about a cart.

    ``lines`` keep insertion order. At most one discount rule is applied at a
    time. ``currency_code`` is carried for presentation only; all arithmetic
    happens in the cart's single currency.
    """

    lines = List(content_type=ValueObject(CartLine))
    applied_discount = ValueObject(DiscountRule)
    currency_code = String(max_length=3, default="USD")
    tax_rate = Float(min_value=0.0, default=0.1)

    @invariant.post
    def product_ids_must_be_unique(self):
        product_ids = [line.product_id for line in self.lines]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"lines": ["A product can only appear once in the cart"]})

    @property
    def is_empty(self) -> bool:
        return len(self.lines) == 0

    @classmethod
    def empty(cls, currency_code="USD", tax_rate=0.1):
        return cls(lines=[], applied_discount=None, currency_code=currency_code, tax_rate=tax_rate)
