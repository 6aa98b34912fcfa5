"""DiscountRule value object: a named code mapping to a price reduction."""

from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, String

from storefront.domain import storefront


class DiscountKind(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@storefront.value_object
class DiscountRule:
    """A percentage or fixed-amount reduction, looked up by its code.

    ``min_purchase`` gates eligibility on the pre-discount subtotal.
    ``max_discount`` is declared by some rules but is not applied when pricing
    percentage discounts; see ``storefront.pricing.calculator``.
    """

    code = String(required=True, max_length=50)
    kind = String(required=True, choices=DiscountKind)
    value = Float(required=True, min_value=0.0)
    min_purchase = Float(min_value=0.0)
    max_discount = Float(min_value=0.0)

    @invariant.post
    def code_must_be_uppercase(self):
        if self.code != self.code.strip().upper():
            raise ValidationError({"code": ["Discount codes are stored in uppercase"]})

    @invariant.post
    def percentage_cannot_exceed_one_hundred(self):
        if self.kind == DiscountKind.PERCENTAGE.value and self.value > 100:
            raise ValidationError({"value": ["A percentage discount cannot exceed 100"]})

    @property
    def is_percentage(self) -> bool:
        return self.kind == DiscountKind.PERCENTAGE.value

    def is_eligible(self, subtotal: float) -> bool:
        """Whether a cart with this pre-discount subtotal qualifies for the rule."""
        if self.min_purchase is None:
            return True
        return subtotal >= self.min_purchase
