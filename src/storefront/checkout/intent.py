"""Order intent, the finalized payload handed to order submission."""

from protean.fields import Float, List, String, ValueObject

from storefront.cart.cart import CartLine
from storefront.domain import storefront


@storefront.value_object
class OrderIntent:
    """A snapshot of the cart lines and the total the shopper agreed to pay.

    The snapshot is taken before the cart is cleared, so it is unaffected by
    anything that happens to the cart afterwards.
    """

    lines = List(content_type=ValueObject(CartLine), required=True)
    total = Float(required=True, min_value=0.0)
    currency_code = String(max_length=3, default="USD")
