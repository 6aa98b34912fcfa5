"""Cart actions and the cart reducer.

Each action is a small value object describing one change to the cart.
``reduce(state, action)`` applies it by delegating to the ledger and discount
reducers, so a sequence of actions can be replayed onto ``CartState.empty()``
to rebuild a cart.

Discount codes are resolved before they become actions: ``ApplyDiscount``
carries the resolved rule, keeping the reducer free of any provider lookup.
"""

from protean.exceptions import IncorrectUsageError
from protean.fields import Float, Integer, List, String, ValueObject

from storefront.cart import ledger
from storefront.cart.cart import CartLine, CartState
from storefront.discounts.resolver import apply_discount, remove_discount
from storefront.discounts.rule import DiscountRule
from storefront.domain import storefront


@storefront.value_object
class AddItem:
    product_id = String(required=True, max_length=255)
    name = String(max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(default=1, min_value=1)


@storefront.value_object
class RemoveItem:
    product_id = String(required=True, max_length=255)


@storefront.value_object
class SetQuantity:
    product_id = String(required=True, max_length=255)
    quantity = Integer(required=True)


@storefront.value_object
class MergeLines:
    """Fold another cart's lines (e.g. a guest session's) into this one."""

    lines = List(content_type=ValueObject(CartLine))


@storefront.value_object
class ClearCart:
    pass


@storefront.value_object
class ApplyDiscount:
    rule = ValueObject(DiscountRule, required=True)


@storefront.value_object
class RemoveDiscount:
    pass


def _add_item(state, action):
    return ledger.add_item(state, action.product_id, action.unit_price, action.name, action.quantity)


def _remove_item(state, action):
    return ledger.remove_item(state, action.product_id)


def _set_quantity(state, action):
    return ledger.set_quantity(state, action.product_id, action.quantity)


def _merge_lines(state, action):
    return ledger.merge_lines(state, action.lines)


def _clear_cart(state, action):
    return ledger.clear_cart(state)


def _apply_discount(state, action):
    return apply_discount(state, action.rule)


def _remove_discount(state, action):
    return remove_discount(state)


_REDUCERS = {
    AddItem: _add_item,
    RemoveItem: _remove_item,
    SetQuantity: _set_quantity,
    MergeLines: _merge_lines,
    ClearCart: _clear_cart,
    ApplyDiscount: _apply_discount,
    RemoveDiscount: _remove_discount,
}


def reduce(state: CartState, action) -> CartState:
    """Return the cart that results from applying ``action`` to ``state``."""
    reducer = _REDUCERS.get(type(action))
    if reducer is None:
        raise IncorrectUsageError(f"Unknown cart action: {type(action).__name__}")
    return reducer(state, action)


def replay(actions, state: CartState | None = None) -> CartState:
    """Apply a sequence of actions in order, starting from an empty cart by default."""
    state = CartState.empty() if state is None else state
    for action in actions:
        state = reduce(state, action)
    return state
