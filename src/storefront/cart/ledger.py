"""Cart ledger — reducer functions over the cart's lines.

Every function takes a ``CartState`` and returns a new one; the input is never
modified. Lines keep their insertion order: existing lines stay where they
are, new products are appended at the end.
"""

from protean.exceptions import ValidationError

from storefront.cart.cart import CartLine, CartState


def find_line(state: CartState, product_id) -> CartLine | None:
    return next((line for line in state.lines if line.product_id == str(product_id)), None)


def add_item(state: CartState, product_id, unit_price: float, name: str | None = None, quantity: int = 1) -> CartState:
    """Add a product to the cart, or increase its quantity if already present.

    The unit price is captured only when the line is first created; adding an
    existing product again merges quantities and keeps the original price.
    """
    if quantity < 1:
        raise ValidationError({"quantity": ["Quantity to add must be at least 1"]})

    existing = find_line(state, product_id)
    if existing is None:
        line = CartLine(product_id=str(product_id), name=name, unit_price=unit_price, quantity=quantity)
        return state.replace(lines=[*state.lines, line])

    merged = existing.replace(quantity=existing.quantity + quantity)
    return state.replace(lines=[merged if line is existing else line for line in state.lines])


def remove_item(state: CartState, product_id) -> CartState:
    """Delete the product's line. Removing an absent product is a no-op."""
    if find_line(state, product_id) is None:
        return state
    return state.replace(lines=[line for line in state.lines if line.product_id != str(product_id)])


def set_quantity(state: CartState, product_id, quantity: int) -> CartState:
    """Replace a line's quantity in place; zero or less removes the line."""
    if quantity <= 0:
        return remove_item(state, product_id)

    existing = find_line(state, product_id)
    if existing is None:
        return state

    updated = existing.replace(quantity=quantity)
    return state.replace(lines=[updated if line is existing else line for line in state.lines])


def merge_lines(state: CartState, lines) -> CartState:
    """Merge a batch of lines (e.g. a guest cart) using add-to-cart semantics."""
    for line in lines:
        state = add_item(state, line.product_id, line.unit_price, line.name, line.quantity)
    return state


def clear_cart(state: CartState) -> CartState:
    """Empty the cart and drop any applied discount. Currency and tax rate survive."""
    return state.replace(lines=[], applied_discount=None)


def item_count(state: CartState) -> int:
    return sum(line.quantity for line in state.lines)
