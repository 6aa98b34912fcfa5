"""Shared BDD fixtures and step definitions for the cart."""

import pytest
from pytest_bdd import given, parsers, then, when
from storefront.catalog.port import CatalogProduct
from storefront.checkout.memory_submission import InMemoryOrderSubmission
from storefront.controller import CartController


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def submission():
    return InMemoryOrderSubmission()


@pytest.fixture()
def error():
    """Container for a captured checkout error."""
    return {"exc": None}


@pytest.fixture()
def outcome():
    """Container for the result of the last cart operation."""
    return {"discount": None, "receipt": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty cart", target_fixture="controller")
def empty_cart(submission):
    return CartController(submission=submission)


@given(
    parsers.cfparse('a cart with product "{product_id}" priced at {price:f} with quantity {quantity:d}'),
    target_fixture="controller",
)
def cart_with_product(submission, product_id, price, quantity):
    controller = CartController(submission=submission)
    controller.add_to_cart(CatalogProduct(id=product_id, name=f"Product {product_id}", unit_price=price), quantity)
    return controller


@given(parsers.cfparse('the discount code "{code}" has been applied'))
def discount_already_applied(controller, code):
    assert controller.apply_discount_code(code).applied


@given("the order service refuses orders")
def order_service_refuses(submission):
    submission.configure(should_succeed=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the subtotal is {amount:f}"))
def subtotal_is(controller, amount):
    assert controller.get_totals().subtotal == pytest.approx(amount)


@then(parsers.cfparse("the discount is {amount:f}"))
def discount_is(controller, amount):
    assert controller.get_totals().discount_amount == pytest.approx(amount)


@then(parsers.cfparse("the taxable amount is {amount:f}"))
def taxable_amount_is(controller, amount):
    assert controller.get_totals().taxable_amount == pytest.approx(amount)


@then(parsers.cfparse("the tax is {amount:f}"))
def tax_is(controller, amount):
    assert controller.get_totals().tax_amount == pytest.approx(amount)


@then(parsers.cfparse("the total is {amount:f}"))
def total_is(controller, amount):
    assert controller.get_totals().total == pytest.approx(amount)


@then("the cart is empty")
def cart_is_empty(controller):
    assert controller.state.is_empty
    assert controller.item_count() == 0


@then("no discount is applied")
def no_discount_applied(controller):
    assert controller.state.applied_discount is None


@then(parsers.cfparse('the applied discount is "{code}"'))
def applied_discount_is(controller, code):
    assert controller.state.applied_discount.code == code


@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_lines(controller, count):
    assert len(controller.state.lines) == count
