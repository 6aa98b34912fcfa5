"""Tests for the pricing calculator."""

import pytest
from storefront.cart.cart import CartLine, CartState
from storefront.cart.ledger import add_item
from storefront.discounts.rule import DiscountRule
from storefront.pricing.calculator import (
    Totals,
    calculate_totals,
    discount_amount_for,
    round2,
    subtotal_of,
    totals_for,
)


def _lines(*price_quantity):
    return [
        CartLine(product_id=str(index), unit_price=price, quantity=quantity)
        for index, (price, quantity) in enumerate(price_quantity, start=1)
    ]


class TestRound2:
    @pytest.mark.parametrize(
        "amount,expected",
        [
            (1.8000000000000003, 1.8),
            (0.125, 0.13),
            (2.675, 2.68),
            (1.005, 1.01),
            (0.004, 0.0),
            (-0.125, -0.13),
        ],
    )
    def test_half_up_to_the_cent(self, amount, expected):
        assert round2(amount) == expected


class TestSubtotal:
    def test_sum_of_line_totals(self):
        assert subtotal_of(_lines((50.0, 2), (30.0, 1))) == pytest.approx(130.0)

    def test_no_lines(self):
        assert subtotal_of([]) == 0.0


class TestDiscountAmount:
    def test_no_rule(self):
        assert discount_amount_for(None, 100.0) == 0.0

    def test_percentage(self):
        rule = DiscountRule(code="SAVE20", kind="percentage", value=20)
        assert discount_amount_for(rule, 150.0) == pytest.approx(30.0)

    def test_percentage_ignores_max_discount(self):
        rule = DiscountRule(code="VIP30", kind="percentage", value=30, min_purchase=500, max_discount=150)
        assert discount_amount_for(rule, 1000.0) == pytest.approx(300.0)

    def test_fixed(self):
        rule = DiscountRule(code="FLAT50", kind="fixed", value=50)
        assert discount_amount_for(rule, 250.0) == 50.0

    def test_fixed_clamped_to_subtotal(self):
        rule = DiscountRule(code="FLAT50", kind="fixed", value=50)
        assert discount_amount_for(rule, 20.0) == 20.0

    def test_fixed_on_empty_cart(self):
        rule = DiscountRule(code="FLAT50", kind="fixed", value=50)
        assert discount_amount_for(rule, 0.0) == 0.0


class TestCalculateTotals:
    def test_save10_on_twenty_dollars(self):
        rule = DiscountRule(code="SAVE10", kind="percentage", value=10)
        totals = calculate_totals(_lines((10.0, 2)), rule, 0.1)

        assert totals.subtotal == pytest.approx(20.0)
        assert totals.discount_amount == pytest.approx(2.0)
        assert totals.taxable_amount == pytest.approx(18.0)
        assert totals.tax_amount == 1.8
        assert totals.total == pytest.approx(19.8)

    def test_vip30_is_not_capped(self):
        rule = DiscountRule(code="VIP30", kind="percentage", value=30, min_purchase=500, max_discount=150)
        totals = calculate_totals(_lines((1000.0, 1)), rule, 0.1)

        assert totals.discount_amount == pytest.approx(300.0)
        assert totals.taxable_amount == pytest.approx(700.0)
        assert totals.tax_amount == 70.0
        assert totals.total == pytest.approx(770.0)

    def test_no_discount(self):
        totals = calculate_totals(_lines((50.0, 2), (30.0, 1)), None, 0.1)
        assert totals.discount_amount == 0.0
        assert totals.tax_amount == 13.0
        assert totals.total == pytest.approx(143.0)

    def test_fixed_discount_never_makes_taxable_negative(self):
        rule = DiscountRule(code="FLAT50", kind="fixed", value=50)
        totals = calculate_totals(_lines((20.0, 1)), rule, 0.1)
        assert totals.taxable_amount == 0.0
        assert totals.tax_amount == 0.0
        assert totals.total == 0.0

    def test_full_percentage_discount(self):
        rule = DiscountRule(code="FREE", kind="percentage", value=100)
        totals = calculate_totals(_lines((40.0, 1)), rule, 0.1)
        assert totals.taxable_amount == 0.0
        assert totals.total == 0.0

    def test_tax_rounds_half_up(self):
        totals = calculate_totals(_lines((0.05, 1)), None, 0.1)
        assert totals.tax_amount == 0.01
        assert totals.total == pytest.approx(0.06)

    def test_zero_tax_rate(self):
        totals = calculate_totals(_lines((10.0, 3)), None, 0.0)
        assert totals.tax_amount == 0.0
        assert totals.total == pytest.approx(30.0)

    def test_empty_cart_is_all_zero(self):
        assert calculate_totals([], None, 0.1) == Totals()


class TestTotalsForState:
    def test_uses_state_tax_rate_and_discount(self):
        rule = DiscountRule(code="SAVE10", kind="percentage", value=10)
        state = add_item(CartState.empty(tax_rate=0.2), "1", 100.0).replace(applied_discount=rule)
        totals = totals_for(state)

        assert totals.taxable_amount == pytest.approx(90.0)
        assert totals.tax_amount == 18.0
        assert totals.total == pytest.approx(108.0)

    def test_totals_track_the_cart(self):
        state = add_item(CartState.empty(), "1", 10.0)
        before = totals_for(state)
        after = totals_for(add_item(state, "1", 10.0))
        assert before.subtotal == pytest.approx(10.0)
        assert after.subtotal == pytest.approx(20.0)
