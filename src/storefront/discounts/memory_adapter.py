"""In-memory discount code provider backed by a fixed rule catalogue."""

from storefront.discounts.port import DiscountCodeProvider
from storefront.discounts.rule import DiscountKind, DiscountRule


def default_rules() -> list[DiscountRule]:
    """The storefront's built-in promotional codes."""
    return [
        DiscountRule(code="SAVE10", kind=DiscountKind.PERCENTAGE.value, value=10),
        DiscountRule(code="SAVE20", kind=DiscountKind.PERCENTAGE.value, value=20, min_purchase=100),
        DiscountRule(code="FLAT50", kind=DiscountKind.FIXED.value, value=50, min_purchase=200),
        DiscountRule(
            code="VIP30",
            kind=DiscountKind.PERCENTAGE.value,
            value=30,
            min_purchase=500,
            max_discount=150,
        ),
    ]


class InMemoryDiscountCodeProvider(DiscountCodeProvider):
    """Discount catalogue held in a dict keyed by code."""

    def __init__(self, rules: list[DiscountRule] | None = None) -> None:
        self.rules: dict[str, DiscountRule] = {}
        for rule in default_rules() if rules is None else rules:
            self.register(rule)

    def register(self, rule: DiscountRule) -> None:
        self.rules[rule.code] = rule

    def lookup(self, code: str) -> DiscountRule | None:
        return self.rules.get(code)
