"""Pydantic schemas for handing cart data to the UI layer.

These are external contracts, kept separate from the internal Protean value
objects. ``CartStateSchema`` converts both ways so a cart can be shown,
inspected in a debugger, or rebuilt in a test fixture.
"""

from typing import Literal

from pydantic import BaseModel, Field

from storefront.cart.cart import CartLine, CartState
from storefront.discounts.rule import DiscountRule


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class CartLineSchema(BaseModel):
    product_id: str
    name: str | None = None
    unit_price: float = Field(ge=0)
    quantity: int = Field(ge=1)


class DiscountRuleSchema(BaseModel):
    code: str
    kind: Literal["percentage", "fixed"]
    value: float = Field(ge=0)
    min_purchase: float | None = Field(default=None, ge=0)
    max_discount: float | None = Field(default=None, ge=0)


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class CartStateSchema(BaseModel):
    lines: list[CartLineSchema] = Field(default_factory=list)
    applied_discount: DiscountRuleSchema | None = None
    currency_code: str = Field(default="USD", max_length=3)
    tax_rate: float = Field(default=0.1, ge=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "lines": [
                        {"product_id": "prod-001", "name": "Notebook", "unit_price": 50.0, "quantity": 2},
                    ],
                    "applied_discount": {"code": "SAVE10", "kind": "percentage", "value": 10},
                    "currency_code": "USD",
                    "tax_rate": 0.1,
                }
            ]
        }
    }

    @classmethod
    def from_state(cls, state: CartState) -> "CartStateSchema":
        discount = state.applied_discount
        return cls(
            lines=[CartLineSchema(**line.to_dict()) for line in state.lines],
            applied_discount=DiscountRuleSchema(**discount.to_dict()) if discount is not None else None,
            currency_code=state.currency_code,
            tax_rate=state.tax_rate,
        )

    def to_state(self) -> CartState:
        discount = self.applied_discount
        return CartState(
            lines=[CartLine(**line.model_dump()) for line in self.lines],
            applied_discount=DiscountRule(**discount.model_dump()) if discount is not None else None,
            currency_code=self.currency_code,
            tax_rate=self.tax_rate,
        )

