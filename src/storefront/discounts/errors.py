"""Reasons a discount code can be turned down.

Rejections are returned to the caller, never raised: an unknown or ineligible
code is an expected user-input condition and the UI decides how to surface it.
"""

from enum import Enum

from protean.exceptions import ProteanException


class DiscountRejection(Enum):
    BLANK_CODE = "blank_code"
    UNKNOWN_CODE = "unknown_code"
    MINIMUM_NOT_MET = "minimum_not_met"


class InvalidDiscountCodeError(ProteanException):
    """A discount code that could not be applied to the cart."""

    def __init__(self, code: str, reason: DiscountRejection, min_purchase: float | None = None, **kwargs) -> None:
        if reason == DiscountRejection.MINIMUM_NOT_MET:
            message = f"Discount code {code} requires a minimum purchase of {min_purchase:.2f}"
        elif reason == DiscountRejection.BLANK_CODE:
            message = "No discount code was entered"
        else:
            message = f"Invalid discount code: {code}"
        super().__init__(message, **kwargs)

        self.code = code
        self.reason = reason
        self.min_purchase = min_purchase
