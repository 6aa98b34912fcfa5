"""Currency formatter port and the default en-US style formatter.

Formatting is presentational only; formatted strings are never parsed back
or used in arithmetic.
"""

from abc import ABC, abstractmethod

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "CN¥",
    "INR": "₹",
    "KRW": "₩",
    "CAD": "CA$",
    "AUD": "A$",
    "MXN": "MX$",
    "BRL": "R$",
    "NZD": "NZ$",
    "HKD": "HK$",
    "TWD": "NT$",
}

# Currencies quoted without minor units
ZERO_DECIMAL_CURRENCIES = frozenset({"JPY", "KRW"})


class CurrencyFormatter(ABC):
    @abstractmethod
    def format(self, amount: float, currency_code: str) -> str:
        """Render an amount for display, e.g. ``$1,234.56``."""
        ...


class SymbolCurrencyFormatter(CurrencyFormatter):
    """Symbol-prefixed amounts with thousands separators.

    Currencies without a known symbol are prefixed with their ISO code,
    ``CHF 12.50``.
    """

    def format(self, amount: float, currency_code: str = "USD") -> str:
        currency_code = currency_code.upper()
        decimals = 0 if currency_code in ZERO_DECIMAL_CURRENCIES else 2
        number = f"{abs(amount):,.{decimals}f}"

        symbol = CURRENCY_SYMBOLS.get(currency_code)
        formatted = f"{symbol}{number}" if symbol else f"{currency_code} {number}"
        return f"-{formatted}" if round(amount, decimals) < 0 else formatted
