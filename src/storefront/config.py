"""Engine settings read from the storefront domain configuration.

Defaults come from the ``[custom]`` section of ``domain.toml`` (Protean sets
each entry as an attribute on the domain); environment overlays are selected
with ``PROTEAN_ENV``. When no configuration file is found the built-in values
below apply.
"""

from dataclasses import dataclass

from storefront.domain import storefront

DEFAULT_TAX_RATE = 0.1
DEFAULT_CURRENCY = "USD"
MINIMUM_CHARGEABLE_TOTAL = 0.01


@dataclass(frozen=True)
class CartSettings:
    tax_rate: float = DEFAULT_TAX_RATE
    currency_code: str = DEFAULT_CURRENCY
    minimum_chargeable_total: float = MINIMUM_CHARGEABLE_TOTAL

    @classmethod
    def from_domain(cls, domain=storefront) -> "CartSettings":
        return cls(
            tax_rate=float(getattr(domain, "DEFAULT_TAX_RATE", DEFAULT_TAX_RATE)),
            currency_code=str(getattr(domain, "DEFAULT_CURRENCY", DEFAULT_CURRENCY)).upper(),
            minimum_chargeable_total=float(getattr(domain, "MINIMUM_CHARGEABLE_TOTAL", MINIMUM_CHARGEABLE_TOTAL)),
        )
