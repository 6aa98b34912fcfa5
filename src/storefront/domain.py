"""Storefront bounded context — cart pricing and discount engine.

Holds the shopping-cart line items, resolves discount codes against their
eligibility rules, and derives subtotal, discount, tax and total for the
client-side checkout estimate. The engine is synchronous and owns no
infrastructure: catalog lookups, order submission and currency formatting are
collaborators behind ports.
"""

from protean.domain import Domain

storefront = Domain(name="storefront")
