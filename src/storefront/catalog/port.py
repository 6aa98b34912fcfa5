"""Product catalog port (abstract interface).

The cart only needs a read-only view of a product at the moment it is added:
its id, display name, current unit price and stock. The price is copied onto
the cart line, and stock is not re-validated by the pricing engine.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogProduct:
    id: str
    name: str
    unit_price: float
    stock: int = 0


class ProductCatalog(ABC):
    """Abstract read-only product lookup."""

    @abstractmethod
    def get(self, product_id: str) -> CatalogProduct | None:
        """Return the product, or None when it is not in the catalog."""
        ...


class InMemoryProductCatalog(ProductCatalog):
    """Catalog backed by a dict, for development and testing."""

    def __init__(self, products: list[CatalogProduct] | None = None) -> None:
        self.products: dict[str, CatalogProduct] = {}
        for product in products or []:
            self.products[str(product.id)] = product

    def get(self, product_id: str) -> CatalogProduct | None:
        return self.products.get(str(product_id))
