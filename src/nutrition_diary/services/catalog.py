"""Product catalog lookups."""

from dataclasses import dataclass
from typing import Protocol

from nutrition_diary.domain.errors import InvalidInputError, NotFoundError
from nutrition_diary.domain.products import Product


class ProductCatalog(Protocol):
    """Read interface for the food catalog."""

    def find_by_id(self, product_id: str) -> Product | None:
        """Return a product by id, if present."""

    def find_all(self) -> list[Product]:
        """Return every product in catalog order."""

    def find_by_ids(self, product_ids: list[str]) -> list[Product]:
        """Return the products among ``product_ids`` that exist."""

    def search(self, query: str, limit: int) -> list[Product]:
        """Return products whose title contains the query."""


@dataclass
class CatalogService:
    """Application service over the product catalog."""

    catalog: ProductCatalog
    search_limit: int = 50

    def get_product(self, product_id: str) -> Product:
        """Return a product or raise NotFoundError."""
        product = self.catalog.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product

    def list_products(self) -> list[Product]:
        return self.catalog.find_all()

    def titles_for(self, product_ids: list[str]) -> dict[str, str]:
        """Map product ids to titles with a single catalog read."""
        unique_ids = list(dict.fromkeys(product_ids))
        if not unique_ids:
            return {}
        return {
            product.id: product.title
            for product in self.catalog.find_by_ids(unique_ids)
        }

    def search(self, query: str | None) -> list[Product]:
        """Case-insensitive title search; an empty query is rejected."""
        cleaned = (query or "").strip()
        if not cleaned:
            raise InvalidInputError("Query parameter is required")
        return self.catalog.search(cleaned, self.search_limit)
