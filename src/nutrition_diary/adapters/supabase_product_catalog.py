"""Supabase-backed product catalog."""

from dataclasses import dataclass

from supabase import Client

from nutrition_diary.domain.products import Product
from nutrition_diary.services.catalog import ProductCatalog

_PRODUCT_COLUMNS = "id, title, calories, categories, weight, group_blood_not_allowed"


@dataclass
class SupabaseProductCatalog(ProductCatalog):
    """Reads products from the ``products`` table."""

    client: Client

    def find_by_id(self, product_id: str) -> Product | None:
        """Return a product by id, if present."""
        response = (
            self.client.table("products")
            .select(_PRODUCT_COLUMNS)
            .eq("id", product_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_product(response.data[0])

    def find_all(self) -> list[Product]:
        """Return all products in table order."""
        response = (
            self.client.table("products")
            .select(_PRODUCT_COLUMNS)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_product(row) for row in response.data or []]

    def find_by_ids(self, product_ids: list[str]) -> list[Product]:
        """Return the products matching ``product_ids`` in one query."""
        if not product_ids:
            return []
        response = (
            self.client.table("products")
            .select(_PRODUCT_COLUMNS)
            .in_("id", product_ids)
            .execute()
        )
        return [_parse_product(row) for row in response.data or []]

    def search(self, query: str, limit: int) -> list[Product]:
        """Return products whose title contains the query, ignoring case."""
        response = (
            self.client.table("products")
            .select(_PRODUCT_COLUMNS)
            .ilike("title", f"%{query}%")
            .limit(limit)
            .execute()
        )
        return [_parse_product(row) for row in response.data or []]


def _parse_product(row: dict[str, object]) -> Product:
    flags = row.get("group_blood_not_allowed") or []
    weight = row.get("weight")
    return Product(
        id=str(row["id"]),
        title=str(row.get("title", "")),
        calories=float(row.get("calories", 0.0)),
        categories=row.get("categories"),
        weight=float(weight) if isinstance(weight, int | float) else None,
        group_blood_not_allowed=[
            flag if isinstance(flag, bool) else None for flag in flags
        ],
    )
