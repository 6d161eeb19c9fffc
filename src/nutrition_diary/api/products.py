"""Recommendation and product search endpoints."""

from __future__ import annotations

from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from nutrition_diary.api.dependencies import get_container, require_user
from nutrition_diary.api.models import (
    CalculatorRequest,
    product_payload,
    recommendation_payload,
)

router = APIRouter(prefix="/api/products", tags=["products"])


@router.post("/public-recommendations")
async def public_recommendations(
    body: CalculatorRequest, request: Request
) -> dict[str, object]:
    """Return a recommendation without storing anything."""
    container = get_container(request)
    recommendation = container.recommendation_service.recommend(body.model_dump())
    return recommendation_payload(recommendation)


@router.post("/private-recommendations")
async def private_recommendations(
    body: CalculatorRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Store the caller's profile and return a recommendation."""
    container = get_container(request)
    recommendation = container.recommendation_service.recommend_for_user(
        user_id, body.model_dump()
    )
    return recommendation_payload(recommendation)


@router.get("/search", dependencies=[Depends(require_user)])
async def search_products(
    request: Request, query: str | None = None
) -> dict[str, object]:
    """Search products by title."""
    container = get_container(request)
    products = container.catalog_service.search(query)
    return {
        "message": "Products found successfully",
        "products": [product_payload(product) for product in products],
    }
