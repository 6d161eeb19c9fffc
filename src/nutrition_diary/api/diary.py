"""Diary and daily summary endpoints."""

from __future__ import annotations

from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from nutrition_diary.api.dependencies import get_container, require_user
from nutrition_diary.api.models import (
    ConsumedProductRequest,
    entry_payload,
    summary_payload,
)

router = APIRouter(prefix="/api", tags=["diary"])


@router.post("/diary/consumed", status_code=status.HTTP_201_CREATED)
async def log_consumed(
    body: ConsumedProductRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Add or replace today's entry for a product."""
    container = get_container(request)
    entry = await container.diary_service.log_consumption(
        user_id, body.product_id, body.product_weight
    )
    titles = container.catalog_service.titles_for([entry.product_id])
    return {
        "message": "Consumed product added/updated successfully",
        "entry": entry_payload(entry, titles.get(entry.product_id)),
    }


@router.delete("/diary/remove/{date}/{entry_id}")
async def remove_consumed(
    date: str,
    entry_id: str,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, str]:
    """Remove a diary entry by its id."""
    container = get_container(request)
    await container.diary_service.remove_entry(user_id, date, entry_id)
    return {"message": "Consumed product removed successfully"}


@router.get("/diary/consumed/{date}")
async def list_consumed(
    date: str, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return products consumed on a day."""
    container = get_container(request)
    entries = container.diary_service.list_consumed(user_id, date)
    titles = container.catalog_service.titles_for(
        [entry.product_id for entry in entries]
    )
    return {
        "date": date,
        "consumedProducts": [
            entry_payload(entry, titles.get(entry.product_id)) for entry in entries
        ],
    }


@router.get("/summary/{date}")
async def daily_summary(
    date: str, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return the calorie summary for a day."""
    container = get_container(request)
    summary = await container.summary_service.get_daily_summary(user_id, date)
    return summary_payload(date, summary)
