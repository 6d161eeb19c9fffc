"""Diary service: per-day reconciliation of consumed products."""

import asyncio
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from nutrition_diary.domain.diary import Diary, DiaryEntry
from nutrition_diary.domain.errors import InvalidInputError, NotFoundError
from nutrition_diary.services.catalog import CatalogService
from nutrition_diary.services.days import in_day, parse_day, utc_day, utc_now
from nutrition_diary.services.locks import KeyedLocks

_logger = logging.getLogger(__name__)


class DiaryRepository(Protocol):
    """Persistence interface for diaries and their entries."""

    def get_diary(self, user_id: UUID) -> Diary | None:
        """Return the user's diary with entries in insertion order."""

    def create_diary(self, user_id: UUID) -> Diary:
        """Create the user's diary, or return the one that already exists."""

    def add_entry(  # noqa: PLR0913
        self,
        diary_id: UUID,
        product_id: str,
        product_weight: float,
        product_calories: float,
        logged_at: datetime,
    ) -> DiaryEntry:
        """Append an entry to a diary and return it.

        Storage keeps one entry per diary, product and UTC day of
        ``logged_at``; a colliding insert overwrites that entry in place.
        """

    def replace_entry(  # noqa: PLR0913
        self,
        entry_id: UUID,
        product_id: str,
        product_weight: float,
        product_calories: float,
        logged_at: datetime,
    ) -> DiaryEntry:
        """Overwrite an entry in place, keeping its id and position."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry."""


@dataclass
class DiaryService:
    """Logs, removes and lists consumed products per UTC day.

    Writes for one user run under that user's lock, with the blocking
    repository calls moved off the event loop.
    """

    repository: DiaryRepository
    catalog_service: CatalogService
    locks: KeyedLocks = field(default_factory=KeyedLocks)
    clock: Callable[[], datetime] = utc_now

    async def log_consumption(
        self, user_id: UUID, product_id: str | None, weight: object
    ) -> DiaryEntry:
        """Record a consumed product for today.

        A product already logged on the current UTC day is replaced in place
        with the new weight, calories and timestamp; otherwise a new entry is
        appended.
        """
        if not product_id or weight is None:
            raise InvalidInputError("Product ID and weight are required")
        grams = _to_weight(weight)
        product = self.catalog_service.get_product(product_id)
        calories = product.calories * grams / 100

        async with self.locks.lock(user_id):
            diary = await asyncio.to_thread(self.repository.get_diary, user_id)
            if diary is None:
                diary = await asyncio.to_thread(
                    self.repository.create_diary, user_id
                )
            logged_at = self.clock()
            existing = _find_same_day_entry(
                diary.entries, product_id, utc_day(logged_at)
            )
            if existing is None:
                entry = await asyncio.to_thread(
                    self.repository.add_entry,
                    diary.id,
                    product_id,
                    grams,
                    calories,
                    logged_at,
                )
                _logger.info(
                    "Diary entry added: user_id=%s product_id=%s entry_id=%s",
                    user_id,
                    product_id,
                    entry.id,
                )
            else:
                entry = await asyncio.to_thread(
                    self.repository.replace_entry,
                    existing.id,
                    product_id,
                    grams,
                    calories,
                    logged_at,
                )
                _logger.info(
                    "Diary entry replaced: user_id=%s product_id=%s entry_id=%s",
                    user_id,
                    product_id,
                    entry.id,
                )
        return entry

    async def remove_entry(
        self, user_id: UUID, day: str | date, entry_id: UUID | str
    ) -> None:
        """Delete an entry from the diary that has entries on ``day``."""
        target_day = parse_day(day)
        target_id = _parse_uuid(entry_id)

        async with self.locks.lock(user_id):
            diary = await asyncio.to_thread(self.repository.get_diary, user_id)
            if diary is None or not _entries_on(diary.entries, target_day):
                raise NotFoundError("Diary entry not found for this date")
            entry = next(
                (item for item in diary.entries if item.id == target_id), None
            )
            if entry is None:
                raise NotFoundError("Product not found in diary for this date")
            await asyncio.to_thread(self.repository.delete_entry, entry.id)
        _logger.info("Diary entry removed: user_id=%s entry_id=%s", user_id, entry.id)

    def list_consumed(self, user_id: UUID, day: str | date) -> list[DiaryEntry]:
        """Return entries logged on ``day``; empty when there are none."""
        target_day = parse_day(day)
        diary = self.repository.get_diary(user_id)
        if diary is None:
            return []
        return _entries_on(diary.entries, target_day)


def _find_same_day_entry(
    entries: list[DiaryEntry], product_id: str, day: date
) -> DiaryEntry | None:
    for entry in entries:
        if entry.product_id == product_id and in_day(entry.date, day):
            return entry
    return None


def _entries_on(entries: list[DiaryEntry], day: date) -> list[DiaryEntry]:
    return [entry for entry in entries if in_day(entry.date, day)]


def _to_weight(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        raise InvalidInputError("Product weight must be a number")
    try:
        grams = float(value)
    except (ValueError, OverflowError) as exc:
        raise InvalidInputError("Product weight must be a number") from exc
    if not math.isfinite(grams):
        raise InvalidInputError("Product weight must be a number")
    if not grams > 0:
        raise InvalidInputError("Product weight must be positive")
    return grams


def _parse_uuid(value: UUID | str) -> UUID | None:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value)
    except ValueError:
        return None
