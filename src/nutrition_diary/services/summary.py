"""Daily summary computation and summary history caching."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from nutrition_diary.domain.diary import DiaryEntry
from nutrition_diary.domain.errors import NotFoundError
from nutrition_diary.domain.summary import SummaryHistory, SummaryRecord
from nutrition_diary.services.days import in_day, parse_day
from nutrition_diary.services.diary import DiaryRepository
from nutrition_diary.services.locks import KeyedLocks

_logger = logging.getLogger(__name__)


class SummaryRepository(Protocol):
    """Persistence interface for cached summary history."""

    def get_history(self, user_id: UUID) -> SummaryHistory | None:
        """Return the user's summary history, if present."""

    def create_history(self, user_id: UUID) -> SummaryHistory:
        """Create the user's history, or return the one that already exists."""

    def add_record(self, history_id: UUID, record: SummaryRecord) -> SummaryRecord:
        """Append a record; one already stored for the same day is overwritten."""

    def replace_record(self, record_id: UUID, record: SummaryRecord) -> SummaryRecord:
        """Overwrite a stored summary record."""


class DailyRateProvider(Protocol):
    """Source of a user's daily calorie target."""

    def daily_rate(self, user_id: UUID) -> float:
        """Return the daily calorie target for a user."""


@dataclass
class SummaryService:
    """Computes daily summaries from the diary and caches them per day."""

    diary_repository: DiaryRepository
    repository: SummaryRepository
    rate_provider: DailyRateProvider
    locks: KeyedLocks = field(default_factory=KeyedLocks)

    async def get_daily_summary(self, user_id: UUID, day: str | date) -> SummaryRecord:
        """Compute the summary for ``day`` and upsert it into the history."""
        target_day = parse_day(day)
        diary = self.diary_repository.get_diary(user_id)
        entries = (
            []
            if diary is None
            else [entry for entry in diary.entries if in_day(entry.date, target_day)]
        )
        if diary is None or not entries:
            raise NotFoundError("No diary entry found for this date")

        summary = compute_summary(
            diary_id=diary.id,
            day=target_day,
            entries=entries,
            daily_rate=self.rate_provider.daily_rate(user_id),
        )

        async with self.locks.lock(user_id):
            history = await asyncio.to_thread(self.repository.get_history, user_id)
            if history is None:
                history = await asyncio.to_thread(
                    self.repository.create_history, user_id
                )
            existing = next(
                (record for record in history.records if record.day == target_day),
                None,
            )
            if existing is not None and existing.id is not None:
                await asyncio.to_thread(
                    self.repository.replace_record, existing.id, summary
                )
                _logger.info(
                    "Summary replaced: user_id=%s day=%s", user_id, target_day
                )
            else:
                await asyncio.to_thread(
                    self.repository.add_record, history.id, summary
                )
                _logger.info("Summary added: user_id=%s day=%s", user_id, target_day)
        return summary


def compute_summary(
    diary_id: UUID, day: date, entries: list[DiaryEntry], daily_rate: float
) -> SummaryRecord:
    """Aggregate entry calories against a daily target.

    ``daily_left`` goes negative once the target is exceeded.
    """
    consumed = sum(entry.product_calories for entry in entries)
    return SummaryRecord(
        id=None,
        diary_id=diary_id,
        day=day,
        daily_left=daily_rate - consumed,
        daily_consumed=consumed,
        daily_rate=daily_rate,
        percentage=round(100 * consumed / daily_rate, 2),
    )
