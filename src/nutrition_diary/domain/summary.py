"""Domain models for daily summaries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class SummaryRecord:
    """Daily calorie aggregate derived from a diary."""

    id: UUID | None
    diary_id: UUID
    day: date
    daily_left: float
    daily_consumed: float
    daily_rate: float
    percentage: float


@dataclass(frozen=True)
class SummaryHistory:
    """Cached summary records for a user."""

    id: UUID
    user_id: UUID
    records: list[SummaryRecord]
