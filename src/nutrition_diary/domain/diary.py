"""Domain models for the food diary."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class DiaryEntry:
    """A consumed product logged into a diary."""

    id: UUID
    product_id: str
    product_weight: float
    product_calories: float
    date: datetime


@dataclass(frozen=True)
class Diary:
    """A user's diary with entries in insertion order."""

    id: UUID
    user_id: UUID
    entries: list[DiaryEntry]
