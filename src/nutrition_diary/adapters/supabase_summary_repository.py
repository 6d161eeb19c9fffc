"""Supabase repository for summary history."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from nutrition_diary.domain.summary import SummaryHistory, SummaryRecord
from nutrition_diary.services.summary import SummaryRepository

_RECORD_COLUMNS = (
    "id, diary_id, day, daily_left, daily_consumed, daily_rate, percentage"
)


@dataclass
class SupabaseSummaryRepository(SummaryRepository):
    """Supabase implementation for cached daily summaries.

    ``summaries.user_id`` and ``summary_records (summary_id, day)`` are unique,
    so creating a history and adding a record are upserts.
    """

    client: Client

    def get_history(self, user_id: UUID) -> SummaryHistory | None:
        """Return the user's summary history with its records."""
        response = (
            self.client.table("summaries")
            .select("id, user_id")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        history_id = UUID(response.data[0]["id"])
        records_response = (
            self.client.table("summary_records")
            .select(_RECORD_COLUMNS)
            .eq("summary_id", str(history_id))
            .order("created_at", desc=False)
            .execute()
        )
        return SummaryHistory(
            id=history_id,
            user_id=user_id,
            records=[_parse_record(row) for row in records_response.data or []],
        )

    def create_history(self, user_id: UUID) -> SummaryHistory:
        """Create the summary history row, or return the existing one."""
        response = (
            self.client.table("summaries")
            .upsert({"user_id": str(user_id)}, on_conflict="user_id")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create summary history")
        return SummaryHistory(
            id=UUID(response.data[0]["id"]), user_id=user_id, records=[]
        )

    def add_record(self, history_id: UUID, record: SummaryRecord) -> SummaryRecord:
        """Insert a summary record row, merging into that day's row."""
        response = (
            self.client.table("summary_records")
            .upsert(
                {"summary_id": str(history_id), **_record_payload(record)},
                on_conflict="summary_id,day",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create summary record")
        return _parse_record(response.data[0])

    def replace_record(self, record_id: UUID, record: SummaryRecord) -> SummaryRecord:
        """Overwrite a summary record row."""
        response = (
            self.client.table("summary_records")
            .update(_record_payload(record))
            .eq("id", str(record_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update summary record")
        return _parse_record(response.data[0])


def _record_payload(record: SummaryRecord) -> dict[str, object]:
    return {
        "diary_id": str(record.diary_id),
        "day": record.day.isoformat(),
        "daily_left": record.daily_left,
        "daily_consumed": record.daily_consumed,
        "daily_rate": record.daily_rate,
        "percentage": record.percentage,
    }


def _parse_record(row: dict[str, object]) -> SummaryRecord:
    return SummaryRecord(
        id=UUID(str(row["id"])),
        diary_id=UUID(str(row["diary_id"])),
        day=date.fromisoformat(str(row["day"])),
        daily_left=float(row.get("daily_left", 0.0)),
        daily_consumed=float(row.get("daily_consumed", 0.0)),
        daily_rate=float(row.get("daily_rate", 0.0)),
        percentage=float(row.get("percentage", 0.0)),
    )
