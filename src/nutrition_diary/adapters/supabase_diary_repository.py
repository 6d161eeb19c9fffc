"""Supabase repository for diaries and diary entries."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nutrition_diary.domain.diary import Diary, DiaryEntry
from nutrition_diary.services.days import utc_day
from nutrition_diary.services.diary import DiaryRepository

_ENTRY_COLUMNS = "id, product_id, product_weight, product_calories, logged_at"
_ENTRY_CONFLICT = "diary_id,product_id,logged_day"


@dataclass
class SupabaseDiaryRepository(DiaryRepository):
    """Supabase implementation for diaries.

    Entries live in ``diary_entries`` and keep insertion order through
    ``created_at``, which replacements never touch. Unique keys on
    ``diaries.user_id`` and ``diary_entries (diary_id, product_id, logged_day)``
    make the create and add calls upserts, so concurrent writers from
    separate processes still converge on one row.
    """

    client: Client

    def get_diary(self, user_id: UUID) -> Diary | None:
        """Return the user's diary with its entries."""
        response = (
            self.client.table("diaries")
            .select("id, user_id")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        diary_id = UUID(response.data[0]["id"])
        entries_response = (
            self.client.table("diary_entries")
            .select(_ENTRY_COLUMNS)
            .eq("diary_id", str(diary_id))
            .order("created_at", desc=False)
            .execute()
        )
        return Diary(
            id=diary_id,
            user_id=user_id,
            entries=[_parse_entry(row) for row in entries_response.data or []],
        )

    def create_diary(self, user_id: UUID) -> Diary:
        """Create the diary row, or return the existing one."""
        response = (
            self.client.table("diaries")
            .upsert({"user_id": str(user_id)}, on_conflict="user_id")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create diary")
        return Diary(id=UUID(response.data[0]["id"]), user_id=user_id, entries=[])

    def add_entry(  # noqa: PLR0913
        self,
        diary_id: UUID,
        product_id: str,
        product_weight: float,
        product_calories: float,
        logged_at: datetime,
    ) -> DiaryEntry:
        """Insert an entry row, merging into the same product's row for that day."""
        response = (
            self.client.table("diary_entries")
            .upsert(
                {
                    "diary_id": str(diary_id),
                    **_entry_payload(
                        product_id, product_weight, product_calories, logged_at
                    ),
                },
                on_conflict=_ENTRY_CONFLICT,
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create diary entry")
        return _parse_entry(response.data[0])

    def replace_entry(  # noqa: PLR0913
        self,
        entry_id: UUID,
        product_id: str,
        product_weight: float,
        product_calories: float,
        logged_at: datetime,
    ) -> DiaryEntry:
        """Overwrite an entry row by id."""
        response = (
            self.client.table("diary_entries")
            .update(
                _entry_payload(product_id, product_weight, product_calories, logged_at)
            )
            .eq("id", str(entry_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update diary entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry row."""
        self.client.table("diary_entries").delete().eq("id", str(entry_id)).execute()


def _entry_payload(
    product_id: str,
    product_weight: float,
    product_calories: float,
    logged_at: datetime,
) -> dict[str, object]:
    return {
        "product_id": product_id,
        "product_weight": product_weight,
        "product_calories": product_calories,
        "logged_at": logged_at.isoformat(),
        "logged_day": utc_day(logged_at).isoformat(),
    }


def _parse_entry(row: dict[str, object]) -> DiaryEntry:
    return DiaryEntry(
        id=UUID(str(row["id"])),
        product_id=str(row["product_id"]),
        product_weight=float(row.get("product_weight", 0.0)),
        product_calories=float(row.get("product_calories", 0.0)),
        date=datetime.fromisoformat(str(row["logged_at"])),
    )
