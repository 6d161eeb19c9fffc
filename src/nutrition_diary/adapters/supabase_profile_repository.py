"""Supabase repository for calculator profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from nutrition_diary.domain.recommendations import RecommendationProfile
from nutrition_diary.services.recommendations import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation keeping one profile row per user."""

    client: Client

    def get_profile(self, user_id: UUID) -> RecommendationProfile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("calculator_profiles")
            .select("height, age, current_weight, desired_weight, blood_type")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return RecommendationProfile(
            height=float(row["height"]),
            age=float(row["age"]),
            current_weight=float(row["current_weight"]),
            desired_weight=float(row["desired_weight"]),
            blood_type=str(row["blood_type"]),
        )

    def save_profile(self, user_id: UUID, profile: RecommendationProfile) -> None:
        """Upsert the profile keyed by user id."""
        self.client.table("calculator_profiles").upsert(
            {
                "user_id": str(user_id),
                "height": profile.height,
                "age": profile.age,
                "current_weight": profile.current_weight,
                "desired_weight": profile.desired_weight,
                "blood_type": profile.blood_type,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
