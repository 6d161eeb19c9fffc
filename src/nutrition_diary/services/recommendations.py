"""Calorie target and blood-type food restriction recommendations."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutrition_diary.domain.errors import InvalidInputError
from nutrition_diary.domain.products import Product
from nutrition_diary.domain.recommendations import (
    BLOOD_TYPES,
    Recommendation,
    RecommendationProfile,
)
from nutrition_diary.services.catalog import CatalogService

DEFAULT_DAILY_CALORIES = 2800.0

_NUMERIC_FIELDS = ("height", "age", "current_weight", "desired_weight")

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for the per-user calculator profile."""

    def get_profile(self, user_id: UUID) -> RecommendationProfile | None:
        """Return the stored profile for a user."""

    def save_profile(self, user_id: UUID, profile: RecommendationProfile) -> None:
        """Store the profile, replacing any previous one."""


@dataclass
class RecommendationService:
    """Builds recommendations from a profile and the product catalog."""

    catalog_service: CatalogService
    profile_repository: ProfileRepository
    daily_calories: float = DEFAULT_DAILY_CALORIES
    forbidden_limit: int = 4

    def recommend(self, payload: Mapping[str, object]) -> Recommendation:
        """Return a recommendation for an anonymous request."""
        profile = parse_profile(payload)
        return self._build(profile)

    def recommend_for_user(
        self, user_id: UUID, payload: Mapping[str, object]
    ) -> Recommendation:
        """Persist the user's profile, then return a recommendation."""
        profile = parse_profile(payload)
        self.profile_repository.save_profile(user_id, profile)
        _logger.info("Calculator profile saved: user_id=%s", user_id)
        return self._build(profile)

    def daily_rate(self, user_id: UUID) -> float:
        """Return the daily calorie target used by summaries."""
        return self.daily_calories

    def _build(self, profile: RecommendationProfile) -> Recommendation:
        index = BLOOD_TYPES.index(profile.blood_type)
        forbidden = [
            product
            for product in self.catalog_service.list_products()
            if _is_restricted(product, index)
        ]
        # Truncate before sorting: the first matches in catalog order are kept.
        forbidden = forbidden[: self.forbidden_limit]
        forbidden.sort(key=lambda product: product.title.casefold())
        return Recommendation(
            daily_calories=self.daily_calories, forbidden_products=forbidden
        )


def parse_profile(payload: Mapping[str, object]) -> RecommendationProfile:
    """Validate raw request fields into a profile."""
    if any(not payload.get(name) for name in (*_NUMERIC_FIELDS, "blood_type")):
        raise InvalidInputError("All fields are required")
    blood_type = payload["blood_type"]
    if not isinstance(blood_type, str) or blood_type not in BLOOD_TYPES:
        raise InvalidInputError("Invalid blood type")
    values = {name: _to_number(name, payload[name]) for name in _NUMERIC_FIELDS}
    return RecommendationProfile(blood_type=blood_type, **values)


def _to_number(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        raise InvalidInputError(f"Invalid {name}")
    try:
        number = float(value)
    except (ValueError, OverflowError) as exc:
        raise InvalidInputError(f"Invalid {name}") from exc
    if not math.isfinite(number):
        raise InvalidInputError(f"Invalid {name}")
    return number


def _is_restricted(product: Product, index: int) -> bool:
    flags = product.group_blood_not_allowed
    return index < len(flags) and flags[index] is True
