"""Domain models for calorie recommendations."""

from dataclasses import dataclass

from nutrition_diary.domain.products import Product

BLOOD_TYPES = ("0(I)", "A(II)", "B(III)", "AB(IV)")


@dataclass(frozen=True)
class RecommendationProfile:
    """Biometric inputs for a recommendation."""

    height: float
    age: float
    current_weight: float
    desired_weight: float
    blood_type: str


@dataclass(frozen=True)
class Recommendation:
    """Daily calorie target with products to avoid."""

    daily_calories: float
    forbidden_products: list[Product]

    @property
    def length(self) -> int:
        return len(self.forbidden_products)
