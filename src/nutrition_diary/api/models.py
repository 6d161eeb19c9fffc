"""Pydantic request models and response serializers."""

from pydantic import BaseModel, ConfigDict, Field

from nutrition_diary.domain.diary import DiaryEntry
from nutrition_diary.domain.products import Product
from nutrition_diary.domain.recommendations import Recommendation
from nutrition_diary.domain.summary import SummaryRecord


class ConsumedProductRequest(BaseModel):
    """Body for logging a consumed product."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: str | None = Field(default=None, alias="productId")
    product_weight: float | str | None = None


class CalculatorRequest(BaseModel):
    """Biometric fields for a recommendation.

    Fields are optional here so that missing values surface as a 400 with a
    readable message from the recommendation service.
    """

    height: float | str | None = None
    age: float | str | None = None
    current_weight: float | str | None = None
    desired_weight: float | str | None = None
    blood_type: str | None = None


def entry_payload(entry: DiaryEntry, title: str | None) -> dict[str, object]:
    """Serialize an entry with its product reference expanded to id and title."""
    return {
        "_id": str(entry.id),
        "productId": {"_id": entry.product_id, "title": title},
        "product_weight": entry.product_weight,
        "product_Calories": entry.product_calories,
        "date": entry.date.isoformat(),
    }


def product_payload(product: Product) -> dict[str, object]:
    return {
        "_id": product.id,
        "title": product.title,
        "calories": product.calories,
        "categories": product.categories,
        "weight": product.weight,
        "groupBloodNotAllowed": product.group_blood_not_allowed,
    }


def summary_payload(date: str, summary: SummaryRecord) -> dict[str, object]:
    return {
        "date": date,
        "daily_left": summary.daily_left,
        "daily_consumed": summary.daily_consumed,
        "daily_rate": summary.daily_rate,
        "percentage": summary.percentage,
    }


def recommendation_payload(recommendation: Recommendation) -> dict[str, object]:
    return {
        "dailyCalories": recommendation.daily_calories,
        "forbiddenProducts": [
            product_payload(product) for product in recommendation.forbidden_products
        ],
        "length": recommendation.length,
    }
