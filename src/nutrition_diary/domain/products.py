"""Catalog product models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """Product record from the food catalog."""

    id: str
    title: str
    calories: float
    categories: str | None
    weight: float | None
    group_blood_not_allowed: list[bool | None]
