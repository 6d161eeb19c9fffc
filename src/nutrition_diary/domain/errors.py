"""Domain exceptions."""


class NutritionDiaryError(Exception):
    """Base exception for diary, summary and recommendation errors."""


class InvalidInputError(NutritionDiaryError):
    """Raised when request data is missing or malformed."""


class NotFoundError(NutritionDiaryError):
    """Raised when a product, diary or entry does not exist."""


class UnauthorizedError(NutritionDiaryError):
    """Raised when a bearer token cannot be verified."""
