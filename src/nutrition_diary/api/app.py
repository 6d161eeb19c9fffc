"""FastAPI application factory."""

import logging
from uuid import UUID

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse

from nutrition_diary.api.dependencies import require_user
from nutrition_diary.api.diary import router as diary_router
from nutrition_diary.api.products import router as products_router
from nutrition_diary.app_logging import configure_logging
from nutrition_diary.containers import AppContainer
from nutrition_diary.domain.errors import (
    InvalidInputError,
    NotFoundError,
    NutritionDiaryError,
    UnauthorizedError,
)

_ERROR_STATUS: dict[type[NutritionDiaryError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Nutrition Diary")
    app.state.container = container

    app.include_router(diary_router)
    app.include_router(products_router)

    @app.exception_handler(NutritionDiaryError)
    async def handle_domain_error(
        request: Request, exc: NutritionDiaryError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("Unhandled domain error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"message": str(exc)})

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Request failed: %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal Server Error"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/auth/current")
    async def current_user(user_id: UUID = Depends(require_user)) -> dict[str, object]:
        """Return the verified caller."""
        return {"user": {"id": str(user_id)}}

    return app


def _status_for(exc: NutritionDiaryError) -> int:
    for error_type, status_code in _ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
