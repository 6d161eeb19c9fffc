"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrition_diary.adapters.supabase_auth_service import SupabaseAuthService
from nutrition_diary.adapters.supabase_diary_repository import (
    SupabaseDiaryRepository,
)
from nutrition_diary.adapters.supabase_product_catalog import SupabaseProductCatalog
from nutrition_diary.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from nutrition_diary.adapters.supabase_summary_repository import (
    SupabaseSummaryRepository,
)
from nutrition_diary.config import Settings
from nutrition_diary.services.auth import AuthService
from nutrition_diary.services.catalog import CatalogService
from nutrition_diary.services.diary import DiaryService
from nutrition_diary.services.recommendations import RecommendationService
from nutrition_diary.services.summary import SummaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    catalog_service: CatalogService
    diary_service: DiaryService
    summary_service: SummaryService
    recommendation_service: RecommendationService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    diary_repository = SupabaseDiaryRepository(supabase_client)
    catalog_service = CatalogService(
        catalog=SupabaseProductCatalog(supabase_client),
        search_limit=resolved_settings.search_limit,
    )
    recommendation_service = RecommendationService(
        catalog_service=catalog_service,
        profile_repository=SupabaseProfileRepository(supabase_client),
        daily_calories=resolved_settings.default_daily_rate,
        forbidden_limit=resolved_settings.forbidden_products_limit,
    )
    diary_service = DiaryService(
        repository=diary_repository,
        catalog_service=catalog_service,
    )
    summary_service = SummaryService(
        diary_repository=diary_repository,
        repository=SupabaseSummaryRepository(supabase_client),
        rate_provider=recommendation_service,
    )

    return AppContainer(
        settings=resolved_settings,
        auth_service=SupabaseAuthService(supabase_client),
        catalog_service=catalog_service,
        diary_service=diary_service,
        summary_service=summary_service,
        recommendation_service=recommendation_service,
    )
