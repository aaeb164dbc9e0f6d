"""
Factory functions for dependency injection.

Provides application-scoped providers for core infrastructure services.
"""

from functools import lru_cache

from fastapi import Request

from infrastructure.configuration import Settings
from infrastructure.i18n import TranslationService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Applications started from the CLI replace it through
    ``app.dependency_overrides`` so the explicit settings win.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def get_translation_service(request: Request) -> TranslationService:
    """
    Get the translation service built for the running application.

    The service is constructed once by the application factory from its
    settings and stored on ``app.state``.

    Usage:
        @router.get("/api/translations")
        def get_translations(service: TranslationServiceDep):
            return service.get_translations()

    Returns:
        TranslationService: The application's service instance.
    """
    return request.app.state.translation_service
