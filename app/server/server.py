from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from api.router import api_router
from infrastructure.configuration import Settings
from infrastructure.i18n import TranslationService
from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.services import get_settings

logger = get_module_logger()

CORRELATION_HEADER = "X-Correlation-ID"


class ConfigurationError(Exception):
    """Custom exception for configuration errors."""


def _build_service(settings: Settings) -> TranslationService:
    if not settings.editor.TRANSLATIONS_DIR:
        raise ConfigurationError("TRANSLATIONS_DIR is not configured")
    try:
        return TranslationService.from_settings(settings)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the translation editor application.

    Args:
        settings: Explicit settings (e.g. built from CLI flags). Defaults to
            the environment-backed settings singleton.

    Returns:
        FastAPI: Application serving the translations API and, when
        FRONTEND_DIST is set, the built UI.

    Raises:
        ConfigurationError: If the translations directory is missing.
    """
    if settings is None:
        settings = get_settings()
    service = _build_service(settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "application_startup",
            translations_dir=str(service.loader.translations_dir),
            main_language=service.main_language,
            ignored_files=list(service.writer.ignore_list),
        )
        yield
        logger.info("application_shutdown")

    handler = FastAPI(title="Translation Sheet Editor", lifespan=lifespan)
    handler.state.settings = settings
    handler.state.translation_service = service
    handler.dependency_overrides[get_settings] = lambda: settings

    handler.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @handler.middleware("http")
    async def request_context(request: Request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ) as correlation_id:
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            return response

    @handler.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        logger.exception(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    handler.include_router(api_router)

    frontend_dist = settings.editor.FRONTEND_DIST
    if frontend_dist:
        if Path(frontend_dist).is_dir():
            handler.mount(
                "/", StaticFiles(directory=frontend_dist, html=True), name="frontend"
            )
            logger.info("serving_frontend", frontend_dist=frontend_dist)
        else:
            logger.warning("frontend_dist_not_found", frontend_dist=frontend_dist)

    return handler
