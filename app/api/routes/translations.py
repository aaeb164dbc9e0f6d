from typing import Any, Optional

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from infrastructure.i18n import (
    DecodeError,
    PathCollisionError,
    TranslationError,
    ValidationError,
)
from infrastructure.logging import get_module_logger
from infrastructure.services import TranslationServiceDep

logger = get_module_logger()
router = APIRouter(prefix="/api", tags=["Translations"])


def _status_code(error: TranslationError) -> int:
    """Map an engine error to an HTTP status code."""
    if isinstance(error, (ValidationError, PathCollisionError)):
        return 400
    if isinstance(error, DecodeError):
        # The file on disk is broken; merging into it would lose data.
        return 409
    return 500


def _failure(error: TranslationError, content: dict) -> JSONResponse:
    status_code = _status_code(error)
    if status_code >= 500:
        logger.error("translation_request_failed", error=str(error))
    else:
        logger.warning("translation_request_rejected", error=str(error))
    return JSONResponse(status_code=status_code, content=content)


def _field(payload: Any, name: str) -> Any:
    return payload.get(name) if isinstance(payload, dict) else None


@router.get("/translations")
def get_translations(service: TranslationServiceDep, main: Optional[str] = None):
    """Return every language flattened, the sorted key universe and the main language."""
    return service.get_translations(main_language=main)


@router.get("/missing-keys")
def get_missing_keys(service: TranslationServiceDep):
    """Return, per language, the keys other languages have and it lacks."""
    return {"missing": service.missing_keys()}


@router.post("/save")
def save(service: TranslationServiceDep, payload: Any = Body(default=None)):
    """Replace each given language file with the full sheet column.

    Body: ``{"translations": {lang: {dotKey: value}}}``. Ignored files are
    skipped and still reported as success.
    """
    try:
        service.save(_field(payload, "translations"))
    except TranslationError as e:
        return _failure(e, {"ok": False, "error": str(e)})
    return {"ok": True}


@router.post("/update-translation")
def update_translation(
    service: TranslationServiceDep, payload: Any = Body(default=None)
):
    """Set one key across several languages.

    Body: ``{"key": dotKey, "values": {lang: value}}``. Each language file is
    read, updated at that key only, and rewritten.
    """
    try:
        service.update_translation(_field(payload, "key"), _field(payload, "values"))
    except TranslationError as e:
        return _failure(e, {"error": str(e)})
    return {"success": True}


@router.post("/save-translations")
def save_translations(
    service: TranslationServiceDep, payload: Any = Body(default=None)
):
    """Merge sparse per-language patches into the files on disk.

    Body: ``{"translations": {lang: {dotKey: value}}}``. Keys not in a patch
    are kept.
    """
    try:
        service.save_translations(_field(payload, "translations"))
    except TranslationError as e:
        return _failure(e, {"ok": False, "error": str(e)})
    return {"ok": True}
