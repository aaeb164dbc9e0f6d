"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.i18n import TranslationService
from infrastructure.services.providers import (
    get_settings,
    get_translation_service,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Translation service dependency
TranslationServiceDep = Annotated[
    TranslationService, Depends(get_translation_service)
]

__all__ = [
    "SettingsDep",
    "TranslationServiceDep",
]
