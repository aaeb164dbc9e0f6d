"""Translation editor feature settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings
from infrastructure.i18n.formats import FORMATS_BY_NAME
from infrastructure.i18n.models import IgnoreList


class EditorSettings(FeatureSettings):
    """Translation editor configuration.

    Environment Variables:
        TRANSLATIONS_DIR: Directory holding one resource file per language
        MAIN_LANGUAGE: Language presented first when none is requested (default: en)
        IGNORE_FILES: Comma-separated file names that are never written
        HIDE_IGNORED_FILES: Also leave ignored files out of reads (default: False)
        DEFAULT_FORMAT: Format for newly created language files, json or yaml
        LEGACY_PATH_COLLISIONS: Silently replace leaves on key collisions
            instead of rejecting the write (default: False)
        FRONTEND_DIST: Directory of a built frontend to serve at /

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        ignore_list = settings.editor.ignore_list
        ```
    """

    TRANSLATIONS_DIR: str = Field(default="", alias="TRANSLATIONS_DIR")
    MAIN_LANGUAGE: str = Field(default="en", alias="MAIN_LANGUAGE")
    IGNORE_FILES: str = Field(default="", alias="IGNORE_FILES")
    HIDE_IGNORED_FILES: bool = Field(default=False, alias="HIDE_IGNORED_FILES")
    DEFAULT_FORMAT: str = Field(default="json", alias="DEFAULT_FORMAT")
    LEGACY_PATH_COLLISIONS: bool = Field(
        default=False, alias="LEGACY_PATH_COLLISIONS"
    )
    FRONTEND_DIST: str = Field(default="", alias="FRONTEND_DIST")

    @field_validator("DEFAULT_FORMAT")
    @classmethod
    def validate_default_format(cls, v: str) -> str:
        """Only formats the writer can encode are accepted."""
        if v.lower() not in FORMATS_BY_NAME:
            raise ValueError(
                f"DEFAULT_FORMAT must be one of {sorted(FORMATS_BY_NAME)}, got {v!r}"
            )
        return v.lower()

    @property
    def ignore_list(self) -> IgnoreList:
        return IgnoreList.from_value(self.IGNORE_FILES)
