"""Translation service.

Use cases behind the HTTP endpoints: read a snapshot of every language, and
the three ways of writing edits back (whole sheet, one key across
languages, sparse per-language patches). One lock serializes all writes,
since each of them reads, modifies and rewrites files.
"""

import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from infrastructure.i18n.codec import is_placeholder, split_path, to_tree
from infrastructure.i18n.errors import ValidationError
from infrastructure.i18n.formats import get_format
from infrastructure.i18n.loader import ResourceLoader
from infrastructure.i18n.models import TranslationSet
from infrastructure.i18n.mutations import (
    keep_placeholders,
    replace_all,
    set_many,
    set_one,
)
from infrastructure.i18n.resolver import key_universe, missing_keys
from infrastructure.i18n.writer import PersistenceWriter
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()

Mutation = Callable[[TranslationSet, str, Any], Any]


def _require_mapping(value: Any, message: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValidationError(message)
    return value


def _sheet_view(translation_set: TranslationSet) -> TranslationSet:
    """Drop empty-section placeholders, which have no cell in the sheet."""
    return TranslationSet(
        translations={
            language: {k: v for k, v in flat.items() if not is_placeholder(v)}
            for language, flat in translation_set.translations.items()
        },
        failed=set(translation_set.failed),
    )


class TranslationService:
    """Class-based translation service.

    Wraps a ResourceLoader and a PersistenceWriter that share one
    translations directory.

    Usage:
        service = TranslationService.from_settings(settings)
        snapshot = service.get_translations(main_language="fr")
        service.update_translation("home.title", {"fr": "Accueil"})
    """

    def __init__(
        self,
        loader: ResourceLoader,
        writer: PersistenceWriter,
        main_language: str = "en",
        hide_ignored: bool = False,
        legacy_collisions: bool = False,
    ):
        """Initialize translation service.

        Args:
            loader: Reads the translations directory.
            writer: Writes it back, honoring the ignore-list.
            main_language: Language presented first when none is requested.
            hide_ignored: Leave ignored files out of reads as well.
            legacy_collisions: Replace silently on key collisions.
        """
        self.loader = loader
        self.writer = writer
        self.main_language = main_language
        self.hide_ignored = hide_ignored
        self.legacy_collisions = legacy_collisions
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TranslationService":
        """Build a service from application settings.

        Raises:
            ValueError: If the translations directory does not exist.
        """
        editor = settings.editor
        translations_dir = Path(editor.TRANSLATIONS_DIR).expanduser().resolve()
        resource_format = get_format(editor.DEFAULT_FORMAT)
        return cls(
            loader=ResourceLoader(translations_dir, default_format=resource_format),
            writer=PersistenceWriter(
                translations_dir,
                ignore_list=editor.ignore_list,
                default_format=resource_format,
            ),
            main_language=editor.MAIN_LANGUAGE,
            hide_ignored=editor.HIDE_IGNORED_FILES,
            legacy_collisions=editor.LEGACY_PATH_COLLISIONS,
        )

    def load(self) -> TranslationSet:
        """Return a fresh snapshot of the translations directory."""
        return self.loader.load(self.writer.ignore_list if self.hide_ignored else None)

    def get_translations(self, main_language: Optional[str] = None) -> Dict[str, Any]:
        """Snapshot in the shape the sheet UI consumes.

        Returns:
            ``{"translations": {lang: {key: value}}, "allKeys": [...],
            "mainLang": lang}``
        """
        translation_set = _sheet_view(self.load())
        return {
            "translations": translation_set.to_dict(),
            "allKeys": key_universe(translation_set),
            "mainLang": main_language or self.main_language,
        }

    def missing_keys(self) -> Dict[str, List[str]]:
        return missing_keys(_sheet_view(self.load()))

    def save(self, translations: Dict[str, Any]) -> List[OperationResult]:
        """Replace every given language with its complete FlatMap.

        Empty sections of the current file survive where the new keys leave
        room for them. A file that cannot be read is replaced.

        Raises:
            ValidationError: If the payload is malformed.
            PathCollisionError: If a language's keys collide.
            PersistenceError: On the first file that cannot be written.
        """
        _require_mapping(translations, "Missing translations in body")

        def replace(staged: TranslationSet, language: str, flat: Any) -> None:
            previous = staged.get(language)
            replace_all(staged, language, flat, legacy=self.legacy_collisions)
            keep_placeholders(staged.get(language), previous)

        return self._apply(translations, replace, strict=False)

    def update_translation(
        self, key: str, values: Dict[str, Any]
    ) -> List[OperationResult]:
        """Set one key in each of the given languages.

        Languages without a file get a new one.

        Raises:
            ValidationError: If the key or values are malformed.
            PathCollisionError: If the key collides in one of the languages.
            DecodeError: If a language's file exists but cannot be read.
            PersistenceError: On the first file that cannot be written.
        """
        if not key or values is None:
            raise ValidationError("Missing key or values")
        split_path(key)
        _require_mapping(values, "Values must map language codes to values")

        def assign(current: TranslationSet, language: str, value: Any) -> None:
            set_one(current, language, key, value, legacy=self.legacy_collisions)

        return self._apply(values, assign, strict=True)

    def save_translations(self, translations: Dict[str, Any]) -> List[OperationResult]:
        """Merge sparse per-language patches into the files on disk.

        Keys not named in a patch are preserved.

        Raises:
            ValidationError: If the payload is malformed.
            PathCollisionError: If a patch collides with existing keys.
            DecodeError: If a language's file exists but cannot be read.
            PersistenceError: On the first file that cannot be written.
        """
        _require_mapping(translations, "Missing translations")

        def merge(current: TranslationSet, language: str, patch: Any) -> None:
            set_many(current, language, patch, legacy=self.legacy_collisions)

        return self._apply(translations, merge, strict=True)

    def _apply(
        self,
        payload: Dict[str, Any],
        mutation: Mutation,
        strict: bool,
    ) -> List[OperationResult]:
        """Stage ``mutation`` for every language, then write them in turn.

        Nothing is written until every language has been validated. Ignored
        languages are staged (so they are validated) but neither read nor
        written. Each file keeps its layout: dotted top-level keys stay flat,
        nested sections stay nested. With ``strict`` a file that cannot be
        read aborts the whole call.
        """
        with self._lock:
            paths = {language: self.loader.path_for(language) for language in payload}
            writable = [
                language
                for language, path in paths.items()
                if not self.writer.ignore_list.is_ignored(path)
            ]

            staged = self.loader.read_languages(writable, strict=strict)
            for language, item in payload.items():
                mutation(staged, language, item)

            trees = {
                language: to_tree(
                    staged.get(language),
                    staged.layout(language),
                    legacy=self.legacy_collisions,
                )
                for language in paths
            }

            results = [
                self.writer.flush(language, trees[language], path=paths[language])
                for language in paths
            ]

        logger.info(
            "translations_saved",
            written=[r.data["language"] for r in results if r.is_success],
            skipped=[r.data["language"] for r in results if r.is_skipped],
        )
        return results
