"""Resource loading.

Reads a directory holding one resource file per language (``en.json``,
``fr.yml``, ...) into a TranslationSet of flat per-language mappings.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from infrastructure.i18n.codec import (
    NESTED,
    FlatMap,
    ResourceTree,
    flatten,
    layout_of,
    validate_paths,
)
from infrastructure.i18n.errors import DecodeError, TranslationError, ValidationError
from infrastructure.i18n.formats import JSON_FORMAT, ResourceFormat, format_for_path
from infrastructure.i18n.models import IgnoreList, TranslationSet, validate_language
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class ResourceLoader:
    """Loader for a directory of per-language resource files.

    The language code of a file is its name without extension. Files in an
    unsupported format and sub-directories are skipped.

    Attributes:
        translations_dir: Directory containing the resource files.
        default_format: Format used for languages that have no file yet.
    """

    def __init__(
        self,
        translations_dir: Path,
        default_format: ResourceFormat = JSON_FORMAT,
    ):
        """Initialize the loader.

        Args:
            translations_dir: Path to the directory with resource files.
            default_format: Format of files created for new languages.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.default_format = default_format

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

    def discover(self, ignore_list: Optional[IgnoreList] = None) -> Dict[str, Path]:
        """Map each language code to its resource file.

        Args:
            ignore_list: Files to leave out. None lists every file.

        Returns:
            Dict of language code to file path. When two files share a
            language code the first in sorted order wins.
        """
        files: Dict[str, Path] = {}
        for path in sorted(self.translations_dir.iterdir()):
            if not path.is_file() or format_for_path(path) is None:
                continue
            if ignore_list is not None and ignore_list.is_ignored(path):
                logger.info("translation_file_ignored", file=path.name)
                continue

            language = path.stem
            try:
                validate_language(language)
            except ValidationError:
                logger.warning("translation_file_bad_language", file=path.name)
                continue

            if language in files:
                logger.warning(
                    "duplicate_language_file",
                    language=language,
                    kept=files[language].name,
                    skipped=path.name,
                )
                continue
            files[language] = path
        return files

    def load(self, ignore_list: Optional[IgnoreList] = None) -> TranslationSet:
        """Load every language into a fresh TranslationSet.

        A file that fails to decode does not abort the load: its language is
        mapped to an empty FlatMap and recorded in ``failed``. A file whose
        keys collide once flattened counts as a decode failure.

        Args:
            ignore_list: Files to leave out of the set.

        Returns:
            TranslationSet snapshot of the directory.
        """
        translation_set = TranslationSet()
        for language, path in self.discover(ignore_list).items():
            try:
                _, flat = self._decode(path)
            except DecodeError as e:
                logger.warning(
                    "translation_file_decode_failed",
                    language=language,
                    file=path.name,
                    error=e.reason,
                )
                translation_set.translations[language] = {}
                translation_set.failed.add(language)
                continue
            translation_set.translations[language] = flat

        logger.info(
            "translations_loaded",
            translations_dir=str(self.translations_dir),
            language_count=len(translation_set),
            failed=sorted(translation_set.failed),
        )
        return translation_set

    def path_for(self, language: str) -> Path:
        """Return the file backing ``language``.

        Falls back to ``<language><default extension>`` when the language has
        no file yet.
        """
        validate_language(language)
        existing = self.discover().get(language)
        if existing is not None:
            return existing
        return self.translations_dir / f"{language}{self.default_format.extension}"

    def read_languages(
        self, languages: Iterable[str], strict: bool = True
    ) -> TranslationSet:
        """Load only ``languages`` together with the layout of each file.

        Used on write paths. In strict mode a file that cannot be decoded, or
        whose layout mixes dotted keys with nested sections, raises instead
        of being rewritten into a different shape. Otherwise such a file
        reads as empty (or keeps its keys) and is written back nested.

        Raises:
            DecodeError: In strict mode, if a file cannot be rewritten as is.
            ValidationError: If a language code is invalid.
        """
        translation_set = TranslationSet()
        for language in languages:
            path = self.path_for(language)
            if not path.exists():
                translation_set.translations[language] = {}
                continue
            try:
                tree, flat = self._decode(path)
            except DecodeError:
                if strict:
                    raise
                translation_set.translations[language] = {}
                translation_set.failed.add(language)
                continue

            layout = layout_of(tree)
            if layout is None:
                if strict:
                    raise DecodeError(
                        path, "dotted keys are mixed with nested sections"
                    )
                layout = NESTED
            translation_set.translations[language] = flat
            translation_set.layouts[language] = layout
        return translation_set

    def _decode(self, path: Path) -> Tuple[ResourceTree, FlatMap]:
        tree = format_for_path(path).read(path)
        try:
            flat = flatten(tree)
            validate_paths(flat, flat)
        except TranslationError as e:
            raise DecodeError(path, str(e)) from e
        return tree, flat
