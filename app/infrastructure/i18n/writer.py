"""Persistence writer.

Serializes a language's tree back to its file. A write replaces the whole
file atomically; files on the ignore-list are never touched.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional

from infrastructure.i18n.codec import ResourceTree
from infrastructure.i18n.errors import PersistenceError
from infrastructure.i18n.formats import JSON_FORMAT, ResourceFormat, format_for_path
from infrastructure.i18n.models import IgnoreList, validate_language
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult

logger = get_module_logger()


def _atomic_write(target: Path, content: str) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    # Temporary files are created 0600; keep the target's permissions instead.
    mode = target.stat().st_mode & 0o777 if target.exists() else 0o644
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
        tmp_name = None
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)


class PersistenceWriter:
    """Writes language trees into a translations directory.

    Attributes:
        translations_dir: Directory holding the resource files.
        ignore_list: File names that must never be written.
        default_format: Format for languages without an existing file.
    """

    def __init__(
        self,
        translations_dir: Path,
        ignore_list: Optional[IgnoreList] = None,
        default_format: ResourceFormat = JSON_FORMAT,
    ):
        self.translations_dir = Path(translations_dir)
        self.ignore_list = ignore_list or IgnoreList()
        self.default_format = default_format

    def default_path(self, language: str) -> Path:
        return self.translations_dir / f"{language}{self.default_format.extension}"

    def flush(
        self,
        language: str,
        tree: ResourceTree,
        path: Optional[Path] = None,
    ) -> OperationResult:
        """Write ``tree`` as the full content of the language's file.

        Args:
            language: Language code.
            tree: Complete tree for the language.
            path: File to write; defaults to ``<language><default extension>``.

        Returns:
            OperationResult with SUCCESS, or SKIPPED when the file is on
            the ignore-list.

        Raises:
            PersistenceError: If the file cannot be written.
        """
        validate_language(language)
        target = Path(path) if path is not None else self.default_path(language)
        details = {"language": language, "file": target.name}

        if self.ignore_list.is_ignored(target):
            logger.info("translation_write_skipped", **details)
            return OperationResult.skipped(
                f"{target.name} is on the ignore-list", data=details
            )

        resource_format = format_for_path(target) or self.default_format
        try:
            _atomic_write(target, resource_format.dumps(tree))
        except OSError as e:
            logger.error("translation_write_failed", error=str(e), **details)
            raise PersistenceError(language, target, str(e)) from e

        logger.info("translation_file_written", **details)
        return OperationResult.success(data=details, message=f"wrote {target.name}")
