"""Translation models for the sheet editor.

Defines the in-memory shapes shared by the loader, the mutation applier and
the writer.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, Set, Union

from infrastructure.i18n.codec import NESTED, FlatMap
from infrastructure.i18n.errors import ValidationError

# Language codes become file stems, so they may not contain path separators.
LANGUAGE_PATTERN = re.compile(r"^[A-Za-z0-9_@-]+(?:\.[A-Za-z0-9_@-]+)*$")


def validate_language(language: str) -> str:
    """Check that ``language`` is a usable language code.

    Args:
        language: Code derived from a file stem (e.g. "en", "pt-BR").

    Returns:
        The language code unchanged.

    Raises:
        ValidationError: If the code is empty or not a safe file stem.
    """
    if not isinstance(language, str) or not language:
        raise ValidationError("Language code must be a non-empty string")
    if not LANGUAGE_PATTERN.match(language):
        raise ValidationError(f"Invalid language code: {language!r}")
    return language


@dataclass(frozen=True)
class IgnoreList:
    """File names excluded from every write.

    Attributes:
        files: Exact file names (e.g. "fr.json").
    """

    files: FrozenSet[str] = frozenset()

    @classmethod
    def from_value(cls, value: Union[str, Iterable[str], None]) -> "IgnoreList":
        """Build an IgnoreList from a comma-separated string or an iterable.

        Args:
            value: "fr.json, de.json", ["fr.json"], or None.

        Returns:
            IgnoreList with blank entries dropped.
        """
        if value is None:
            return cls()
        if isinstance(value, str):
            value = value.split(",")
        return cls(frozenset(name.strip() for name in value if name and name.strip()))

    def is_ignored(self, path: Union[str, Path]) -> bool:
        """Return True if the file name of ``path`` is in the list."""
        return Path(path).name in self.files

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.files))


@dataclass
class TranslationSet:
    """Flat translations for every loaded language.

    Attributes:
        translations: Language code to FlatMap.
        layouts: Language code to the key layout of its file (NESTED or
            FLAT); languages without an entry are written NESTED.
        failed: Languages whose file could not be decoded.
    """

    translations: Dict[str, FlatMap] = field(default_factory=dict)
    layouts: Dict[str, str] = field(default_factory=dict)
    failed: Set[str] = field(default_factory=set)

    def get(self, language: str) -> FlatMap:
        """Return the FlatMap for ``language``, or an empty one."""
        return self.translations.get(language, {})

    def ensure(self, language: str) -> FlatMap:
        """Return the FlatMap for ``language``, creating it if absent."""
        return self.translations.setdefault(language, {})

    def layout(self, language: str) -> str:
        return self.layouts.get(language, NESTED)

    def __len__(self) -> int:
        return len(self.translations)

    def to_dict(self) -> Dict[str, FlatMap]:
        return {language: dict(flat) for language, flat in self.translations.items()}
