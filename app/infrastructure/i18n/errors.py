"""Error taxonomy for the translation engine.

Every failure the engine raises derives from TranslationError so the HTTP
layer can map it to a response without catching unrelated exceptions.
"""

from pathlib import Path
from typing import Optional


class TranslationError(Exception):
    """Base class for translation engine errors."""


class DecodeError(TranslationError):
    """A resource file could not be read or decoded into a tree.

    Attributes:
        path: File that failed to decode.
        reason: Underlying parser message.
    """

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to decode {self.path.name}: {reason}")


class PathCollisionError(TranslationError):
    """A dot-path is at the same time a leaf and a prefix of another path.

    Attributes:
        path: Path being written.
        conflict: Existing path it collides with.
    """

    def __init__(self, path: str, conflict: str):
        self.path = path
        self.conflict = conflict
        super().__init__(f"Key '{path}' collides with existing key '{conflict}'")


class ValidationError(TranslationError):
    """A language code, key or payload is malformed."""


class PersistenceError(TranslationError):
    """Writing a language file failed.

    Attributes:
        language: Language whose file could not be written.
        path: Target file.
    """

    def __init__(self, language: str, path: Path, reason: Optional[str] = None):
        self.language = language
        self.path = Path(path)
        self.reason = reason
        message = f"Failed to write {self.path.name} (language '{language}')"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
