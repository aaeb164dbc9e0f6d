"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.editor import EditorSettings

__all__ = [
    "EditorSettings",
]
