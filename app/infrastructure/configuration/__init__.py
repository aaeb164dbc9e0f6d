"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
translation editor using Pydantic BaseSettings with domain-based
organization.

Exports:
    Settings: Main settings class
    EditorSettings: Editor feature settings (for CLI overrides and tests)
    ServerSettings: HTTP server settings (for CLI overrides and tests)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features import EditorSettings
from infrastructure.configuration.infrastructure import ServerSettings

__all__ = ["Settings", "EditorSettings", "ServerSettings"]
