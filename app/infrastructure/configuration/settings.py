"""Translation editor configuration settings - main aggregator."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.features import EditorSettings
from infrastructure.configuration.infrastructure import ServerSettings


class Settings(BaseSettings):
    """Translation editor configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object:

    - **Features**: the editor itself (translations directory, ignore-list, ...)
    - **Infrastructure**: HTTP server binding

    Environment Variables:
        ENVIRONMENT: "production" switches logs to JSON
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA reported by /version

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        translations_dir = settings.editor.TRANSLATIONS_DIR
        port = settings.server.PORT
        ```
    """

    ENVIRONMENT: str = Field(default="development", alias="ENVIRONMENT")
    LOG_LEVEL: str = Field(default="INFO", alias="LOG_LEVEL")
    GIT_SHA: str = Field(default="Unknown", alias="GIT_SHA")

    editor: EditorSettings
    server: ServerSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "editor": EditorSettings,
            "server": ServerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
