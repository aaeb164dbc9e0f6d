"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """HTTP server runtime configuration.

    Environment Variables:
        HOST: Interface to bind (default: 127.0.0.1)
        PORT: Port to listen on (default: 3124)
        OPEN_BROWSER: Open the editor in a browser on startup (default: True)
        ALLOW_ORIGINS: Comma-separated CORS origins (default: *)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        url = f"http://{settings.server.HOST}:{settings.server.PORT}"
        ```
    """

    HOST: str = Field(default="127.0.0.1", alias="HOST")
    PORT: int = Field(default=3124, alias="PORT")
    OPEN_BROWSER: bool = Field(default=True, alias="OPEN_BROWSER")
    ALLOW_ORIGINS: str = Field(default="*", alias="ALLOW_ORIGINS")

    @property
    def allow_origins(self) -> list[str]:
        return [
            origin.strip() for origin in self.ALLOW_ORIGINS.split(",") if origin.strip()
        ]

    @property
    def url(self) -> str:
        return f"http://{self.HOST}:{self.PORT}"
