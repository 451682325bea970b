"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT = "development"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable the interactive docs. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the server binds to.
        port: Listen port (``PORT``).
        node_env: Environment name (``NODE_ENV``). Reported by /health and
            gates fault detail in 500 responses.
        cors_allow_origins: Origins allowed by the CORS middleware.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Health Mock API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000
    node_env: str | None = None
    cors_allow_origins: list[str] = ["*"]

    @property
    def environment(self) -> str:
        """Effective environment name; unset or empty means development."""
        return self.node_env or DEVELOPMENT

    @property
    def is_development(self) -> bool:
        return self.environment == DEVELOPMENT


settings = Settings()
