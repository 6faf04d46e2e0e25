"""
Environment-based configuration for dev and prod modes.

Usage:
    # Dev mode (default) - debug logging, GraphiQL enabled
    python -m blog_graph.main --mode dev

    # Prod mode - JSON logs, GraphiQL disabled
    python -m blog_graph.main --mode prod
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Base settings shared across environments."""

    # Application
    APP_NAME: str = "Blog GraphQL API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    GRAPHQL_IDE: bool = False
    CORS_ORIGINS: list[str] = ["https://yourdomain.com"]

    @property
    def is_dev(self) -> bool:
        return getattr(self, 'ENV_MODE', 'dev') == 'dev'


class DevSettings(Settings):
    """Development settings - verbose, interactive."""

    ENV_MODE: str = "dev"
    DEBUG: bool = True
    GRAPHQL_IDE: bool = True
    CORS_ORIGINS: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class ProdSettings(Settings):
    """Production settings - JSON logs, no GraphiQL."""

    ENV_MODE: str = "prod"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings(env_mode: str = "dev") -> Settings:
    """Get settings based on environment mode."""
    if env_mode == "prod":
        return ProdSettings()
    return DevSettings()
