"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AUTH_SECRET = "change-me"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy URL of the shortcut store.
        auth_secret: HMAC key used to sign and verify access tokens.
            The default is only accepted in debug mode.
        access_token_expire_seconds: Lifetime of issued access tokens.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="SLASH_"
    )

    project_name: str = "Slash"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    database_url: str = "sqlite:///slash.db"
    auth_secret: str = DEFAULT_AUTH_SECRET
    access_token_expire_seconds: int = 60 * 60 * 24 * 7
    rate_limit_default: str = "120/minute"


settings = Settings()
