"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Prefix under which the routers are mounted.
        timezone: IANA zone used for ApiError timestamps.
        user_store: Backing store for users ("memory" or "sql").
        database_url: Explicit SQLAlchemy URL for the "sql" store.
        rate_limit_default: Default rate limit for the user endpoints.

    When ``database_url`` is unset, the DSN is built from the postgres_*
    values so Docker Compose setups need no extra variable.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "User Directory"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = ""
    timezone: str = "UTC"
    user_store: Literal["memory", "sql"] = "memory"
    rate_limit_default: str = "60/minute"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "users"

    def get_database_dsn(self) -> str:
        """Return the effective SQLAlchemy DSN for the users store.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build a psycopg DSN from postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
