# storefront/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Env vars (.env):
      - DATABASE_URL (PostgreSQL in production, SQLite for local runs/tests)

    Optional:
      - DB_SSLMODE (e.g. "require"; only applied to PostgreSQL URLs)
      - DB_POOL_SIZE / DB_MAX_OVERFLOW (ignored for SQLite)
      - LOG_LEVEL
    """

    PROJECT_NAME: str = "Storefront Cart API"

    # Database config
    DATABASE_URL: str = "sqlite:///./storefront.db"
    DB_SSLMODE: str | None = None
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
