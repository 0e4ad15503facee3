"""
Configuration helpers for the product service.

Settings are read once from environment variables so that routers/services do
not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    log_level: str
    database_url: str
    jwt_key: str
    jwt_issuer: str
    jwt_audience: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        database_url=os.getenv("PRODUCT_DATABASE_URL", ""),
        jwt_key=os.getenv("JWT_KEY", "dev-only-signing-key-change-me-0123456789"),
        jwt_issuer=os.getenv("JWT_ISSUER", "user-service"),
        jwt_audience=os.getenv("JWT_AUDIENCE", "services"),
    )
