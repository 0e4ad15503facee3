"""
Configuration helpers for the user service.

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
    jwt_expire_minutes: int
    product_service_url: str
    product_service_timeout: float
    client_url: str
    email_confirmation_ttl_seconds: int
    password_reset_ttl: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _float(value: str, default: float) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        database_url=os.getenv("USER_DATABASE_URL", ""),
        jwt_key=os.getenv("JWT_KEY", "dev-only-signing-key-change-me-0123456789"),
        jwt_issuer=os.getenv("JWT_ISSUER", "user-service"),
        jwt_audience=os.getenv("JWT_AUDIENCE", "services"),
        jwt_expire_minutes=_int(os.getenv("JWT_EXPIRE_MINUTES", "30"), 30),
        product_service_url=os.getenv("PRODUCT_SERVICE_URL", "http://localhost:5001").rstrip("/"),
        product_service_timeout=_float(os.getenv("PRODUCT_SERVICE_TIMEOUT", "10"), 10.0),
        client_url=os.getenv("CLIENT_URL", "http://localhost:4200").rstrip("/"),
        email_confirmation_ttl_seconds=_int(os.getenv("EMAIL_CONFIRMATION_TTL_SECONDS", "86400"), 86400),
        password_reset_ttl=_int(os.getenv("PASSWORD_RESET_TTL", "86400"), 86400),
    )
