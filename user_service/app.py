"""FastAPI application for the user service."""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from common.errors import install_error_handling
from common.log_config import configure_logging
from common.middleware import SecurityHeadersMiddleware
from user_service.core.config import get_settings
from user_service.db.create_tables import create_all
from user_service.routers import auth as auth_router
from user_service.routers import users as users_router


@asynccontextmanager
async def _lifespan(app: FastAPI):
    create_all()
    yield


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="User Service", lifespan=_lifespan)
    install_error_handling(app)
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    app.include_router(auth_router.router)
    app.include_router(users_router.router)

    @app.get("/health", include_in_schema=False)
    def health():
        return {"status": "ok"}

    return app


app = create_app()
