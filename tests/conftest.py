from __future__ import annotations

import sys
import uuid
from pathlib import Path

import pytest

# Make the service packages importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from product_service.core import config as product_config  # noqa: E402
from product_service.db import models as product_models  # noqa: E402
from product_service.db import session as product_session  # noqa: E402
from user_service.core import config as user_config  # noqa: E402
from user_service.core.security import issue_access_token  # noqa: E402
from user_service.db import models as user_models  # noqa: E402
from user_service.db import session as user_session  # noqa: E402


def _reset_caches(config_module, session_module) -> None:
    config_module.get_settings.cache_clear()
    session_module.get_engine.cache_clear()
    session_module._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


def _temp_database(tmp_path, monkeypatch, env_name, filename, config_module, session_module, base):
    db_file = tmp_path / filename
    monkeypatch.setenv(env_name, f"sqlite:///{db_file}")
    _reset_caches(config_module, session_module)

    engine = session_module.get_engine()
    base.metadata.drop_all(bind=engine)
    base.metadata.create_all(bind=engine)

    yield db_file

    try:
        base.metadata.drop_all(bind=engine)
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    _reset_caches(config_module, session_module)


@pytest.fixture()
def product_db(tmp_path, monkeypatch):
    """Temporary SQLite database for the product service, with caches reset."""
    yield from _temp_database(
        tmp_path,
        monkeypatch,
        "PRODUCT_DATABASE_URL",
        "products.db",
        product_config,
        product_session,
        product_models.Base,
    )


@pytest.fixture()
def user_db(tmp_path, monkeypatch):
    """Temporary SQLite database for the user service, with caches reset."""
    yield from _temp_database(
        tmp_path,
        monkeypatch,
        "USER_DATABASE_URL",
        "users.db",
        user_config,
        user_session,
        user_models.Base,
    )


@pytest.fixture()
def bearer_for():
    """Build an Authorization header carrying a token for the given user id."""

    def _headers(user_id, email: str = "owner@example.com") -> dict[str, str]:
        return {"Authorization": f"Bearer {issue_access_token(email, str(user_id))}"}

    return _headers


@pytest.fixture()
def owner_id() -> uuid.UUID:
    return uuid.uuid4()
