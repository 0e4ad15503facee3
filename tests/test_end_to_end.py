"""
Both services wired together: the user service's product client talks to the
product service application in-process.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from product_service.app import create_app as create_product_app
from user_service.app import create_app as create_user_app
from user_service.clients.product_client import ProductServiceClient
from user_service.routers.users import get_product_client


@pytest.fixture()
def services(user_db, product_db):
    product_api = TestClient(create_product_app())
    user_app = create_user_app()
    user_app.dependency_overrides[get_product_client] = lambda: ProductServiceClient(
        "http://testserver", client=product_api
    )
    return TestClient(user_app), product_api


def _login(user_api) -> tuple[str, dict[str, str]]:
    user_api.post(
        "/api/auth/register",
        json={"email": "owner@example.com", "password": "pw123", "name": "Owner"},
    )
    token = user_api.post("/api/auth/login", json={"email": "owner@example.com", "password": "pw123"}).json()["token"]
    headers = {"Authorization": f"Bearer {token}"}
    me = user_api.get("/api/users", headers=headers).json()[0]
    return me["id"], headers


def test_deactivating_a_user_soft_deletes_their_products(services):
    user_api, product_api = services
    user_id, headers = _login(user_api)
    for name in ("Lamp", "Desk"):
        created = product_api.post("/api/products", json={"name": name, "price": 10, "isAvailable": True}, headers=headers)
        assert created.status_code == 201
        assert created.json()["createdByUserId"] == user_id

    assert user_api.put(f"/api/users/{user_id}/deactivate", headers=headers).status_code == 200
    assert user_api.get(f"/api/users/{user_id}", headers=headers).json()["isActivated"] is False
    assert product_api.get("/api/products", headers=headers).json() == []

    assert user_api.put(f"/api/users/{user_id}/activate", headers=headers).status_code == 200
    assert sorted(p["name"] for p in product_api.get("/api/products", headers=headers).json()) == ["Desk", "Lamp"]
