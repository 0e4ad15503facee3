"""
Account activation: local flag first, then propagation to the product service.
"""
from __future__ import annotations

import httpx
import pytest

from user_service.clients.product_client import ProductServiceClient, ProductServiceError
from user_service.db.models import User
from user_service.services.activation import AccountActivationService
from user_service.services.errors import IdentityError, MissingCredentialError, UserNotFoundError
from user_service.services.user_service import UserService


class RecordingProducts:
    def __init__(self, fail: bool = False):
        self.calls: list[tuple[str, str, str]] = []
        self.fail = fail

    def deactivate_products(self, user_id, token):
        self._record("deactivate", user_id, token)

    def activate_products(self, user_id, token):
        self._record("activate", user_id, token)

    def _record(self, action, user_id, token):
        self.calls.append((action, user_id, token))
        if self.fail:
            raise ProductServiceError("Product service returned 503")


@pytest.fixture()
def account(user_db):
    users = UserService()
    return users, users.register_user(User(email="ana@example.com", name="Ana", address=""), "pw123")


def test_deactivate_flips_flag_and_propagates_token(account):
    users, user = account
    products = RecordingProducts()

    AccountActivationService(users, products).deactivate(user.id, "tok")

    assert users.get_by_id(user.id).is_activated is False
    assert products.calls == [("deactivate", user.id, "tok")]


def test_activate_flips_flag_and_propagates_token(account):
    users, user = account
    products = RecordingProducts()
    service = AccountActivationService(users, products)
    service.deactivate(user.id, "tok")

    service.activate(user.id, "tok")

    assert users.get_by_id(user.id).is_activated is True
    assert products.calls[-1] == ("activate", user.id, "tok")


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token_stops_before_any_change(account, token):
    users, user = account
    products = RecordingProducts()

    with pytest.raises(MissingCredentialError, match="No JWT token found."):
        AccountActivationService(users, products).deactivate(user.id, token)

    assert products.calls == []
    assert users.get_by_id(user.id).is_activated is True


def test_unknown_user_is_not_propagated(user_db):
    products = RecordingProducts()

    with pytest.raises(UserNotFoundError):
        AccountActivationService(UserService(), products).deactivate("missing", "tok")

    assert products.calls == []


def test_persistence_failure_is_not_propagated(account, monkeypatch):
    users, user = account
    products = RecordingProducts()

    def _reject(_user):
        raise IdentityError(["Concurrency failure"])

    monkeypatch.setattr(users, "update_user", _reject)

    with pytest.raises(IdentityError) as exc:
        AccountActivationService(users, products).deactivate(user.id, "tok")

    assert exc.value.errors == ["Concurrency failure"]
    assert products.calls == []


def test_downstream_failure_keeps_local_change(account):
    users, user = account
    products = RecordingProducts(fail=True)

    with pytest.raises(ProductServiceError):
        AccountActivationService(users, products).deactivate(user.id, "tok")

    assert users.get_by_id(user.id).is_activated is False


def test_unreachable_product_service_keeps_local_change(account):
    users, user = account

    def _refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.Client(base_url="http://products.test", transport=httpx.MockTransport(_refuse))
    products = ProductServiceClient("http://products.test", client=http)

    with pytest.raises(ProductServiceError):
        AccountActivationService(users, products).deactivate(user.id, "tok")

    assert users.get_by_id(user.id).is_activated is False
