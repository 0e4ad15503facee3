from __future__ import annotations

import httpx
import pytest

from user_service.clients.product_client import ProductServiceClient, ProductServiceError


def _client(handler, calls):
    def _record(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    http = httpx.Client(base_url="http://products.test", transport=httpx.MockTransport(_record))
    return ProductServiceClient("http://products.test", client=http)


def test_deactivate_forwards_bearer_token():
    calls: list[httpx.Request] = []
    client = _client(lambda request: httpx.Response(204), calls)

    client.deactivate_products("user-1", "abc.def.ghi")

    assert len(calls) == 1
    assert calls[0].method == "PUT"
    assert calls[0].url.path == "/api/products/deactivate/user-1"
    assert calls[0].headers["authorization"] == "Bearer abc.def.ghi"


def test_activate_uses_activate_path():
    calls: list[httpx.Request] = []
    client = _client(lambda request: httpx.Response(200), calls)

    client.activate_products("user-1", "tok")

    assert calls[0].url.path == "/api/products/activate/user-1"


@pytest.mark.parametrize("status_code", [401, 404, 500, 503])
def test_non_success_status_raises(status_code):
    client = _client(lambda request: httpx.Response(status_code), [])

    with pytest.raises(ProductServiceError, match=str(status_code)):
        client.deactivate_products("user-1", "tok")


def test_transport_error_raises():
    def _refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(_refuse, [])

    with pytest.raises(ProductServiceError, match="connection refused"):
        client.activate_products("user-1", "tok")


def test_close_leaves_injected_client_open():
    http = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(204)))
    ProductServiceClient("http://products.test", client=http).close()

    assert http.is_closed is False
    http.close()


def test_close_owned_client():
    client = ProductServiceClient("http://products.test", timeout=1.0)
    client.close()

    assert client._client.is_closed is True
