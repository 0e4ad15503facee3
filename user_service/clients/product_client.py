"""
HTTP client for the product service's bulk status endpoints.

Each call forwards the bearer token of the incoming request. There is no
retry: any transport error or non-2xx answer raises ProductServiceError.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class ProductServiceError(RuntimeError):
    pass


class ProductServiceClient:
    def __init__(self, base_url: str, *, timeout: float = 10.0, client: Optional[httpx.Client] = None):
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def deactivate_products(self, user_id: str, token: str) -> None:
        self._put_status("deactivate", user_id, token)

    def activate_products(self, user_id: str, token: str) -> None:
        self._put_status("activate", user_id, token)

    def _put_status(self, action: str, user_id: str, token: str) -> None:
        path = f"/api/products/{action}/{user_id}"
        try:
            response = self._client.put(path, headers={"Authorization": f"Bearer {token}"})
        except httpx.HTTPError as exc:
            logger.warning("Product service unreachable on %s: %s", path, exc)
            raise ProductServiceError(f"Product service request failed: {exc}") from exc
        if not response.is_success:
            logger.warning("Product service answered %s on %s", response.status_code, path)
            raise ProductServiceError(
                f"Product service returned {response.status_code} for PUT {path}."
            )
        logger.info("Products of user %s: %s", user_id, action)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
