"""
Delivery of account links (e-mail confirmation, password reset).

Links are written to the service log; there is no outbound mail transport.
"""

from __future__ import annotations

import logging
from urllib.parse import urlencode

from .config import get_settings

logger = logging.getLogger(__name__)


def client_link(path: str, **params: str) -> str:
    """Build an absolute link into the client application."""
    base = get_settings().client_url.rstrip("/")
    if not path.startswith("/"):
        path = "/" + path
    query = urlencode(params)
    return f"{base}{path}?{query}" if query else f"{base}{path}"


def send_link(to_email: str, subject: str, link: str) -> bool:
    logger.info("[%s] link for %s: %s", subject, to_email, link)
    return True
