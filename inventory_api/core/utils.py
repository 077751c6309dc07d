"""
Utility helpers shared across routers/services.
"""

from __future__ import annotations

from typing import Optional

from starlette.requests import Request

FALSY_FLAGS = {"", "0", "false", "no", "off"}


def absolute_url(path: str, base: str) -> str:
    """
    Join a path onto the request origin (``scheme://host``).
    """
    base_url = (base or "").rstrip("/")
    if not path.startswith("/"):
        path = "/" + path
    return base_url + path


def request_base_url(request: Request) -> str:
    """Origin of the inbound request, honouring the Host header."""
    host = request.headers.get("host") or request.url.netloc
    return f"{request.url.scheme}://{host}"


def is_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() not in FALSY_FLAGS
