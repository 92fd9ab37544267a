"""HTTP helper utilities for tests."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

API = "/api"


def json_headers(request_id: str | None = None) -> dict[str, str]:
    """Return standard JSON headers.

    Parameters
    ----------
    request_id:
        Optional correlation id sent as ``X-Request-ID``.

    Returns
    -------
    dict[str, str]
        HTTP headers dictionary.
    """

    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if request_id:
        headers["X-Request-ID"] = request_id
    return headers


def build_url(path: str, **query: str | int | float | None) -> str:
    """Build a URL with encoded query parameters.

    Parameters
    ----------
    path:
        Base path of the endpoint.
    **query:
        Query parameters to append; ``None`` values are dropped.

    Returns
    -------
    str
        Final URL string including encoded query string.
    """

    qs = urlencode({k: v for k, v in query.items() if v is not None})
    return f"{path}?{qs}" if qs else path


def signup(client: Any, **overrides: Any):
    """POST ``/signup`` with a valid payload, overridden by ``overrides``."""

    payload = {
        "fullName": "Ari Steele",
        "email": "ari@example.com",
        "password": "s3cret!",
        "headline": "Platform engineer",
    }
    payload.update(overrides)
    return client.post(f"{API}/signup", json=payload, headers=json_headers())


def signin(client: Any, email: str = "ari@example.com", password: str = "s3cret!"):
    """POST ``/signin`` with the given credentials."""

    return client.post(
        f"{API}/signin", json={"email": email, "password": password}, headers=json_headers()
    )
