"""Shared API helpers for responses, timing and service construction."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from profilehub.core.extensions import get_account_store, get_password_hasher, get_token_issuer
from profilehub.services.auth.service import AuthService
from profilehub.services.profile.service import ProfileService
from profilehub.services.registration.service import UserRegistrationService

F = TypeVar("F", bound=Callable[..., Any])


def registration_service() -> UserRegistrationService:
    return UserRegistrationService(store=get_account_store(), hasher=get_password_hasher())


def auth_service() -> AuthService:
    return AuthService(
        store=get_account_store(),
        hasher=get_password_hasher(),
        tokens=get_token_issuer(),
    )


def profile_service() -> ProfileService:
    return ProfileService(store=get_account_store())


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
