"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from profilehub.api.deps import json_response, timing
from profilehub.core.extensions import get_account_store
from profilehub.services._shared.errors import StorageUnavailableError

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return service liveness and account store reachability."""

    store = get_account_store()
    storage_status = "ok"
    try:
        store.ping()
    except StorageUnavailableError:
        current_app.logger.exception("healthcheck.storage_error", extra={"backend": store.backend})
        storage_status = "fail"
    payload = {
        "status": "ok",
        "service": current_app.config.get("SERVICE_NAME", "linkedin-auth"),
        "storage": storage_status,
    }
    return json_response(payload)
