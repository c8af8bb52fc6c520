"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app
from pymongo.errors import PyMongoError

from todolists.api.deps import json_response, timing
from todolists.core.extensions import get_storage

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application and storage health information."""

    storage_status = "ok"
    try:
        get_storage().ping()
    except PyMongoError:
        current_app.logger.exception("healthcheck.storage_error")
        storage_status = "fail"
    version = current_app.config.get("APP_VERSION", "dev")
    commit = current_app.config.get("APP_COMMIT", "unknown")
    payload = {"status": "ok", "storage": storage_status, "version": version, "commit": commit}
    return json_response(payload)
