"""JSON logging for the API process.

Every record emitted while a request is active carries the request id and,
once the caller has been resolved, the caller's user id. Domain identifiers
passed through ``extra={...}`` are copied into the payload when listed in
:data:`EXTRA_KEYS`.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from flask import Flask, Response, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
# Inbound headers checked, in order, for a caller-supplied correlation id
INBOUND_ID_HEADERS = (REQUEST_ID_HEADER, "X-Correlation-ID")

EXTRA_KEYS = (
    "endpoint",
    "elapsed_ms",
    "operation",
    "user_id",
    "task_list_id",
    "todo_id",
    "count",
)


def ensure_request_id() -> str:
    """
    Return the id of the current request, assigning one on first use.

    Outside a request a fresh id is returned and nothing is stored.
    """
    if not has_request_context():
        return str(uuid4())
    request_id = g.get("request_id")
    if request_id is None:
        inbound = (request.headers.get(name) for name in INBOUND_ID_HEADERS)
        request_id = next((value for value in inbound if value), None) or str(uuid4())
        g.request_id = request_id
    return request_id


class RequestContextFilter(logging.Filter):
    """Stamp records with ``request_id`` and, when known, the caller's ``user_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not has_request_context():
            record.request_id = None
            return True
        record.request_id = ensure_request_id()
        ctx = g.get("service_ctx")
        if not hasattr(record, "user_id") and ctx is not None and ctx.user_id:
            record.user_id = ctx.user_id
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        payload.update({key: getattr(record, key) for key in EXTRA_KEYS if hasattr(record, key)})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str | int = "INFO") -> None:
    """Send root logging to stdout as JSON at ``level``."""

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestContextFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)


def init_app(app: Flask) -> None:
    """Assign request ids early and echo them in the ``X-Request-ID`` header."""

    app.logger.addFilter(RequestContextFilter())

    @app.before_request
    def _assign_request_id() -> None:
        ensure_request_id()

    @app.after_request
    def _echo_request_id(response: Response) -> Response:
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response


__all__ = ["EXTRA_KEYS", "JSONFormatter", "configure_logging", "ensure_request_id", "init_app"]
