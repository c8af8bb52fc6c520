"""Shared API helpers for request context and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar, cast

from flask import Response, current_app, g, jsonify, request

from todolists.core.extensions import get_storage
from todolists.core.logger import ensure_request_id
from todolists.services._shared.base import ServiceContext
from todolists.services._shared.ports import PasswordHasher, TokenProvider
from todolists.services.identity.resolver import IdentityResolver

F = TypeVar("F", bound=Callable[..., Any])

AUTH_HEADER = "Authorization"


def get_token_provider() -> TokenProvider:
    return cast(TokenProvider, current_app.extensions["token_provider"])


def get_password_hasher() -> PasswordHasher:
    return cast(PasswordHasher, current_app.extensions["password_hasher"])


def load_request_context() -> None:
    """Resolve the caller once and store the request context on ``g``.

    Registered as a ``before_request`` hook; runs before any operation.
    """
    resolver = IdentityResolver(storage=get_storage(), token_provider=get_token_provider())
    g.service_ctx = resolver.build_context(
        request.headers.get(AUTH_HEADER),
        request_id=ensure_request_id(),
    )


def get_request_context() -> ServiceContext:
    """Return the context built by :func:`load_request_context`."""
    ctx = g.get("service_ctx")
    if ctx is None:
        raise RuntimeError("Request context missing; load_request_context() did not run.")
    return cast(ServiceContext, ctx)


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
