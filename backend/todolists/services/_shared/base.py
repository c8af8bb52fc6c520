# todolists/services/_shared/base.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from todolists.core import errors as api_errors
from todolists.repositories.base import Document
from todolists.services._shared.errors import (
    AuthenticationError,
    ServiceError,
    ValidationError,
)

if TYPE_CHECKING:
    from todolists.core.storage import MongoStorage


@dataclass(slots=True)
class ServiceContext:
    """
    Carry request-scoped data: storage handle and resolved identity.

    One instance is built per inbound request and never shared.

    :param storage: Document-store handle opened at boot.
    :param user: Stored user record of the caller, ``None`` when anonymous.
    :param request_id: Correlation id for logging/tracing.
    """

    storage: MongoStorage
    user: Document | None = None
    request_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def user_id(self) -> str | None:
        return str(self.user["_id"]) if self.user is not None else None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Hold the request context and expose its storage handle.
    * Offer the identity check every protected operation calls first.
    * Centralize error translation.

    Notes
    -----
    - There is no central authorization gate: each operation calls
      :meth:`require_identity` at its own entry point, before touching storage.
    """

    def __init__(self, *, ctx: ServiceContext) -> None:
        """
        Initialize the base service.

        :param ctx: Request-scoped context (storage + identity).
        :type ctx: ServiceContext
        """
        self.ctx = ctx

    @property
    def storage(self) -> MongoStorage:
        return self.ctx.storage

    # --------------------------- AuthN --------------------------------

    def require_identity(self) -> Document:
        """
        Return the caller's user record.

        :raises AuthenticationError: When the context is anonymous.
        """
        if self.ctx.user is None:
            raise AuthenticationError("Authentication required")
        return self.ctx.user

    # -------------------------- Error handling ------------------------------

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Map service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :returns: Translated exception ready to be re-raised.
        """
        if isinstance(exc, AuthenticationError):
            # → 401 Unauthorized
            return api_errors.Unauthorized(str(exc))

        if isinstance(exc, ValidationError):
            # → 422 Unprocessable Entity
            details = {"field": exc.field} if exc.field else None
            return api_errors.UnprocessableEntity(str(exc), details=details)

        if isinstance(exc, ServiceError):
            return api_errors.APIError(message=str(exc), status_code=400, code="bad_request")

        # Fallback: untouched (bubbles up to the Flask handlers)
        return exc
