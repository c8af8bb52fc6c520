"""
IdentityResolver
================

Turn the raw bearer credential of an inbound request into the caller's user
record, once per request, before any operation runs.

Failures never reject the request here: a missing, invalid or expired token,
or a token whose user was deleted, all resolve to anonymous. Operations that
need an identity raise on their own.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from todolists.repositories.base import Document
from todolists.services._shared.base import ServiceContext
from todolists.services._shared.ports import TokenProvider

if TYPE_CHECKING:
    from todolists.core.storage import MongoStorage

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_token(raw: str | None) -> str | None:
    """
    Return the token carried by an ``Authorization`` header value.

    Both ``Bearer <token>`` and a bare ``<token>`` are accepted.

    :param raw: Header value, possibly ``None`` or blank.
    :returns: Token string or ``None`` when absent.
    """
    if not raw:
        return None
    value = raw.strip()
    scheme, _, rest = value.partition(" ")
    if rest and scheme.lower() == BEARER_SCHEME:
        value = rest.strip()
    return value or None


class IdentityResolver:
    """Resolve bearer credentials against the token provider and storage."""

    def __init__(self, *, storage: MongoStorage, token_provider: TokenProvider) -> None:
        self.storage = storage
        self.tokens = token_provider

    def resolve(self, raw_credential: str | None) -> Document | None:
        """
        Return the stored user for ``raw_credential`` or ``None`` (anonymous).

        :param raw_credential: Raw ``Authorization`` header value.
        """
        token = extract_token(raw_credential)
        if token is None:
            return None

        user_id = self.tokens.verify(token)
        if user_id is None:
            logger.debug("Bearer token rejected; continuing as anonymous")
            return None

        user = self.storage.users.get(user_id)
        if user is None:
            logger.info("Token subject no longer exists", extra={"user_id": user_id})
        return user

    def build_context(
        self, raw_credential: str | None, *, request_id: str | None = None
    ) -> ServiceContext:
        """Build the per-request context holding storage and identity."""
        return ServiceContext(
            storage=self.storage,
            user=self.resolve(raw_credential),
            request_id=request_id,
        )
