from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol

DEFAULT_TOKEN_TTL = timedelta(days=30)


class TokenProvider(Protocol):
    """Port for issuing and verifying stateless bearer tokens."""

    def issue(self, user_id: str) -> str:
        """Return a signed token for ``user_id`` valid for the configured window."""
        ...

    def verify(self, token: str) -> str | None:
        """Return the embedded user id, or ``None`` for any invalid token."""
        ...


class StubTokenProvider(TokenProvider):
    """Deterministic token provider used in unit tests."""

    def __init__(self, *, ttl: timedelta = DEFAULT_TOKEN_TTL) -> None:
        self.ttl = ttl
        self._seq = 0
        self._issued: dict[str, tuple[str, datetime]] = {}

    def issue(self, user_id: str) -> str:
        self._seq += 1
        token = f"stub.{user_id}.{self._seq}"
        self._issued[token] = (user_id, datetime.now(UTC) + self.ttl)
        return token

    def verify(self, token: str) -> str | None:
        entry = self._issued.get(token)
        if entry is None:
            return None
        user_id, expires_at = entry
        if expires_at <= datetime.now(UTC):
            return None
        return user_id
