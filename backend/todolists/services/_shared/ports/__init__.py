"""
todolists.services._shared.ports
================================

Collection of *ports* (hexagonal interfaces) the service layer depends on.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`: issue/verify stateless bearer tokens.

- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher`: one-way salted password hashing.

Concrete adapters live under ``todolists.infra``.
"""

from __future__ import annotations

from .password_hasher import PasswordHasher
from .token_provider import DEFAULT_TOKEN_TTL, StubTokenProvider, TokenProvider

__all__ = [
    "DEFAULT_TOKEN_TTL",
    "PasswordHasher",
    "StubTokenProvider",
    "TokenProvider",
]
