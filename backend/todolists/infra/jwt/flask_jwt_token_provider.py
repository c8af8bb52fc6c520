# todolists/infra/jwt/flask_jwt_token_provider.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, cast

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt import PyJWTError

from todolists.services._shared.ports import DEFAULT_TOKEN_TTL, TokenProvider

log = logging.getLogger(__name__)

# Flask-JWT-Extended sets "type": "access" | "refresh"
ACCESS_TOKEN_TYPE = "access"


@dataclass(slots=True)
class JWTTokenProvider(TokenProvider):
    """
    Adapter for Flask-JWT-Extended.

    Tokens are HS256 JWTs signed with ``JWT_SECRET_KEY``; the subject claim
    carries the user id and ``exp`` the end of the validity window.

    .. note::
       Requires an active Flask app context with proper JWT settings.
    """

    ttl: timedelta = DEFAULT_TOKEN_TTL

    def issue(self, user_id: str) -> str:
        return cast(str, create_access_token(identity=str(user_id), expires_delta=self.ttl))

    def verify(self, token: str) -> str | None:
        try:
            claims = cast(dict[str, Any], decode_token(token))
        except (PyJWTError, JWTExtendedException) as exc:
            log.debug("token.rejected reason=%s", type(exc).__name__)
            return None
        if claims.get("type") != ACCESS_TOKEN_TYPE:
            return None
        # decode_token only validates ``exp`` when the claim is present
        if not isinstance(claims.get("exp"), (int, float)):
            log.debug("token.rejected reason=missing_exp")
            return None
        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            return None
        return subject
