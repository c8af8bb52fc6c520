# todolists/services/auth/service.py
from __future__ import annotations

import logging

from pymongo.errors import DuplicateKeyError

from todolists.services._shared.base import BaseService, ServiceContext
from todolists.services._shared.converters import user_to_out
from todolists.services._shared.dto import AuthUserOut
from todolists.services._shared.errors import AuthenticationError, ValidationError
from todolists.services._shared.ports import PasswordHasher, TokenProvider
from todolists.services.auth.dto import SignInIn, SignUpIn

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def normalize_email(value: str) -> str:
    return value.strip().lower()


class AuthService(BaseService):
    """
    Sign-up and sign-in. Neither operation requires an identity.

    Passwords go through a pluggable :class:`PasswordHasher`; tokens are
    issued by a pluggable :class:`TokenProvider`.
    """

    def __init__(
        self,
        *,
        ctx: ServiceContext,
        token_provider: TokenProvider,
        password_hasher: PasswordHasher,
    ) -> None:
        super().__init__(ctx=ctx)
        self.tokens = token_provider
        self.hasher = password_hasher

    def sign_up(self, dto: SignUpIn) -> AuthUserOut:
        """
        Store a new user with a hashed password and issue a token.

        :param dto: Sign-up input.
        :returns: The created user and its bearer token.
        :raises ValidationError: If the email is already registered.
        """
        document = {
            "name": dto.name,
            "email": normalize_email(dto.email),
            "password": self.hasher.hash(dto.password),
        }
        if dto.avatar is not None:
            document["avatar"] = dto.avatar

        # Uniqueness is enforced by the ``Users.email`` index
        try:
            user = self.storage.users.add(document)
        except DuplicateKeyError as exc:
            raise ValidationError("Email already registered", field="email") from exc

        token = self.tokens.issue(str(user["_id"]))
        logger.info("User signed up", extra={"user_id": str(user["_id"])})
        return AuthUserOut(user=user_to_out(user), token=token)

    def sign_in(self, dto: SignInIn) -> AuthUserOut:
        """
        Verify credentials and issue a token.

        :param dto: Sign-in input.
        :raises AuthenticationError: If the user is unknown or the password
            does not match (same message for both).
        """
        user = self.storage.users.get_by_email(normalize_email(dto.email))
        if user is None or not self.hasher.verify(dto.password, user.get("password", "")):
            logger.info("Sign-in rejected")
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = self.tokens.issue(str(user["_id"]))
        logger.info("User signed in", extra={"user_id": str(user["_id"])})
        return AuthUserOut(user=user_to_out(user), token=token)
