# todolists/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SignUpIn:
    """
    Input DTO for sign-up.

    :param email: Login email (normalized by the service).
    :type email: str
    :param password: Raw password (hashed before persistence).
    :type password: str
    :param name: Display name.
    :type name: str
    :param avatar: Optional avatar URL.
    :type avatar: str | None
    """

    email: str
    password: str
    name: str
    avatar: str | None = None


@dataclass(frozen=True, slots=True)
class SignInIn:
    """
    Input DTO for sign-in.

    :param email: Login email.
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str
