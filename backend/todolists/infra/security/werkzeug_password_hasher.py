"""Password hashing adapter backed by :mod:`werkzeug.security`."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from todolists.services._shared.ports import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted hashes in werkzeug's ``method$salt$hash`` format."""

    def hash(self, raw: str) -> str:
        """
        Hash a plain text password.

        :param raw: Plain text password to hash.
        :raises ValueError: When ``raw`` is empty or not a string.
        """
        if not isinstance(raw, str) or not raw:
            raise ValueError("Password must be a non-empty string.")
        return generate_password_hash(raw)

    def verify(self, raw: str, hashed: str) -> bool:
        if not hashed:
            return False
        # ``check_password_hash`` is untyped; coerce to bool for mypy.
        return bool(check_password_hash(hashed, raw))
