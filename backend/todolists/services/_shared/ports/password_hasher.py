from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """
    One-way, salted password hashing.

    Verification recomputes the hash from the candidate and the stored salt;
    the raw password is never recoverable.
    """

    def hash(self, raw: str) -> str: ...

    def verify(self, raw: str, hashed: str) -> bool: ...
