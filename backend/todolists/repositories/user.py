"""Persistence access for the ``Users`` collection."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .base import BaseRepository, Document


class UserRepository(BaseRepository):
    """Users are created on sign-up and never updated afterwards."""

    collection_name = "Users"

    def get_by_email(self, email: str) -> Document | None:
        """Return the user registered with ``email`` (already normalized)."""
        return self.collection.find_one({"email": email})

    def index_specs(self) -> Iterable[tuple[str, dict[str, Any]]]:
        return [("email", {"unique": True, "name": "uq_users_email"})]
