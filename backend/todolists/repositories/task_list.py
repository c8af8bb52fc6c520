"""Persistence access for the ``TaskList`` collection."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bson import ObjectId

from .base import BaseRepository, Document, to_object_id


class TaskListRepository(BaseRepository):
    """
    Task lists keep their member ids in ``userIds``.

    Membership is append-only; there is no removal helper on purpose.
    """

    collection_name = "TaskList"
    _updatable_fields = frozenset({"title"})

    def list_for_member(self, user_id: ObjectId) -> list[Document]:
        """Return every list whose member set contains ``user_id``."""
        return self.find({"userIds": user_id})

    def add_member(self, task_list_id: Any, user_id: ObjectId) -> bool:
        """Add ``user_id`` to the member set without creating duplicates.

        :returns: ``True`` when the stored member set changed.
        """
        oid = to_object_id(task_list_id)
        if oid is None:
            return False
        result = self.collection.update_one({"_id": oid}, {"$addToSet": {"userIds": user_id}})
        return result.modified_count == 1

    def index_specs(self) -> Iterable[tuple[str, dict[str, Any]]]:
        return [("userIds", {"name": "ix_task_list_user_ids"})]
