"""Persistence access for the ``ToDo`` collection."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bson import ObjectId

from .base import BaseRepository, Document


class ToDoRepository(BaseRepository):
    collection_name = "ToDo"
    _updatable_fields = frozenset({"content", "isCompleted"})

    def list_for_task_list(self, task_list_id: ObjectId) -> list[Document]:
        """Return the todos owned by ``task_list_id``."""
        return self.find({"taskListId": task_list_id})

    def index_specs(self) -> Iterable[tuple[str, dict[str, Any]]]:
        return [("taskListId", {"name": "ix_todo_task_list_id"})]
