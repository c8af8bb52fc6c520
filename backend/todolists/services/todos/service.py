from __future__ import annotations

import logging
from typing import Any

from todolists.repositories.base import to_object_id
from todolists.services._shared.base import BaseService
from todolists.services._shared.converters import todo_with_parent_to_out
from todolists.services._shared.dto import ToDoOut
from todolists.services._shared.errors import ValidationError

from .dto import ToDoCreateIn, ToDoUpdateIn

logger = logging.getLogger(__name__)


class ToDoService(BaseService):
    """Create and update todos. There is no delete path."""

    def create(self, dto: ToDoCreateIn) -> ToDoOut:
        """Create an incomplete todo under ``dto.task_list_id``."""

        self.require_identity()
        task_list_oid = to_object_id(dto.task_list_id)
        if task_list_oid is None:
            raise ValidationError("Invalid task list id", field="taskListId")

        row = self.storage.todos.add(
            {"content": dto.content, "isCompleted": False, "taskListId": task_list_oid}
        )
        logger.info(
            "ToDo created",
            extra={"todo_id": str(row["_id"]), "task_list_id": dto.task_list_id},
        )
        return todo_with_parent_to_out(self.storage, row)

    def update(self, dto: ToDoUpdateIn) -> ToDoOut | None:
        """Change content and/or completion; ``None`` when the todo is missing."""

        self.require_identity()
        changes: dict[str, Any] = {}
        if dto.content is not None:
            changes["content"] = dto.content
        if dto.is_completed is not None:
            changes["isCompleted"] = dto.is_completed

        row = self.storage.todos.update_fields(dto.id, changes)
        if row is None:
            return None
        logger.info("ToDo updated", extra={"todo_id": dto.id})
        return todo_with_parent_to_out(self.storage, row)
