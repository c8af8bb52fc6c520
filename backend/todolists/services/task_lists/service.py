from __future__ import annotations

import logging
from datetime import UTC, datetime

from todolists.repositories.base import to_object_id
from todolists.services._shared.base import BaseService
from todolists.services._shared.converters import task_list_to_out
from todolists.services._shared.dto import TaskListOut
from todolists.services._shared.errors import ValidationError

from .dto import (
    TaskListAddUserIn,
    TaskListCreateIn,
    TaskListDeleteIn,
    TaskListGetIn,
    TaskListUpdateIn,
)

logger = logging.getLogger(__name__)


class TaskListService(BaseService):
    """
    Create, read, rename, delete and share task lists.

    Every operation requires an identity. Only ``my_task_lists`` filters by
    membership: get/update/delete act on any list id (known gap, kept as is),
    and deleting a list leaves its todos in place.
    """

    def my_task_lists(self) -> list[TaskListOut]:
        """Return every list the caller is a member of."""

        user = self.require_identity()
        rows = self.storage.task_lists.list_for_member(user["_id"])
        logger.info(
            "Listed task lists",
            extra={"user_id": str(user["_id"]), "count": len(rows)},
        )
        return [task_list_to_out(self.storage, row) for row in rows]

    def get(self, dto: TaskListGetIn) -> TaskListOut | None:
        """Return the list with ``dto.id`` or ``None``."""

        self.require_identity()
        row = self.storage.task_lists.get(dto.id)
        if row is None:
            return None
        return task_list_to_out(self.storage, row)

    def create(self, dto: TaskListCreateIn) -> TaskListOut:
        """Create a list with the caller as its sole member."""

        user = self.require_identity()
        row = self.storage.task_lists.add(
            {
                "title": dto.title,
                "createdAt": datetime.now(UTC).isoformat(),
                "userIds": [user["_id"]],
            }
        )
        logger.info(
            "Task list created",
            extra={"user_id": str(user["_id"]), "task_list_id": str(row["_id"])},
        )
        return task_list_to_out(self.storage, row)

    def update(self, dto: TaskListUpdateIn) -> TaskListOut | None:
        """Rename a list; ``None`` when it does not exist."""

        self.require_identity()
        row = self.storage.task_lists.update_fields(dto.id, {"title": dto.title})
        if row is None:
            return None
        logger.info("Task list renamed", extra={"task_list_id": dto.id})
        return task_list_to_out(self.storage, row)

    def delete(self, dto: TaskListDeleteIn) -> bool:
        """Delete a list (its todos are not removed)."""

        self.require_identity()
        deleted = self.storage.task_lists.delete(dto.id)
        logger.info("Task list deleted", extra={"task_list_id": dto.id, "count": int(deleted)})
        return deleted

    def add_user(self, dto: TaskListAddUserIn) -> TaskListOut | None:
        """
        Add a member to a list (idempotent).

        :returns: The list with its updated members, or ``None`` when the list
            does not exist.
        :raises ValidationError: When ``dto.user_id`` is not a valid identifier.
        """

        self.require_identity()
        user_oid = to_object_id(dto.user_id)
        if user_oid is None:
            raise ValidationError("Invalid user id", field="userId")

        row = self.storage.task_lists.get(dto.task_list_id)
        if row is None:
            return None

        members = row.setdefault("userIds", [])
        if user_oid not in members:
            self.storage.task_lists.add_member(row["_id"], user_oid)
            # Mirror the persisted $addToSet in the fetched copy
            members.append(user_oid)
            logger.info(
                "User added to task list",
                extra={"task_list_id": str(row["_id"]), "user_id": dto.user_id},
            )
        return task_list_to_out(self.storage, row)
