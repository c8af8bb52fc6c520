"""Map stored documents to public DTOs, resolving relationships on the way.

Every join issues one storage round trip per related entity. Member lookups of
a list run concurrently and are reassembled in member order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from bson import ObjectId

from todolists.repositories.base import Document

from .dto import TaskListOut, ToDoOut, UserOut

if TYPE_CHECKING:
    from todolists.core.storage import MongoStorage

logger = logging.getLogger(__name__)

# Completion fraction is not computed yet; every list reports this value.
PROGRESS_PLACEHOLDER = 0.0

MAX_MEMBER_LOOKUPS = 8


def user_to_out(doc: Document) -> UserOut:
    return UserOut(
        id=str(doc["_id"]),
        name=doc["name"],
        email=doc["email"],
        avatar=doc.get("avatar"),
    )


def todo_to_out(doc: Document, *, task_list: TaskListOut | None = None) -> ToDoOut:
    return ToDoOut(
        id=str(doc["_id"]),
        content=doc["content"],
        is_completed=bool(doc.get("isCompleted", False)),
        task_list_id=str(doc["taskListId"]),
        task_list=task_list,
    )


def resolve_members(storage: MongoStorage, member_ids: Sequence[ObjectId]) -> tuple[UserOut, ...]:
    """Fetch member users concurrently, keeping the stored member order.

    Members whose user record no longer exists are skipped.
    """
    if not member_ids:
        return ()
    if len(member_ids) == 1:
        docs = [storage.users.get(member_ids[0])]
    else:
        workers = min(len(member_ids), MAX_MEMBER_LOOKUPS)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            docs = list(pool.map(storage.users.get, member_ids))

    members: list[UserOut] = []
    for member_id, doc in zip(member_ids, docs):
        if doc is None:
            logger.warning("Task list member has no user record", extra={"user_id": str(member_id)})
            continue
        members.append(user_to_out(doc))
    return tuple(members)


def task_list_to_out(storage: MongoStorage, doc: Document) -> TaskListOut:
    """Convert a stored list, resolving its members and todos."""
    todos = storage.todos.list_for_task_list(doc["_id"])
    return TaskListOut(
        id=str(doc["_id"]),
        created_at=doc["createdAt"],
        title=doc["title"],
        progress=PROGRESS_PLACEHOLDER,
        users=resolve_members(storage, doc.get("userIds", [])),
        todos=tuple(todo_to_out(t) for t in todos),
    )


def todo_with_parent_to_out(storage: MongoStorage, doc: Document) -> ToDoOut:
    """Convert a stored todo and embed its parent list when it still exists."""
    parent = storage.task_lists.get(doc["taskListId"])
    return todo_to_out(
        doc,
        task_list=task_list_to_out(storage, parent) if parent is not None else None,
    )
