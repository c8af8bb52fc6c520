"""Repository package exposing persistence-layer access for all collections."""

from __future__ import annotations

from todolists.repositories.base import BaseRepository, Document, to_object_id
from todolists.repositories.task_list import TaskListRepository
from todolists.repositories.todo import ToDoRepository
from todolists.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "Document",
    "to_object_id",
    "TaskListRepository",
    "ToDoRepository",
    "UserRepository",
]
