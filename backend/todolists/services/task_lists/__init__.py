from __future__ import annotations

from .dto import (
    TaskListAddUserIn,
    TaskListCreateIn,
    TaskListDeleteIn,
    TaskListGetIn,
    TaskListUpdateIn,
)
from .service import TaskListService

__all__ = [
    "TaskListService",
    "TaskListAddUserIn",
    "TaskListCreateIn",
    "TaskListDeleteIn",
    "TaskListGetIn",
    "TaskListUpdateIn",
]
