"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import AuthUserSchema, SignInSchema, SignUpSchema
from .operation import MUTATIONS, OPERATION_NAMES, QUERIES, OperationRequestSchema
from .task_list import (
    TaskListAddUserSchema,
    TaskListCreateSchema,
    TaskListIdSchema,
    TaskListSchema,
    TaskListUpdateSchema,
)
from .todo import ToDoCreateSchema, ToDoSchema, ToDoUpdateSchema
from .user import UserSchema

__all__ = [
    "AuthUserSchema",
    "SignInSchema",
    "SignUpSchema",
    "MUTATIONS",
    "OPERATION_NAMES",
    "QUERIES",
    "OperationRequestSchema",
    "TaskListAddUserSchema",
    "TaskListCreateSchema",
    "TaskListIdSchema",
    "TaskListSchema",
    "TaskListUpdateSchema",
    "ToDoCreateSchema",
    "ToDoSchema",
    "ToDoUpdateSchema",
    "UserSchema",
]
