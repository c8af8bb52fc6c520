"""Task list resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from .todo import ToDoSchema
from .user import UserSchema

_object_id = validate.Length(min=1, max=64)


class TaskListIdSchema(Schema):
    """Variables of ``getTaskList`` and ``deleteTaskList``."""

    id = fields.String(required=True, validate=_object_id)


class TaskListCreateSchema(Schema):
    """Variables of ``createTaskList``."""

    title = fields.String(required=True, validate=validate.Length(min=1, max=200))


class TaskListUpdateSchema(Schema):
    """Variables of ``updateTaskList``."""

    id = fields.String(required=True, validate=_object_id)
    title = fields.String(required=True, validate=validate.Length(min=1, max=200))


class TaskListAddUserSchema(Schema):
    """Variables of ``addUserToTaskList``."""

    task_list_id = fields.String(required=True, data_key="taskListId", validate=_object_id)
    user_id = fields.String(required=True, data_key="userId", validate=_object_id)


class TaskListSchema(Schema):
    """Public representation of a task list with members and todos."""

    id = fields.String(required=True)
    created_at = fields.String(required=True, data_key="createdAt")
    title = fields.String(required=True)
    progress = fields.Float(required=True)
    users = fields.List(fields.Nested(UserSchema), required=True)
    # Nested todos only carry their parent id
    todos = fields.List(fields.Nested(ToDoSchema(exclude=("task_list",))), required=True)
