"""ToDo resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

_object_id = validate.Length(min=1, max=64)


class ToDoCreateSchema(Schema):
    """Variables of ``createToDo``."""

    content = fields.String(required=True, validate=validate.Length(min=1, max=1000))
    task_list_id = fields.String(required=True, data_key="taskListId", validate=_object_id)


class ToDoUpdateSchema(Schema):
    """Variables of ``updateToDo``; omitted fields stay unchanged."""

    id = fields.String(required=True, validate=_object_id)
    content = fields.String(load_default=None, validate=validate.Length(min=1, max=1000))
    is_completed = fields.Boolean(load_default=None, data_key="isCompleted")


class ToDoSchema(Schema):
    """Public representation of a todo.

    ``taskList`` holds the resolved parent list for top-level results and is
    ``null`` when the parent no longer exists.
    """

    id = fields.String(required=True)
    content = fields.String(required=True)
    is_completed = fields.Boolean(required=True, data_key="isCompleted")
    task_list_id = fields.String(required=True, data_key="taskListId")
    task_list = fields.Nested(
        lambda: _task_list_schema(), allow_none=True, data_key="taskList"
    )


def _task_list_schema():
    from .task_list import TaskListSchema

    return TaskListSchema()
