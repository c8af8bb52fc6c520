"""Envelope of the single query/mutation endpoint."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

QUERIES = ("myTaskLists", "getTaskList")
MUTATIONS = (
    "signUp",
    "signIn",
    "createTaskList",
    "updateTaskList",
    "deleteTaskList",
    "addUserToTaskList",
    "createToDo",
    "updateToDo",
)
OPERATION_NAMES = QUERIES + MUTATIONS


class OperationRequestSchema(Schema):
    """``{"operation": <name>, "variables": {...}}``."""

    operation = fields.String(required=True, validate=validate.OneOf(OPERATION_NAMES))
    variables = fields.Dict(keys=fields.String(), load_default=dict)
