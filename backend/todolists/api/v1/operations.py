"""Single query/mutation endpoint dispatching named operations.

Request body: ``{"operation": "<name>", "variables": {...}}``.
Response body: ``{"data": <result>}``.

The endpoint is a thin transport: it validates variables, builds the service
for the operation and serializes the result. Authorization lives in the
services.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from flask import Blueprint, request
from marshmallow import Schema

from todolists.api.deps import (
    get_password_hasher,
    get_request_context,
    get_token_provider,
    json_response,
    load_request_context,
    timing,
)
from todolists.schemas import (
    OPERATION_NAMES,
    AuthUserSchema,
    OperationRequestSchema,
    SignInSchema,
    SignUpSchema,
    TaskListAddUserSchema,
    TaskListCreateSchema,
    TaskListIdSchema,
    TaskListSchema,
    TaskListUpdateSchema,
    ToDoCreateSchema,
    ToDoSchema,
    ToDoUpdateSchema,
)
from todolists.services import (
    AuthService,
    BaseService,
    ServiceContext,
    ServiceError,
    TaskListService,
    ToDoService,
)
from todolists.services.auth.dto import SignInIn, SignUpIn
from todolists.services.task_lists.dto import (
    TaskListAddUserIn,
    TaskListCreateIn,
    TaskListDeleteIn,
    TaskListGetIn,
    TaskListUpdateIn,
)
from todolists.services.todos.dto import ToDoCreateIn, ToDoUpdateIn

logger = logging.getLogger(__name__)

bp = Blueprint("operations", __name__)
bp.before_request(load_request_context)

request_schema = OperationRequestSchema()

Handler = Callable[[ServiceContext, dict[str, Any]], Any]


@dataclass(frozen=True, slots=True)
class Operation:
    """
    One entry of the operation table.

    :param name: Public operation name.
    :param handler: ``(ctx, variables) -> result`` callable.
    :param variables: Schema validating the operation variables.
    :param result: Schema dumping the result; ``None`` for scalars.
    :param many: Whether the result is a list.
    """

    name: str
    handler: Handler
    variables: Schema
    result: Schema | None = None
    many: bool = False

    def dump(self, value: Any) -> Any:
        if value is None or self.result is None:
            return value
        return self.result.dump(value, many=self.many)


def _auth(ctx: ServiceContext) -> AuthService:
    return AuthService(
        ctx=ctx,
        token_provider=get_token_provider(),
        password_hasher=get_password_hasher(),
    )


_user = AuthUserSchema()
_task_list = TaskListSchema()
_todo = ToDoSchema()

OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation(
            "signUp",
            lambda ctx, v: _auth(ctx).sign_up(SignUpIn(**v)),
            SignUpSchema(),
            _user,
        ),
        Operation(
            "signIn",
            lambda ctx, v: _auth(ctx).sign_in(SignInIn(**v)),
            SignInSchema(),
            _user,
        ),
        Operation(
            "myTaskLists",
            lambda ctx, v: TaskListService(ctx=ctx).my_task_lists(),
            Schema(),
            _task_list,
            many=True,
        ),
        Operation(
            "getTaskList",
            lambda ctx, v: TaskListService(ctx=ctx).get(TaskListGetIn(**v)),
            TaskListIdSchema(),
            _task_list,
        ),
        Operation(
            "createTaskList",
            lambda ctx, v: TaskListService(ctx=ctx).create(TaskListCreateIn(**v)),
            TaskListCreateSchema(),
            _task_list,
        ),
        Operation(
            "updateTaskList",
            lambda ctx, v: TaskListService(ctx=ctx).update(TaskListUpdateIn(**v)),
            TaskListUpdateSchema(),
            _task_list,
        ),
        Operation(
            "deleteTaskList",
            lambda ctx, v: TaskListService(ctx=ctx).delete(TaskListDeleteIn(**v)),
            TaskListIdSchema(),
        ),
        Operation(
            "addUserToTaskList",
            lambda ctx, v: TaskListService(ctx=ctx).add_user(TaskListAddUserIn(**v)),
            TaskListAddUserSchema(),
            _task_list,
        ),
        Operation(
            "createToDo",
            lambda ctx, v: ToDoService(ctx=ctx).create(ToDoCreateIn(**v)),
            ToDoCreateSchema(),
            _todo,
        ),
        Operation(
            "updateToDo",
            lambda ctx, v: ToDoService(ctx=ctx).update(ToDoUpdateIn(**v)),
            ToDoUpdateSchema(),
            _todo,
        ),
    )
}

if set(OPERATIONS) != set(OPERATION_NAMES):  # pragma: no cover - import-time guard
    raise RuntimeError("Operation table out of sync with OperationRequestSchema")


@bp.post("/operations")
@timing
def execute():
    """Run one named query or mutation for the resolved caller."""

    envelope = request_schema.load(request.get_json(silent=True) or {})
    operation = OPERATIONS[envelope["operation"]]
    variables = operation.variables.load(envelope["variables"])
    ctx = get_request_context()

    try:
        result = operation.handler(ctx, variables)
    except ServiceError as exc:
        raise BaseService.translate_exceptions(exc) from exc

    logger.debug(
        "operation.completed",
        extra={"operation": operation.name, "user_id": ctx.user_id},
    )
    return json_response({"data": operation.dump(result)})
