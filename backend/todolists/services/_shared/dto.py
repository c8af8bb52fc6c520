# comments in English; reST docstrings strict
"""
Public entity DTOs shared by every service.

Stored documents never leave the service layer; converters in
:mod:`todolists.services._shared.converters` build these instead.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UserOut:
    """
    Public-safe user data (no password hash).

    :param id: User identifier (ObjectId hex string).
    :type id: str
    :param name: Display name.
    :type name: str
    :param email: Login email.
    :type email: str
    :param avatar: Optional avatar URL.
    :type avatar: str | None
    """

    id: str
    name: str
    email: str
    avatar: str | None = None


@dataclass(frozen=True, slots=True)
class ToDoOut:
    """
    A single actionable item.

    :param id: ToDo identifier.
    :type id: str
    :param content: Text content.
    :type content: str
    :param is_completed: Completion flag.
    :type is_completed: bool
    :param task_list_id: Owning list identifier.
    :type task_list_id: str
    :param task_list: Resolved parent list, only for top-level results.
    :type task_list: TaskListOut | None
    """

    id: str
    content: str
    is_completed: bool
    task_list_id: str
    task_list: TaskListOut | None = None


@dataclass(frozen=True, slots=True)
class TaskListOut:
    """
    A named collection of todos with its resolved members.

    :param id: TaskList identifier.
    :type id: str
    :param created_at: Creation timestamp (ISO-8601, UTC).
    :type created_at: str
    :param title: List title.
    :type title: str
    :param progress: Completion progress; always ``0.0`` for now.
    :type progress: float
    :param users: Members in the order they were added.
    :type users: tuple[UserOut, ...]
    :param todos: Todos owned by the list.
    :type todos: tuple[ToDoOut, ...]
    """

    id: str
    created_at: str
    title: str
    progress: float
    users: tuple[UserOut, ...] = ()
    todos: tuple[ToDoOut, ...] = ()


@dataclass(frozen=True, slots=True)
class AuthUserOut:
    """
    Result of sign-up and sign-in.

    :param user: Authenticated user.
    :type user: UserOut
    :param token: Bearer token bound to ``user``.
    :type token: str
    """

    user: UserOut
    token: str
