"""Input DTOs for TaskListService."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TaskListGetIn:
    id: str


@dataclass(frozen=True, slots=True)
class TaskListCreateIn:
    title: str


@dataclass(frozen=True, slots=True)
class TaskListUpdateIn:
    """
    :param id: Target list identifier.
    :type id: str
    :param title: New title.
    :type title: str
    """

    id: str
    title: str


@dataclass(frozen=True, slots=True)
class TaskListDeleteIn:
    id: str


@dataclass(frozen=True, slots=True)
class TaskListAddUserIn:
    """
    :param task_list_id: List receiving the member.
    :type task_list_id: str
    :param user_id: User to add to the member set.
    :type user_id: str
    """

    task_list_id: str
    user_id: str
