"""Input DTOs for ToDoService."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ToDoCreateIn:
    """
    :param content: Text content.
    :type content: str
    :param task_list_id: Owning list identifier.
    :type task_list_id: str
    """

    content: str
    task_list_id: str


@dataclass(frozen=True, slots=True)
class ToDoUpdateIn:
    """
    Partial update: ``None`` means "leave unchanged".

    :param id: Target todo identifier.
    :type id: str
    :param content: New content.
    :type content: str | None
    :param is_completed: New completion flag.
    :type is_completed: bool | None
    """

    id: str
    content: str | None = None
    is_completed: bool | None = None
