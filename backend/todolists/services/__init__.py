"""Service layer public API.

This package exposes the essential building blocks for the service layer so that
callers can import from :mod:`todolists.services` without knowing internal
structure.

Re-exports
----------
- Base primitives (from ``todolists.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Errors (from ``todolists.services._shared.errors``)
    * :class:`ServiceError`, :class:`AuthenticationError`, :class:`ValidationError`

- Services
    * :class:`AuthService` (sign-up / sign-in)
    * :class:`IdentityResolver` (bearer credential → user)
    * :class:`TaskListService`
    * :class:`ToDoService`
"""

from __future__ import annotations

from ._shared.base import BaseService, ServiceContext
from ._shared.errors import AuthenticationError, ServiceError, ValidationError
from .auth.service import AuthService
from .identity.resolver import IdentityResolver
from .task_lists.service import TaskListService
from .todos.service import ToDoService

__all__ = [
    "BaseService",
    "ServiceContext",
    "ServiceError",
    "AuthenticationError",
    "ValidationError",
    "AuthService",
    "IdentityResolver",
    "TaskListService",
    "ToDoService",
]
