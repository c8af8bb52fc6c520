"""Document-store handle with an explicit open/close lifecycle.

The handle is constructed once at boot by :func:`todolists.factory.create_app`,
stored in ``app.extensions["storage"]`` and threaded into every request
context. Nothing in the codebase reaches for a module-level connection.
"""

from __future__ import annotations

import logging
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

from todolists.repositories import TaskListRepository, ToDoRepository, UserRepository

log = logging.getLogger(__name__)


class MongoStorage:
    """
    Own a MongoDB client and expose repositories bound to one database.

    Parameters
    ----------
    client:
        Any pymongo-compatible client (``mongomock.MongoClient`` in tests).
    db_name:
        Database holding the ``Users``, ``TaskList`` and ``ToDo`` collections.
    """

    def __init__(self, client: MongoClient, db_name: str) -> None:
        self.client = client
        self.db: Database = client[db_name]
        self.users = UserRepository(database=self.db)
        self.task_lists = TaskListRepository(database=self.db)
        self.todos = ToDoRepository(database=self.db)
        self._closed = False

    @classmethod
    def connect(cls, uri: str, db_name: str, **client_options: Any) -> MongoStorage:
        """Open a client for ``uri`` and return a ready storage handle."""
        client: MongoClient = MongoClient(uri, **client_options)
        storage = cls(client, db_name)
        log.info("storage.opened db=%s", db_name)
        return storage

    def ensure_indexes(self) -> dict[str, list[str]]:
        """Create every collection index; returns names per collection."""
        return {
            repo.collection_name: repo.ensure_indexes()
            for repo in (self.users, self.task_lists, self.todos)
        }

    def ping(self) -> bool:
        """Return ``True`` when the server answers a ``ping`` command."""
        self.client.admin.command("ping")
        return True

    def close(self) -> None:
        """Close the underlying client once; later calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        self.client.close()
        log.info("storage.closed")

    @property
    def closed(self) -> bool:
        return self._closed
