"""Global pytest fixtures for the to-do lists API."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any, Callable

import mongomock
import pytest
from flask import Flask

from todolists import create_app
from todolists.core.config import TestingConfig
from todolists.core.storage import MongoStorage
from todolists.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from todolists.repositories.base import Document
from todolists.services._shared.base import ServiceContext
from todolists.services._shared.ports import StubTokenProvider

from tests.factories import StorageSession
from tests.factories.user import UserFactory
from tests.helpers.auth import issue_token


@pytest.fixture()
def storage() -> Generator[MongoStorage, None, None]:
    """Provide an in-memory document store with indexes in place."""

    handle = MongoStorage(mongomock.MongoClient(), "todolists_test")
    handle.ensure_indexes()
    try:
        yield handle
    finally:
        handle.close()


@pytest.fixture()
def app(storage: MongoStorage) -> Generator[Flask, None, None]:
    """Create a Flask application bound to the in-memory storage."""

    application = create_app(TestingConfig, storage=storage)
    application.logger.setLevel("WARNING")
    with application.app_context():
        yield application


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""

    return app.test_client()


@pytest.fixture(autouse=True)
def _factories_storage(storage: MongoStorage) -> Generator[None, None, None]:
    """Wire Factory Boy's storage helper to the per-test storage fixture."""

    StorageSession.set(storage)
    yield
    StorageSession.set(None)


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher()


@pytest.fixture()
def stub_tokens() -> StubTokenProvider:
    return StubTokenProvider()


@pytest.fixture()
def user() -> Document:
    """Persist and return a user whose password is ``password123``."""

    return UserFactory()


@pytest.fixture()
def other_user() -> Document:
    return UserFactory()


@pytest.fixture()
def anonymous_ctx(storage: MongoStorage) -> ServiceContext:
    """Request context of a caller without identity."""

    return ServiceContext(storage=storage)


@pytest.fixture()
def user_ctx(storage: MongoStorage, user: Document) -> ServiceContext:
    """Request context of ``user``."""

    return ServiceContext(storage=storage, user=user)


@pytest.fixture()
def auth_token(app: Flask, user: Document) -> str:
    """Generate a valid JWT for ``user``."""

    return issue_token(str(user["_id"]))


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
