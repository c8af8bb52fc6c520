"""Flask extension instances and initialization helpers."""

from __future__ import annotations

import atexit

from flask import Flask, current_app
from flask_jwt_extended import JWTManager

from todolists.core.storage import MongoStorage

jwt = JWTManager()


def init_app(app: Flask, storage: MongoStorage | None = None) -> None:
    """Initialize JWT support and open the document store.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances.
    storage: MongoStorage | None
        Pre-built storage handle. When ``None`` a client is opened from
        ``MONGO_URI`` / ``MONGO_DB_NAME`` and closed at interpreter exit.
    """
    jwt.init_app(app)

    if storage is None:
        storage = MongoStorage.connect(
            app.config["MONGO_URI"],
            app.config["MONGO_DB_NAME"],
            tz_aware=True,
        )
        atexit.register(storage.close)

    storage.ensure_indexes()
    app.extensions["storage"] = storage


def get_storage() -> MongoStorage:
    """Return the storage handle of the current application."""
    storage = current_app.extensions.get("storage")
    if storage is None:
        raise RuntimeError("Storage is not initialized. Call init_app() first.")
    return storage
