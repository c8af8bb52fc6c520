"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask

from todolists.core.config import BaseConfig, ensure_required, get_config
from todolists.core.logger import configure_logging, init_app as init_logging
from todolists.core.storage import MongoStorage
from todolists.infra.jwt.flask_jwt_token_provider import JWTTokenProvider
from todolists.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    storage: MongoStorage | None = None,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    :param config: Config object or import path; defaults to ``APP_ENV`` choice.
    :param storage: Pre-opened storage handle. When omitted, one is opened from
        ``MONGO_URI`` / ``MONGO_DB_NAME``.
    :raises RuntimeError: When a required setting is missing.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    ensure_required(app.config)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from todolists.core import extensions

    extensions.init_app(app, storage=storage)

    app.extensions["token_provider"] = JWTTokenProvider(ttl=app.config["JWT_ACCESS_TOKEN_EXPIRES"])
    app.extensions["password_hasher"] = WerkzeugPasswordHasher()

    init_logging(app)

    from todolists.api import init_app as init_api

    init_api(app)

    from todolists.core import errors

    errors.init_app(app)

    from todolists import cli as app_cli

    app_cli.init_app(app)

    return app
