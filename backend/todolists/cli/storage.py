"""Flask CLI commands for document-store maintenance."""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext
from pymongo.errors import PyMongoError

from todolists.core.extensions import get_storage

LOGGER = logging.getLogger(__name__)


def _echo_indexes(summary: dict[str, list[str]]) -> None:
    """Pretty-print index names per collection."""
    click.echo("Indexes:")
    width = max(len(name) for name in summary)
    for collection, names in sorted(summary.items()):
        click.echo(f"  {collection.ljust(width)}  {', '.join(names) or '(none)'}")


@click.group("storage")
def storage_cli() -> None:
    """Document-store maintenance commands."""


@storage_cli.command("ensure-indexes")
@with_appcontext
def ensure_indexes_command() -> None:
    """Create the collection indexes (safe to run repeatedly)."""
    try:
        summary = get_storage().ensure_indexes()
    except PyMongoError as exc:
        raise click.ClickException(f"Index creation failed: {exc}") from exc
    LOGGER.info("storage.indexes_ensured")
    _echo_indexes(summary)


@storage_cli.command("ping")
@with_appcontext
def ping_command() -> None:
    """Check connectivity with the document store."""
    try:
        get_storage().ping()
    except PyMongoError as exc:
        raise click.ClickException(f"Storage unreachable: {exc}") from exc
    click.echo("ok")
