"""Generic repository base for pymongo collections.

This module centralizes persistence-only concerns shared by all repositories:
- Identifier coercion between the public string form and ``ObjectId``.
- Thin create/find/update/delete helpers over a single collection.
- Safe update helpers with per-repository updatable-field whitelists.
- No business logic and no authorization: services own both.

Design decisions
----------------
* Repositories return stored documents (plain ``dict`` with ``_id``); mapping
  to public shapes happens once, in the service converters.
* A string that is not a valid ``ObjectId`` never matches a document, so
  lookups with such ids behave exactly like lookups of missing ids.
* Updates MUST NOT allow mass-assignment: each repo exposes an explicit
  ``_updatable_fields`` whitelist.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

Document = dict[str, Any]


def to_object_id(value: Any) -> ObjectId | None:
    """Coerce a public identifier into an ``ObjectId``.

    :param value: ``ObjectId`` or its 24-hex string form.
    :returns: The ``ObjectId`` or ``None`` when ``value`` cannot be one.
    """
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


class BaseRepository:
    """Persistence helpers bound to one collection of the document store.

    :param database: pymongo database owning the collection.
    :type database: pymongo.database.Database
    """

    collection_name: ClassVar[str]
    _updatable_fields: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, *, database: Database) -> None:
        self.collection: Collection = database[self.collection_name]

    # ------------------------------ Reads ---------------------------------

    def get(self, doc_id: Any) -> Document | None:
        """Return the document with ``doc_id`` or ``None``."""
        oid = to_object_id(doc_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def find(self, query: Mapping[str, Any]) -> list[Document]:
        """Return every matching document in insertion order."""
        return list(self.collection.find(dict(query)).sort("_id", ASCENDING))

    # ------------------------------ Writes --------------------------------

    def add(self, document: Mapping[str, Any]) -> Document:
        """Insert ``document`` and return it with its generated ``_id``."""
        stored = dict(document)
        result = self.collection.insert_one(stored)
        stored["_id"] = result.inserted_id
        return stored

    def update_fields(self, doc_id: Any, fields: Mapping[str, Any]) -> Document | None:
        """Apply a whitelisted partial ``$set`` and return the updated document.

        :param doc_id: Target identifier.
        :param fields: Candidate changes; keys outside ``_updatable_fields`` are
            ignored.
        :returns: Updated document, or ``None`` when it does not exist.
        """
        oid = to_object_id(doc_id)
        if oid is None:
            return None
        changes = {k: v for k, v in fields.items() if k in self._updatable_fields}
        if not changes:
            return self.get(oid)
        return self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )

    def delete(self, doc_id: Any) -> bool:
        """Delete the document; ``True`` when one was removed."""
        oid = to_object_id(doc_id)
        if oid is None:
            return False
        return self.collection.delete_one({"_id": oid}).deleted_count == 1

    # ------------------------------ Indexes -------------------------------

    def index_specs(self) -> Iterable[tuple[str, dict[str, Any]]]:
        """Yield ``(field, options)`` pairs of indexes this collection needs."""
        return ()

    def ensure_indexes(self) -> list[str]:
        """Create the declared indexes (idempotent) and return their names."""
        return [
            self.collection.create_index([(field, ASCENDING)], **options)
            for field, options in self.index_specs()
        ]
