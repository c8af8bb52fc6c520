"""Factory Boy setup for test data generation.

Factories build plain documents and persist them through the repository of
the storage registered by the ``_factories_storage`` fixture.
"""

from __future__ import annotations

import factory
from faker import Faker

faker = Faker()
Faker.seed(1234)


class StorageSession:
    """Store the storage handle provided by the pytest fixture layer."""

    _storage = None

    @classmethod
    def set(cls, storage):
        """Register the storage used to persist factory documents."""
        cls._storage = storage

    @classmethod
    def get(cls):
        """Return the registered storage.

        Raises
        ------
        RuntimeError
            If factories are used without the ``storage`` fixture wiring.
        """
        if cls._storage is None:
            raise RuntimeError("Factories storage not set. Did you use the 'storage' fixture?")
        return cls._storage


class DocumentFactory(factory.Factory):
    """Base factory inserting ``dict`` documents via a repository."""

    class Meta:
        abstract = True
        model = dict

    @classmethod
    def _repository(cls, storage):
        raise NotImplementedError

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        document = model_class(*args, **kwargs)
        return cls._repository(StorageSession.get()).add(document)
