"""Repository ports – loading and storing entities of one type."""

from __future__ import annotations

import abc
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Protocol

from pipeliner_client.kernel.model import Entity

if TYPE_CHECKING:
    from pipeliner_client.adapters.http.response import Response
    from pipeliner_client.application.pagination import EntityCollection, EntityCollectionIterator
    from pipeliner_client.application.query import Criteria


class PageFetcher(Protocol):
    """Anything that turns criteria into a freshly loaded page of entities."""

    def get(self, criteria: Any = None) -> "EntityCollection[Entity]": ...


class Repository(abc.ABC):
    """Port: retrieve and manipulate entities of a single type.

    Concrete implementations live in ``adapters/rest``.
    """

    # Flags for batch operations.
    FLAG_ROLLBACK_ON_ERROR = 0
    """Any error rolls back the whole batch."""
    FLAG_IGNORE_ON_ERROR = 1
    """Entities causing errors are skipped."""
    FLAG_INSERT_ON_UPDATE = 2
    """An entity that fails to update is inserted with a new ID instead."""
    FLAG_GET_NO_DELETED_ID = 4
    """Return the IDs which could not be deleted."""
    FLAG_IGNORE_AND_RETURN_ERRORS = 8
    FLAG_VALIDATE_ONLY_UPDATED_FIELDS = 256

    # Which fields of an Entity to send when saving.
    SEND_MODIFIED_FIELDS = 0
    SEND_ALL_FIELDS = 1

    @abc.abstractmethod
    def create(self) -> Entity:
        """Return a new, unsaved entity of this repository's type."""

    @abc.abstractmethod
    def get(self, criteria: "Criteria | Any" = None) -> "EntityCollection[Entity]":
        """Return the entities matching *criteria* (Criteria, Filter, Sort, mapping or query string)."""

    @abc.abstractmethod
    def get_by_id(self, id: str) -> Entity: ...  # noqa: A002

    @abc.abstractmethod
    def save(self, entity: Entity | Mapping[str, Any], send_fields: int = SEND_MODIFIED_FIELDS) -> "Response": ...

    @abc.abstractmethod
    def delete(self, entity: Any, flags: int = FLAG_ROLLBACK_ON_ERROR) -> "Response": ...

    @abc.abstractmethod
    def delete_by_id(self, id: Any, flags: int = FLAG_ROLLBACK_ON_ERROR) -> "Response": ...  # noqa: A002

    @abc.abstractmethod
    def bulk_update(
        self,
        data: Iterable[Entity | Mapping[str, Any]],
        flags: int = FLAG_ROLLBACK_ON_ERROR,
        send_fields: int = SEND_MODIFIED_FIELDS,
    ) -> "Response": ...

    def get_entire_range_iterator(self, collection: "EntityCollection[Entity]") -> "EntityCollectionIterator":
        """Return an iterator over the whole result, starting at the query's offset."""
        from pipeliner_client.application.pagination import EntityCollectionIterator

        return EntityCollectionIterator(self, collection)


class RepositoryFactory(abc.ABC):
    """Port: build a repository for an entity type."""

    @abc.abstractmethod
    def create_repository(self, entity_singular: str, entity_plural: str) -> Repository: ...


__all__ = ["PageFetcher", "Repository", "RepositoryFactory"]
