"""Application pagination – EntityCollectionIterator."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pipeliner_client.application.pagination.collection import EntityCollection
from pipeliner_client.observability.logging import get_logger

if TYPE_CHECKING:
    from pipeliner_client.kernel.ports import PageFetcher

_log = get_logger(__name__)


class EntityCollectionIterator:
    """Cursor over the whole result of a query, beyond the loaded page.

    Represents the range ``0 .. total_count - 1``, where ``total_count`` is
    the number of entities the query would return without a limit. Only one
    page of that range is held at a time; reading a position outside of it
    fetches the page starting at that position through *repository*, so
    iterating may issue additional HTTP requests.

    ``valid()`` trusts the ``total_count`` of the held page. If the result
    set changes on the server while iterating, the iterator may report stale
    validity until the next page is fetched.

    Besides the explicit cursor methods the object is a Python iterator,
    yielding entities from the current position to the end::

        it = repository.get_entire_range_iterator(repository.get(Criteria.limit(50)))
        for entity in it:
            ...
    """

    def __init__(self, repository: PageFetcher, collection: EntityCollection[Any]) -> None:
        self._repository = repository
        self._collection = collection
        self._criteria = collection.get_criteria_copy()
        self._position = self._criteria.get_effective_offset()

    @property
    def collection(self) -> EntityCollection[Any]:
        """The currently loaded page."""
        return self._collection

    def current(self) -> Any:
        """Return the entity at the current position, fetching its page if needed.

        Errors raised by the repository propagate unchanged. Callers should
        check :meth:`valid` first; past the end the result is undefined.
        """
        if not self.data_available():
            self._criteria.offset(self._position)
            _log.debug(
                "entity_page_fetch",
                position=self._position,
                limit=self._criteria.get_effective_limit(),
            )
            self._collection = self._repository.get(self._criteria)
        return self._collection[self._position - self._collection.start_index]

    def key(self) -> int:
        return self._position

    def next(self) -> None:
        """Advance the cursor by one position without loading anything."""
        self._position += 1

    def rewind(self) -> None:
        """Move to position 0, regardless of the offset the iterator started at."""
        self._position = 0

    def seek(self, position: int) -> None:
        """Move to *position*; validity is only checked by :meth:`valid`."""
        self._position = position

    def valid(self) -> bool:
        return 0 <= self._position < self._collection.total_count

    def data_available(self) -> bool:
        """True if the entity at the current position is loaded locally."""
        return self._collection.page_range.contains(self._position)

    def next_data_available(self) -> bool:
        """True if the entity at the next position is loaded locally.

        Useful in loops to tell whether the next step will issue a request.
        """
        return self._collection.page_range.contains(self._position + 1)

    def at_end(self) -> bool:
        """True if the current position is the last one within the range."""
        return self._position == self._collection.total_count - 1

    def __iter__(self) -> "EntityCollectionIterator":
        return self

    def __next__(self) -> Any:
        if not self.valid():
            raise StopIteration
        entity = self.current()
        self.next()
        return entity


__all__ = ["EntityCollectionIterator"]
