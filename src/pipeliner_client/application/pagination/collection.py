"""Application pagination – EntityCollection."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, NoReturn, TypeVar, overload

from pipeliner_client.application.pagination.page_range import PageRange
from pipeliner_client.application.query import Criteria
from pipeliner_client.kernel.errors import ImmutabilityError, RangeMismatchError

T = TypeVar("T")


class EntityCollection(Sequence[T], Generic[T]):
    """Immutable page of entities of one type.

    The collection cannot be added to, removed from or reordered; the entities
    inside remain mutable. Besides the entities it carries the criteria used
    to fetch them and the :class:`PageRange` they occupy within the full
    result, which tells how many entities were not loaded because of the
    query's limit.

    Args:
        items: the loaded entities.
        criteria: criteria used for the query, anything :class:`Criteria`
            accepts. A private copy is kept, so later changes to a passed
            ``Criteria`` object do not leak in.
        start_index: the offset used in the query.
        end_index: index of the last loaded entity, ``-1`` for an empty page.
        total_count: number of entities matching the query on the server.

    Raises:
        RangeMismatchError: the index range doesn't match ``len(items)``.
    """

    def __init__(
        self,
        items: Iterable[T],
        criteria: Any,
        start_index: int,
        end_index: int,
        total_count: int,
    ) -> None:
        items = tuple(items)
        page_range = PageRange(start_index, end_index, total_count)
        if not page_range.matches(len(items)):
            raise RangeMismatchError(start_index, end_index, len(items))

        self._items: tuple[T, ...] = items
        self._criteria = Criteria(criteria)
        self._range = page_range

    # ------------------------------------------------------------------
    # Range information
    # ------------------------------------------------------------------

    @property
    def page_range(self) -> PageRange:
        return self._range

    @property
    def start_index(self) -> int:
        """Index of the first entity; identical to the offset of the query."""
        return self._range.start_index

    @property
    def end_index(self) -> int:
        return self._range.end_index

    @property
    def total_count(self) -> int:
        """Number of entities available on the server, ignoring the limit."""
        return self._range.total_count

    def get_criteria_copy(self) -> Criteria:
        """Return a fresh copy of the criteria that was used to fetch this page."""
        return self._criteria.copy()

    def get_array_copy(self) -> list[T]:
        return list(self._items)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return (
            f"EntityCollection(items={len(self._items)}, start_index={self.start_index}, "
            f"end_index={self.end_index}, total_count={self.total_count})"
        )

    # ------------------------------------------------------------------
    # Mutation is not supported
    # ------------------------------------------------------------------

    def _immutable(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise ImmutabilityError()

    __setitem__ = _immutable
    __delitem__ = _immutable
    __iadd__ = _immutable
    append = _immutable
    extend = _immutable
    insert = _immutable
    remove = _immutable
    pop = _immutable
    clear = _immutable
    sort = _immutable
    reverse = _immutable
    exchange_array = _immutable


__all__ = ["EntityCollection"]
