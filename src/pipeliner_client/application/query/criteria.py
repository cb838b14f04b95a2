"""Query – Criteria, the full parameter set of one entity query.

Serialises to the ``limit``/``offset``/``sort``/``filter``/``after``/``loadonly``
URL query understood by the REST API. Unset parameters are omitted entirely.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any
from urllib.parse import parse_qsl, urlencode

from pipeliner_client.application.query._builder import builder_method
from pipeliner_client.application.query.filter import Filter
from pipeliner_client.application.query.sort import Sort
from pipeliner_client.config.defaults import DATE_FORMAT, DEFAULT_LIMIT
from pipeliner_client.kernel.errors import InvalidCriteriaError, MethodNotFoundError
from pipeliner_client.kernel.time import format_datetime

# Serialisation order of the query parameters.
PARAMETERS: tuple[str, ...] = ("limit", "offset", "sort", "filter", "after", "loadonly")


def _to_int(name: str, value: int | str | None) -> int | None:
    """Coerce a limit or offset; a blank value (``limit=``) means unset."""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidCriteriaError(
            f"Criteria parameter '{name}' must be an integer, got {value!r}",
            detail={"parameter": name},
            cause=exc,
        ) from exc


class Criteria:
    """Query parameters for loading entities.

    Every parameter has a chainable setter which can also be called on the
    class to start new criteria::

        Criteria.limit(10).filter(Filter.gt("VALUE", 5)).sort(Sort.desc("MODIFIED"))

    ``limit`` accepts :data:`NO_LIMIT` to disable the server's default cap;
    this is different from leaving it unset, which means ``default_limit``.
    """

    NO_LIMIT = -1

    def __init__(
        self,
        criteria: Any = None,
        date_format: str = DATE_FORMAT,
        default_limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._date_format = date_format
        self._default_limit = default_limit
        self._limit: int | None = None
        self._offset: int | None = None
        self._sort: str | None = None
        self._filter: str | None = None
        self._after: str | None = None
        self._loadonly: str | None = None
        self.set(criteria)

    # ------------------------------------------------------------------
    # Chainable setters
    # ------------------------------------------------------------------

    @builder_method
    def limit(self, limit: int | str | None) -> "Criteria":
        """Limit how many entities to load; use :data:`NO_LIMIT` for no cap."""
        self._limit = _to_int("limit", limit)
        return self

    @builder_method
    def offset(self, offset: int | str | None) -> "Criteria":
        self._offset = _to_int("offset", offset)
        return self

    @builder_method
    def sort(self, sort: Sort | str | None) -> "Criteria":
        """Sort the result, by a raw sort string or a :class:`Sort`."""
        self._sort = None if sort is None else str(sort)
        return self

    @builder_method
    def filter(self, filter: Filter | str | None) -> "Criteria":  # noqa: A002
        """Only return entities matching a raw filter string or a :class:`Filter`."""
        self._filter = None if filter is None else str(filter)
        return self

    @builder_method
    def after(self, after: datetime | str | None) -> "Criteria":
        """Only load entities modified after *after* (string or ``datetime``)."""
        if isinstance(after, datetime):
            self._after = format_datetime(after, self._date_format)
        else:
            self._after = after
        return self

    @builder_method
    def loadonly(self, loadonly: Iterable[str] | str | None) -> "Criteria":
        """Only load the given fields, as a ``|``-separated string or an iterable."""
        if loadonly is None or isinstance(loadonly, str):
            self._loadonly = loadonly
        else:
            self._loadonly = "|".join(loadonly)
        return self

    @builder_method
    def apply(self, name: str, value: Any) -> "Criteria":
        """Set the parameter *name* to *value*.

        Raises :class:`MethodNotFoundError` for names outside :data:`PARAMETERS`.
        """
        if name not in PARAMETERS:
            raise MethodNotFoundError(name)
        return getattr(self, name)(value)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_limit(self) -> int | None:
        return self._limit

    def get_effective_limit(self) -> int:
        """The set limit, or the default limit when none is set."""
        return self._default_limit if self._limit is None else self._limit

    def get_offset(self) -> int | None:
        return self._offset

    def get_effective_offset(self) -> int:
        return 0 if self._offset is None else self._offset

    def get_sort(self) -> str | None:
        return self._sort

    def get_filter(self) -> str | None:
        return self._filter

    def get_after(self) -> str | None:
        return self._after

    def get_load_only(self) -> str | None:
        return self._loadonly

    # ------------------------------------------------------------------
    # Bulk assignment and serialisation
    # ------------------------------------------------------------------

    def set(self, criteria: Any) -> "Criteria":
        """Set several parameters at once from *criteria*, which may be:

        * another :class:`Criteria` – copies all six parameters, unsetting
          those which are unset in *criteria*;
        * a mapping – sets only the parameters present as keys. A ``None``
          value unsets that parameter; unknown keys are ignored;
        * a URL query string (no leading ``?``) – parsed and treated as a mapping;
        * a :class:`Filter` or :class:`Sort` – sets that single parameter;
        * ``None`` – no change.
        """
        if criteria is None:
            return self
        if isinstance(criteria, Criteria):
            self._limit = criteria._limit
            self._offset = criteria._offset
            self._sort = criteria._sort
            self._filter = criteria._filter
            self._after = criteria._after
            self._loadonly = criteria._loadonly
            return self
        if isinstance(criteria, Filter):
            return self.filter(criteria)
        if isinstance(criteria, Sort):
            return self.sort(criteria)
        if isinstance(criteria, str):
            criteria = dict(parse_qsl(criteria, keep_blank_values=True))
        if not isinstance(criteria, Mapping):
            raise InvalidCriteriaError(f"Invalid criteria type: {type(criteria).__name__}")

        for name in PARAMETERS:
            if name in criteria:
                getattr(self, name)(criteria[name])
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the set parameters in serialisation order."""
        values = {
            "limit": self._limit,
            "offset": self._offset,
            "sort": self._sort,
            "filter": self._filter,
            "after": self._after,
            "loadonly": self._loadonly,
        }
        return {name: values[name] for name in PARAMETERS if values[name] is not None}

    def to_url_query(self) -> str:
        """Return the URL-encoded query string (without a leading ``?``)."""
        return urlencode(self.to_dict())

    def copy(self) -> "Criteria":
        """Return an independent copy, including date format and default limit."""
        return Criteria(self, self._date_format, self._default_limit)

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> "Criteria":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Criteria):
            return NotImplemented
        return (
            self._limit == other._limit
            and self._offset == other._offset
            and self._sort == other._sort
            and self._filter == other._filter
            and self._after == other._after
            and self._loadonly == other._loadonly
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Criteria({self.to_dict()!r})"


__all__ = ["PARAMETERS", "Criteria"]
