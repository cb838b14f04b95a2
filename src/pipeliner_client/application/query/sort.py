"""Query – Sort builder for the ``sort`` query parameter."""
from __future__ import annotations

from pipeliner_client.application.query._builder import builder_method
from pipeliner_client.kernel.errors import MethodNotFoundError

SEGMENT_SEPARATOR = "|"

_PREFIXES: dict[str, str] = {
    "asc": "",
    "ascending": "",
    "desc": "-",
    "descending": "-",
    "raw": "",
}


class Sort:
    """Chainable builder for the sort string.

    ``Sort.asc("NAME").desc("MODIFIED")`` produces ``"NAME|-MODIFIED"``.
    """

    def __init__(self, sort: "Sort | str" = "") -> None:
        self._sort_string = ""
        if isinstance(sort, Sort):
            self._sort_string = sort._sort_string
        elif sort:
            self.raw(sort)

    @builder_method
    def apply(self, method: str, field: str) -> "Sort":
        """Append *field* using one of ``asc``, ``desc`` or ``raw`` (or their aliases).

        Raises :class:`MethodNotFoundError` for anything else.
        """
        prefix = _PREFIXES.get(method)
        if prefix is None:
            raise MethodNotFoundError(method)
        if self._sort_string:
            self._sort_string += SEGMENT_SEPARATOR
        self._sort_string += prefix + field
        return self

    @builder_method
    def asc(self, field: str) -> "Sort":
        return self.apply("asc", field)

    @builder_method
    def ascending(self, field: str) -> "Sort":
        return self.apply("ascending", field)

    @builder_method
    def desc(self, field: str) -> "Sort":
        return self.apply("desc", field)

    @builder_method
    def descending(self, field: str) -> "Sort":
        return self.apply("descending", field)

    @builder_method
    def raw(self, sort_string: str) -> "Sort":
        return self.apply("raw", sort_string)

    def to_string(self) -> str:
        return self._sort_string

    def __str__(self) -> str:
        return self._sort_string

    def __repr__(self) -> str:
        return f"Sort({self._sort_string!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sort):
            return NotImplemented
        return self._sort_string == other._sort_string

    __hash__ = None  # type: ignore[assignment]


__all__ = ["Sort"]
