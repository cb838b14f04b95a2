"""Query – Filter builder for the ``filter`` query parameter.

A filter string is a ``|``-separated list of ``FIELD::value[::op]`` segments,
evaluated by the server left to right. ``eq`` is the implicit operator and is
never written out.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any

from pipeliner_client.application.query._builder import builder_method
from pipeliner_client.config.defaults import DATE_FORMAT
from pipeliner_client.kernel.errors import InvalidFilterValueError, InvalidOperatorError
from pipeliner_client.kernel.time import format_datetime

SEGMENT_SEPARATOR = "|"
VALUE_SEPARATOR = "::"

OPERATORS: dict[str, str] = {
    "eq": "eq",
    "equals": "eq",
    "ne": "ne",
    "does_not_equal": "ne",
    "gt": "gt",
    "greater_than": "gt",
    "lt": "lt",
    "less_than": "lt",
    "ge": "ge",
    "gte": "ge",
    "greater_or_equal": "ge",
    "le": "le",
    "lte": "le",
    "less_or_equal": "le",
    "ll": "ll",
    "starts_with": "ll",
    "rl": "rl",
    "ends_with": "rl",
    "fl": "fl",
    "contains": "fl",
}
"""Operator name (including aliases) -> opcode written into the filter string."""

TEXT_ONLY_OPCODES = frozenset({"ll", "rl", "fl"})


class Filter:
    """Chainable builder for the filter string used in queries.

    Every operator method can also be called on the class, which starts a new
    filter::

        Filter.equals("NAME", "Joe").greater_than("HEIGHT", 0)
        # -> "NAME::Joe|HEIGHT::0::gt"

    ``datetime`` values are converted to UTC and formatted with *date_format*,
    except for the text operators ``ll``, ``rl`` and ``fl``.
    Booleans are written as ``1`` and ``0``.
    """

    def __init__(self, filter: "Filter | str" = "", date_format: str = DATE_FORMAT) -> None:  # noqa: A002
        if isinstance(filter, Filter):
            self._filter_string = filter._filter_string
            self._date_format = filter._date_format
        else:
            self._filter_string = filter
            self._date_format = date_format

    @builder_method
    def apply(self, operator: str, field: str, value: Any) -> "Filter":
        """Append a ``field::value[::op]`` segment for the named *operator*.

        Raises :class:`InvalidOperatorError` for names outside :data:`OPERATORS`.
        """
        opcode = OPERATORS.get(operator)
        if opcode is None:
            raise InvalidOperatorError(operator)

        if isinstance(value, datetime):
            if opcode in TEXT_ONLY_OPCODES:
                raise InvalidFilterValueError(operator, value)
            value = format_datetime(value, self._date_format)
        elif isinstance(value, bool):
            value = int(value)

        segment = f"{field}{VALUE_SEPARATOR}{value}"
        if opcode != "eq":
            segment += f"{VALUE_SEPARATOR}{opcode}"
        return self._append(segment)

    @builder_method
    def raw(self, filter_string: str) -> "Filter":
        """Append a pre-built segment verbatim."""
        return self._append(filter_string)

    @builder_method
    def eq(self, field: str, value: Any) -> "Filter":
        """Field **equals** value."""
        return self.apply("eq", field, value)

    @builder_method
    def equals(self, field: str, value: Any) -> "Filter":
        return self.apply("equals", field, value)

    @builder_method
    def ne(self, field: str, value: Any) -> "Filter":
        """Field **does not equal** value."""
        return self.apply("ne", field, value)

    @builder_method
    def does_not_equal(self, field: str, value: Any) -> "Filter":
        return self.apply("does_not_equal", field, value)

    @builder_method
    def gt(self, field: str, value: Any) -> "Filter":
        """Field is **greater than** value."""
        return self.apply("gt", field, value)

    @builder_method
    def greater_than(self, field: str, value: Any) -> "Filter":
        return self.apply("greater_than", field, value)

    @builder_method
    def lt(self, field: str, value: Any) -> "Filter":
        """Field is **less than** value."""
        return self.apply("lt", field, value)

    @builder_method
    def less_than(self, field: str, value: Any) -> "Filter":
        return self.apply("less_than", field, value)

    @builder_method
    def ge(self, field: str, value: Any) -> "Filter":
        """Field is **greater or equal** to value."""
        return self.apply("ge", field, value)

    @builder_method
    def gte(self, field: str, value: Any) -> "Filter":
        return self.apply("gte", field, value)

    @builder_method
    def greater_or_equal(self, field: str, value: Any) -> "Filter":
        return self.apply("greater_or_equal", field, value)

    @builder_method
    def le(self, field: str, value: Any) -> "Filter":
        """Field is **less or equal** to value."""
        return self.apply("le", field, value)

    @builder_method
    def lte(self, field: str, value: Any) -> "Filter":
        return self.apply("lte", field, value)

    @builder_method
    def less_or_equal(self, field: str, value: Any) -> "Filter":
        return self.apply("less_or_equal", field, value)

    @builder_method
    def ll(self, field: str, value: str) -> "Filter":
        """Field **starts with** value."""
        return self.apply("ll", field, value)

    @builder_method
    def starts_with(self, field: str, value: str) -> "Filter":
        return self.apply("starts_with", field, value)

    @builder_method
    def rl(self, field: str, value: str) -> "Filter":
        """Field **ends with** value."""
        return self.apply("rl", field, value)

    @builder_method
    def ends_with(self, field: str, value: str) -> "Filter":
        return self.apply("ends_with", field, value)

    @builder_method
    def fl(self, field: str, value: str) -> "Filter":
        """Field **contains** value."""
        return self.apply("fl", field, value)

    @builder_method
    def contains(self, field: str, value: str) -> "Filter":
        return self.apply("contains", field, value)

    def to_string(self) -> str:
        """Return the filter string usable in a query."""
        return self._filter_string

    def _append(self, segment: str) -> "Filter":
        if self._filter_string:
            self._filter_string += SEGMENT_SEPARATOR
        self._filter_string += segment
        return self

    def __str__(self) -> str:
        return self._filter_string

    def __repr__(self) -> str:
        return f"Filter({self._filter_string!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self._filter_string == other._filter_string

    __hash__ = None  # type: ignore[assignment]


__all__ = ["OPERATORS", "Filter"]
