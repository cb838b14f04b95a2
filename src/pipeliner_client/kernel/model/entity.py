"""Entity – schema-less CRM record with modification tracking."""

from __future__ import annotations

import json
import re
from collections.abc import Iterator, Mapping
from datetime import datetime
from typing import Any

from pipeliner_client.config.defaults import DATE_FORMAT
from pipeliner_client.kernel.time import format_datetime

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def field_name_from_camel_case(name: str) -> str:
    """Convert ``OwnerId`` (or ``ownerId``) into the API field name ``OWNER_ID``."""
    return _CAMEL_BOUNDARY.sub("_", name).upper()


class Entity:
    """A single record of some entity type (``Account``, ``Contact``, …).

    Fields are addressed by their API names (``OWNER_ID``), either through
    :meth:`set_field` / :meth:`get_field`, mapping-style item access, or the
    camel-case helpers :meth:`get_camel` / :meth:`set_camel`::

        entity.set_camel("OwnerId", 1)
        entity.set_field("OWNER_ID", 1)
        entity["OWNER_ID"] = 1

    Every write marks the field as modified so that a partial update only
    sends what changed since the entity was loaded or last saved.
    """

    def __init__(self, type: str, date_format: str = DATE_FORMAT) -> None:  # noqa: A002
        self._type = type
        self._date_format = date_format
        self._values: dict[str, Any] = {}
        self._modified: set[str] = set()

    @property
    def type(self) -> str:
        return self._type

    @property
    def id(self) -> Any:
        """The ``ID`` field, or ``None`` for an entity that was never saved."""
        return self._values.get("ID")

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def set_field(self, field_name: str, value: Any) -> "Entity":
        """Set a field and mark it as modified.

        ``datetime`` values are converted to UTC and formatted with the
        configured date format, so a later :meth:`get_field` returns the string.
        """
        if isinstance(value, datetime):
            value = format_datetime(value, self._date_format)
        self._values[field_name] = value
        self._modified.add(field_name)
        return self

    def set_fields(self, values: Mapping[str, Any]) -> "Entity":
        """Set several fields at once; fields absent from *values* are untouched."""
        for field_name, value in values.items():
            self.set_field(field_name, value)
        return self

    def unset_field(self, field_name: str) -> "Entity":
        """Remove a field so that saving leaves it unchanged on the server."""
        self._values.pop(field_name, None)
        self._modified.discard(field_name)
        return self

    def get_field(self, field_name: str) -> Any:
        return self._values[field_name]

    def get_fields(self) -> dict[str, Any]:
        return dict(self._values)

    def get_modified_fields(self) -> dict[str, Any]:
        return {k: v for k, v in self._values.items() if k in self._modified}

    def is_field_set(self, field_name: str) -> bool:
        return self._values.get(field_name) is not None

    def reset_modified(self) -> None:
        """Consider every field unmodified (called after a successful save)."""
        self._modified.clear()

    def get_camel(self, name: str) -> Any:
        """Camel-case getter: ``entity.get_camel("OwnerId")`` reads ``OWNER_ID``."""
        return self.get_field(field_name_from_camel_case(name))

    def set_camel(self, name: str, value: Any) -> "Entity":
        """Camel-case setter: ``entity.set_camel("OwnerId", 1)`` writes ``OWNER_ID``."""
        return self.set_field(field_name_from_camel_case(name), value)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def all_to_json(self) -> str:
        return json.dumps(self._values, separators=(",", ":"))

    def modified_to_json(self) -> str:
        return json.dumps(self.get_modified_fields(), separators=(",", ":"))

    # ------------------------------------------------------------------
    # Mapping-style access
    # ------------------------------------------------------------------

    def __getitem__(self, field_name: str) -> Any:
        return self.get_field(field_name)

    def __setitem__(self, field_name: str, value: Any) -> None:
        self.set_field(field_name, value)

    def __delitem__(self, field_name: str) -> None:
        self.unset_field(field_name)

    def __contains__(self, field_name: object) -> bool:
        return isinstance(field_name, str) and self.is_field_set(field_name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __copy__(self) -> "Entity":
        clone = Entity(self._type, self._date_format)
        clone._values = dict(self._values)
        clone._modified = set(self._modified)
        return clone

    def __repr__(self) -> str:
        return f"Entity(type={self._type!r}, fields={self._values!r})"


__all__ = ["Entity", "field_name_from_camel_case"]
