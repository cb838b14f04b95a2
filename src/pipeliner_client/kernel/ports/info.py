"""Server info port – data and configuration exposed by the team pipeline."""

from __future__ import annotations

import abc
from typing import Any

from pipeliner_client.kernel.model import Entity


class InfoMethods(abc.ABC):
    """Port: miscellaneous read-only methods of the REST API."""

    @abc.abstractmethod
    def fetch_team_pipeline_url(self) -> str: ...

    @abc.abstractmethod
    def fetch_team_pipeline_version(self) -> int: ...

    @abc.abstractmethod
    def fetch_server_api_utc_datetime(self) -> str: ...

    @abc.abstractmethod
    def fetch_error_codes(self) -> Any:
        """Return the possible error codes along with their messages."""

    @abc.abstractmethod
    def fetch_collections(self) -> list[str]: ...

    @abc.abstractmethod
    def fetch_entity_public(self) -> list[str]: ...

    @abc.abstractmethod
    def fetch_entity_fields(self, entity: Entity | str) -> Any:
        """Return the fields of *entity* (an Entity or a type name such as ``Account``)."""


__all__ = ["InfoMethods"]
