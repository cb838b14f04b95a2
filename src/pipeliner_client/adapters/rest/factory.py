"""REST adapter – RestRepositoryFactory."""
from __future__ import annotations

from pipeliner_client.adapters.rest.repository import RestRepository
from pipeliner_client.config.defaults import DATE_FORMAT, DEFAULT_LIMIT
from pipeliner_client.kernel.ports import HttpClient, RepositoryFactory


class RestRepositoryFactory(RepositoryFactory):
    """Build :class:`RestRepository` instances sharing one transport."""

    def __init__(
        self,
        base_url: str,
        http_client: HttpClient,
        date_format: str = DATE_FORMAT,
        default_limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._base_url = base_url
        self._http = http_client
        self._date_format = date_format
        self._default_limit = default_limit

    def create_repository(self, entity_singular: str, entity_plural: str) -> RestRepository:
        return RestRepository(
            self._base_url,
            entity_singular,
            entity_plural,
            self._http,
            self._date_format,
            self._default_limit,
        )


__all__ = ["RestRepositoryFactory"]
