"""REST adapter – RestInfoMethods."""
from __future__ import annotations

from typing import Any

from pipeliner_client.kernel.model import Entity
from pipeliner_client.kernel.ports import HttpClient, InfoMethods


class RestInfoMethods(InfoMethods):
    """Read server information through the miscellaneous REST methods."""

    def __init__(self, base_url: str, http_client: HttpClient) -> None:
        self._base_url = base_url
        self._http = http_client

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> HttpClient:
        return self._http

    def fetch_team_pipeline_url(self) -> str:
        return self._fetch("/teamPipelineUrl")

    def fetch_team_pipeline_version(self) -> int:
        return int(self._fetch("/teamPipelineVersion"))

    def fetch_server_api_utc_datetime(self) -> str:
        return self._fetch("/serverAPIUtcDateTime")

    def fetch_error_codes(self) -> Any:
        return self._fetch("/errorCodes")

    def fetch_collections(self) -> list[str]:
        # The collection list lives at the base URL itself, without a trailing slash.
        return self._fetch("")

    def fetch_entity_public(self) -> list[str]:
        return self._fetch("/entityPublic")

    def fetch_entity_fields(self, entity: Entity | str) -> Any:
        entity_name = entity.type if isinstance(entity, Entity) else entity
        return self._fetch(f"/getFields/{entity_name}")

    def _fetch(self, path: str) -> Any:
        return self._http.request("GET", self._base_url + path).decode_json()


__all__ = ["RestInfoMethods"]
