"""REST adapter – RestRepository."""
from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from pipeliner_client.adapters.http.response import CreatedResponse, Response
from pipeliner_client.application.pagination import EntityCollection
from pipeliner_client.application.query import Criteria
from pipeliner_client.config.defaults import DATE_FORMAT, DEFAULT_LIMIT
from pipeliner_client.kernel.errors import MissingIdError, PipelinerHttpError, ValidationError
from pipeliner_client.kernel.model import Entity
from pipeliner_client.kernel.ports import HttpClient, Repository
from pipeliner_client.observability.logging import get_logger

_log = get_logger(__name__)


def _to_json(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"))


def _entity_id(entity: Entity | Mapping[str, Any]) -> Any:
    if isinstance(entity, Entity):
        return entity.id
    return entity.get("ID")


class RestRepository(Repository):
    """Retrieve and manipulate entities of one type through the REST API.

    Args:
        url_prefix: base URL of the team pipeline (no trailing slash).
        entity_type: singular entity name, e.g. ``Account``.
        entity_plural: collection name used in URLs, e.g. ``Accounts``.
        http_client: transport implementing the :class:`HttpClient` port.
        date_format: format for converting datetimes in entities and criteria.
        default_limit: page size requested when the criteria sets no limit.
            The server default (25) is not sent explicitly.
    """

    def __init__(
        self,
        url_prefix: str,
        entity_type: str,
        entity_plural: str,
        http_client: HttpClient,
        date_format: str = DATE_FORMAT,
        default_limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._url_prefix = url_prefix
        self._entity_type = entity_type
        self._entity_plural = entity_plural
        self._http = http_client
        self._date_format = date_format
        self._default_limit = default_limit
        self._log = _log.bind(entity_type=entity_type)

    @property
    def entity_type(self) -> str:
        return self._entity_type

    @property
    def entity_plural(self) -> str:
        return self._entity_plural

    def create(self) -> Entity:
        return Entity(self._entity_type, self._date_format)

    def get(self, criteria: Any = None) -> EntityCollection[Entity]:
        query_criteria = Criteria(criteria, self._date_format, self._default_limit)
        if query_criteria.get_limit() is None and self._default_limit != DEFAULT_LIMIT:
            query_criteria.limit(self._default_limit)
            query = query_criteria.to_url_query()
        elif isinstance(criteria, str):
            query = criteria
        else:
            query = query_criteria.to_url_query()

        url = self._collection_url()
        if query:
            url += "?" + query
        self._log.debug("entity_get", url=url)

        response = self._http.request("GET", url)
        entities = [self._decode_entity(item) for item in response.decode_json()]

        page_range = response.content_range()
        if page_range is None:
            raise PipelinerHttpError(response, "Content-Range header not found")

        return EntityCollection(
            entities,
            query_criteria,
            page_range.start_index,
            page_range.end_index,
            page_range.total_count,
        )

    def get_by_id(self, id: str) -> Entity:  # noqa: A002
        response = self._http.request("GET", f"{self._collection_url()}/{id}")
        return self._decode_entity(response.decode_json())

    def save(
        self,
        entity: Entity | Mapping[str, Any],
        send_fields: int = Repository.SEND_MODIFIED_FIELDS,
    ) -> Response:
        """Upload *entity*; PUT when it has an ID, otherwise POST to create it.

        A created entity's new ID is written back into :class:`Entity` objects.
        """
        if isinstance(entity, Entity):
            data = entity.modified_to_json() if send_fields == self.SEND_MODIFIED_FIELDS else entity.all_to_json()
        elif isinstance(entity, Mapping):
            data = _to_json(dict(entity))
        else:
            raise ValidationError(f"Invalid entity: {type(entity).__name__}")

        entity_id = _entity_id(entity)
        if entity_id:
            # The server treats PUT /{plural}/{id} as a partial update.
            method, url = "PUT", f"{self._collection_url()}/{entity_id}"
        else:
            method, url = "POST", self._collection_url()

        self._log.debug("entity_save", method=method, url=url)
        response = self._http.request(method, url, data)

        if response.status_code == 201:
            response = CreatedResponse.from_response(response)
            if isinstance(entity, Entity):
                entity.set_field("ID", response.created_id)

        if response.status_code in (200, 201) and isinstance(entity, Entity):
            entity.reset_modified()

        return response

    def delete(self, entity: Any, flags: int = Repository.FLAG_ROLLBACK_ON_ERROR) -> Response:
        """Delete a single entity (Entity or mapping) or a list of them.

        *flags* only apply to bulk deletion.
        """
        if not isinstance(entity, (Entity, Mapping)):
            return self.delete_by_id([_entity_id(item) for item in entity], flags)

        entity_id = _entity_id(entity)
        if entity_id is None:
            raise MissingIdError("Cannot delete an entity which has no ID")
        return self.delete_by_id(entity_id)

    def delete_by_id(self, id: Any, flags: int = Repository.FLAG_ROLLBACK_ON_ERROR) -> Response:  # noqa: A002
        if isinstance(id, (list, tuple)):
            url = self._batch_url("deleteEntities", flags)
            self._log.debug("entity_bulk_delete", url=url, count=len(id))
            return self._http.request("POST", url, _to_json(list(id)))

        url = f"{self._collection_url()}/{id}"
        self._log.debug("entity_delete", url=url)
        return self._http.request("DELETE", url)

    def bulk_update(
        self,
        data: Iterable[Entity | Mapping[str, Any]],
        flags: int = Repository.FLAG_ROLLBACK_ON_ERROR,
        send_fields: int = Repository.SEND_MODIFIED_FIELDS,
    ) -> Response:
        payload: list[dict[str, Any]] = []
        for entity in data:
            if isinstance(entity, Entity):
                values = (
                    entity.get_modified_fields()
                    if send_fields == self.SEND_MODIFIED_FIELDS
                    else entity.get_fields()
                )
                values["ID"] = entity.id
                payload.append(values)
            else:
                payload.append(dict(entity))

        url = self._batch_url("setEntities", flags)
        self._log.debug("entity_bulk_update", url=url, count=len(payload))
        return self._http.request("POST", url, _to_json(payload))

    def _collection_url(self) -> str:
        return f"{self._url_prefix}/{self._entity_plural}"

    def _batch_url(self, method: str, flags: int) -> str:
        url = f"{self._url_prefix}/{method}?entityName={self._entity_type}"
        if flags:
            url += f"&flag={flags}"
        return url

    def _decode_entity(self, values: Mapping[str, Any]) -> Entity:
        entity = Entity(self._entity_type, self._date_format)
        entity.set_fields(values)
        entity.reset_modified()
        return entity


__all__ = ["RestRepository"]
