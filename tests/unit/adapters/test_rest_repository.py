"""Unit tests – REST repository, factory and info methods."""
from __future__ import annotations

import pytest

from pipeliner_client.adapters.http import CreatedResponse
from pipeliner_client.adapters.rest import RestInfoMethods, RestRepository, RestRepositoryFactory
from pipeliner_client.application.query import Criteria, Filter, Sort
from pipeliner_client.kernel.errors import (
    MissingIdError,
    PipelinerHttpError,
    RangeMismatchError,
    ValidationError,
)
from pipeliner_client.kernel.model import Entity
from pipeliner_client.kernel.ports import Repository
from pipeliner_client.testing.fakes import FakeHttpClient


@pytest.fixture()
def http() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture()
def repository(http: FakeHttpClient) -> RestRepository:
    return RestRepository("", "Account", "Accounts", http)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestRestRepositoryGet:
    def test_create(self, repository: RestRepository) -> None:
        entity = repository.create()
        assert isinstance(entity, Entity)
        assert entity.type == "Account"
        assert entity.get_fields() == {}

    def test_get_without_criteria(self, repository: RestRepository, http: FakeHttpClient) -> None:
        collection = repository.get()
        assert http.last_request.method == "GET"
        assert http.last_request.url == "/Accounts"
        assert [entity.id for entity in collection] == ["MOCK-1", "MOCK-2"]
        assert (collection.start_index, collection.end_index, collection.total_count) == (0, 1, 5)

    def test_loaded_entities_are_unmodified(self, repository: RestRepository) -> None:
        entity = repository.get()[0]
        assert entity.type == "Account"
        assert entity.get_modified_fields() == {}

    def test_get_with_criteria(self, repository: RestRepository, http: FakeHttpClient) -> None:
        repository.get(Criteria.limit(2).sort(Sort.desc("MODIFIED")))
        assert http.last_request.url == "/Accounts?limit=2&sort=-MODIFIED"

    def test_get_with_filter(self, repository: RestRepository, http: FakeHttpClient) -> None:
        repository.get(Filter.eq("NAME", "Jo"))
        assert http.last_request.url == "/Accounts?filter=NAME%3A%3AJo"

    def test_get_with_mapping(self, repository: RestRepository, http: FakeHttpClient) -> None:
        repository.get({"offset": 10})
        assert http.last_request.url == "/Accounts?offset=10"

    def test_get_with_query_string(self, repository: RestRepository, http: FakeHttpClient) -> None:
        collection = repository.get("limit=5")
        assert http.last_request.url == "/Accounts?limit=5"
        assert collection.get_criteria_copy().get_limit() == 5

    def test_collection_keeps_criteria(self, repository: RestRepository) -> None:
        collection = repository.get(Criteria.limit(2))
        assert collection.get_criteria_copy() == Criteria.limit(2)

    def test_empty_result(self, repository: RestRepository, http: FakeHttpClient) -> None:
        http.enqueue("[]", {"Content-Range": "items 0--1/0"})
        collection = repository.get()
        assert len(collection) == 0
        assert collection.end_index == -1
        assert collection.total_count == 0

    def test_missing_content_range_raises(self, repository: RestRepository, http: FakeHttpClient) -> None:
        http.enqueue("[]", {})
        with pytest.raises(PipelinerHttpError, match="Content-Range"):
            repository.get()

    def test_range_mismatch_raises(self, repository: RestRepository, http: FakeHttpClient) -> None:
        http.enqueue('[{"ID":"1"}]', {"Content-Range": "items 0-1/5"})
        with pytest.raises(RangeMismatchError):
            repository.get()

    def test_get_by_id(self, repository: RestRepository, http: FakeHttpClient) -> None:
        http.enqueue('{"ID":"7","NAME":"Acme"}')
        entity = repository.get_by_id("7")
        assert http.last_request.url == "/Accounts/7"
        assert entity.id == "7"
        assert entity["NAME"] == "Acme"
        assert entity.get_modified_fields() == {}

    def test_http_errors_propagate(self, repository: RestRepository, http: FakeHttpClient) -> None:
        http.enqueue('{"errorcode":-1,"message":"boom"}', {}, 500)
        with pytest.raises(PipelinerHttpError) as exc_info:
            repository.get()
        assert exc_info.value.error_message == "boom"


class TestRestRepositoryDefaultLimit:
    def test_server_default_is_not_sent(self, repository: RestRepository, http: FakeHttpClient) -> None:
        repository.get()
        assert http.last_request.url == "/Accounts"

    def test_configured_default_is_sent(self, http: FakeHttpClient) -> None:
        repository = RestRepository("", "Account", "Accounts", http, default_limit=100)
        repository.get(Filter.eq("NAME", "Jo"))
        assert http.last_request.url == "/Accounts?limit=100&filter=NAME%3A%3AJo"

    def test_configured_default_applies_to_query_strings(self, http: FakeHttpClient) -> None:
        repository = RestRepository("", "Account", "Accounts", http, default_limit=100)
        collection = repository.get("offset=2")
        assert http.last_request.url == "/Accounts?limit=100&offset=2"
        assert collection.get_criteria_copy() == Criteria.limit(100).offset(2)

    def test_explicit_limit_wins(self, http: FakeHttpClient) -> None:
        repository = RestRepository("", "Account", "Accounts", http, default_limit=100)
        repository.get(Criteria.limit(5))
        assert http.last_request.url == "/Accounts?limit=5"

    def test_iterator_pages_with_configured_default(self, http: FakeHttpClient) -> None:
        repository = RestRepository("", "Account", "Accounts", http, default_limit=2)
        http.enqueue('[{"ID":"1"},{"ID":"2"}]', {"Content-Range": "items 0-1/3"})
        http.enqueue('[{"ID":"3"}]', {"Content-Range": "items 2-2/3"})

        ids = [entity.id for entity in repository.get_entire_range_iterator(repository.get())]
        assert ids == ["1", "2", "3"]
        assert http.last_request.url == "/Accounts?limit=2&offset=2"


# ---------------------------------------------------------------------------
# Entire-range iteration
# ---------------------------------------------------------------------------


class TestRestRepositoryIterator:
    def test_iterates_over_multiple_pages(self, repository: RestRepository, http: FakeHttpClient) -> None:
        http.enqueue('[{"ID":"1"},{"ID":"2"}]', {"Content-Range": "items 0-1/3"})
        http.enqueue('[{"ID":"3"}]', {"Content-Range": "items 2-2/3"})

        it = repository.get_entire_range_iterator(repository.get(Criteria.limit(2)))
        assert [entity.id for entity in it] == ["1", "2", "3"]
        assert len(http.requests) == 2
        assert http.last_request.url == "/Accounts?limit=2&offset=2"


# ---------------------------------------------------------------------------
# Saving
# ---------------------------------------------------------------------------


class TestRestRepositorySave:
    def test_save_mapping_with_id_is_put(self, repository: RestRepository, http: FakeHttpClient) -> None:
        repository.save({"ID": "8"})
        assert http.last_request.method == "PUT"
        assert http.last_request.url == "/Accounts/8"
        assert http.last_request.payload == '{"ID":"8"}'

    def test_save_new_mapping_is_post(self, repository: RestRepository, http: FakeHttpClient) -> None:
        response = repository.save({"NAME": "Acme"})
        assert http.last_request.method == "POST"
        assert http.last_request.url == "/Accounts"
        assert http.last_request.payload == '{"NAME":"Acme"}'
        assert isinstance(response, CreatedResponse)
        assert response.created_id == "MOCK-2"

    def test_save_new_entity_sets_id(self, repository: RestRepository) -> None:
        entity = repository.create().set_field("NAME", "Acme")
        repository.save(entity)
        assert entity.id == "MOCK-2"
        assert entity.get_modified_fields() == {}

    def test_save_sends_modified_fields(self, repository: RestRepository, http: FakeHttpClient) -> None:
        entity = repository.get()[0]
        entity["ORGANIZATION"] = "Asdf"
        http.enqueue("", {}, 200)
        repository.save(entity)
        assert http.last_request.url == "/Accounts/MOCK-1"
        assert http.last_request.payload == '{"ORGANIZATION":"Asdf"}'
        assert entity.get_modified_fields() == {}

    def test_save_sends_all_fields(self, repository: RestRepository, http: FakeHttpClient) -> None:
        entity = repository.get()[0]
        entity["ORGANIZATION"] = "Asdf"
        http.enqueue("", {}, 200)
        repository.save(entity, Repository.SEND_ALL_FIELDS)
        assert http.last_request.payload == '{"ID":"MOCK-1","ORGANIZATION":"Asdf"}'

    def test_failed_save_keeps_modifications(self, repository: RestRepository, http: FakeHttpClient) -> None:
        entity = repository.create().set_field("NAME", "Acme")
        http.enqueue('{"errorcode":-5,"message":"invalid"}', {}, 400)
        with pytest.raises(PipelinerHttpError):
            repository.save(entity)
        assert entity.get_modified_fields() == {"NAME": "Acme"}

    def test_save_invalid_type(self, repository: RestRepository) -> None:
        with pytest.raises(ValidationError):
            repository.save(["not", "an", "entity"])  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Deleting and bulk updates
# ---------------------------------------------------------------------------


class TestRestRepositoryDelete:
    def test_delete_mapping(self, repository: RestRepository, http: FakeHttpClient) -> None:
        repository.delete({"ID": 9})
        assert http.last_request.method == "DELETE"
        assert http.last_request.url == "/Accounts/9"

    def test_delete_entity(self, repository: RestRepository, http: FakeHttpClient) -> None:
        repository.delete(repository.create().set_field("ID", "abc"))
        assert http.last_request.url == "/Accounts/abc"

    def test_delete_without_id_raises(self, repository: RestRepository) -> None:
        with pytest.raises(MissingIdError):
            repository.delete(repository.create())

    def test_delete_by_id(self, repository: RestRepository, http: FakeHttpClient) -> None:
        repository.delete_by_id("9")
        assert (http.last_request.method, http.last_request.url) == ("DELETE", "/Accounts/9")

    def test_bulk_delete(self, repository: RestRepository, http: FakeHttpClient) -> None:
        repository.delete([{"ID": 9}, {"ID": 10}, {"ID": 11}], Repository.FLAG_IGNORE_ON_ERROR)
        assert http.last_request.method == "POST"
        assert http.last_request.url == "/deleteEntities?entityName=Account&flag=1"
        assert http.last_request.payload == "[9,10,11]"

    def test_bulk_delete_by_id_default_flag(self, repository: RestRepository, http: FakeHttpClient) -> None:
        repository.delete_by_id([9, 10])
        assert http.last_request.url == "/deleteEntities?entityName=Account"
        assert http.last_request.payload == "[9,10]"


class TestRestRepositoryBulkUpdate:
    def test_bulk_update_entities(self, repository: RestRepository, http: FakeHttpClient) -> None:
        account1 = repository.create().set_camel("Id", 6).set_camel("Organization", "Asdf")
        account2 = repository.create().set_camel("Id", 8)
        account3 = repository.create().set_camel("Id", 12)

        repository.bulk_update([account1, account2, account3])
        assert http.last_request.method == "POST"
        assert http.last_request.url == "/setEntities?entityName=Account"
        assert http.last_request.payload == '[{"ID":6,"ORGANIZATION":"Asdf"},{"ID":8},{"ID":12}]'

    def test_bulk_update_sends_id_of_loaded_entities(self, repository: RestRepository, http: FakeHttpClient) -> None:
        entity = repository.get()[1]
        entity["NAME"] = "x"
        repository.bulk_update([entity], Repository.FLAG_INSERT_ON_UPDATE)
        assert http.last_request.url == "/setEntities?entityName=Account&flag=2"
        assert http.last_request.payload == '[{"NAME":"x","ID":"MOCK-2"}]'

    def test_bulk_update_unsaved_entity_sends_null_id(self, repository: RestRepository, http: FakeHttpClient) -> None:
        entity = repository.create().set_field("NAME", "n")
        repository.bulk_update([entity], Repository.FLAG_INSERT_ON_UPDATE)
        assert http.last_request.url == "/setEntities?entityName=Account&flag=2"
        assert http.last_request.payload == '[{"NAME":"n","ID":null}]'

    def test_bulk_update_mappings(self, repository: RestRepository, http: FakeHttpClient) -> None:
        repository.bulk_update([{"ID": 1, "NAME": "a"}])
        assert http.last_request.payload == '[{"ID":1,"NAME":"a"}]'


# ---------------------------------------------------------------------------
# Factory and info methods
# ---------------------------------------------------------------------------


class TestRestRepositoryFactory:
    def test_creates_repository_with_shared_transport(self, http: FakeHttpClient) -> None:
        factory = RestRepositoryFactory("https://x/rest_services/v1/p", http)
        repository = factory.create_repository("Contact", "Contacts")
        assert repository.entity_type == "Contact"
        assert repository.entity_plural == "Contacts"
        repository.delete_by_id("1")
        assert http.last_request.url == "https://x/rest_services/v1/p/Contacts/1"

    def test_passes_default_limit(self, http: FakeHttpClient) -> None:
        factory = RestRepositoryFactory("https://x/rest_services/v1/p", http, default_limit=50)
        factory.create_repository("Contact", "Contacts").get()
        assert http.last_request.url == "https://x/rest_services/v1/p/Contacts?limit=50"


class TestRestInfoMethods:
    BASE = "https://x/rest_services/v1/p"

    def test_pipeline_version(self, http: FakeHttpClient) -> None:
        http.enqueue("15")
        assert RestInfoMethods(self.BASE, http).fetch_team_pipeline_version() == 15
        assert http.last_request.url == f"{self.BASE}/teamPipelineVersion"

    def test_entity_fields(self, http: FakeHttpClient) -> None:
        http.enqueue('[{"name":"ID"}]')
        info = RestInfoMethods(self.BASE, http)
        assert info.fetch_entity_fields(Entity("Account")) == [{"name": "ID"}]
        assert http.last_request.url == f"{self.BASE}/getFields/Account"

    def test_collections_at_base_url(self, http: FakeHttpClient) -> None:
        http.enqueue('["Accounts","Contacts"]')
        assert RestInfoMethods(self.BASE, http).fetch_collections() == ["Accounts", "Contacts"]
        assert http.last_request.url == self.BASE

    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("fetch_team_pipeline_url", "/teamPipelineUrl"),
            ("fetch_server_api_utc_datetime", "/serverAPIUtcDateTime"),
            ("fetch_error_codes", "/errorCodes"),
            ("fetch_entity_public", "/entityPublic"),
        ],
    )
    def test_paths(self, http: FakeHttpClient, method: str, path: str) -> None:
        http.enqueue('"value"')
        assert getattr(RestInfoMethods(self.BASE, http), method)() == "value"
        assert http.last_request.url == self.BASE + path
