"""Unit tests for in-memory test fakes."""

from __future__ import annotations

import pytest

from pipeliner_client.application.query import Criteria
from pipeliner_client.kernel.errors import PipelinerHttpError, RequestTimeoutError
from pipeliner_client.testing.fakes import FakeHttpClient, InMemoryRepository, RecordedRequest


# ---------------------------------------------------------------------------
# FakeHttpClient
# ---------------------------------------------------------------------------


class TestFakeHttpClient:
    def test_records_requests(self) -> None:
        http = FakeHttpClient()
        http.request("PUT", "/Accounts/1", '{"ID":"1"}')
        assert http.requests == [RecordedRequest("PUT", "/Accounts/1", '{"ID":"1"}', "application/json")]
        assert http.last_request.url == "/Accounts/1"

    def test_default_get_response(self) -> None:
        response = FakeHttpClient().request("GET", "/Accounts")
        assert response.status_code == 200
        assert response.decode_json() == [{"ID": "MOCK-1"}, {"ID": "MOCK-2"}]
        assert response.headers["Content-Range"] == "items 0-1/5"

    def test_default_post_response(self) -> None:
        response = FakeHttpClient().request("POST", "/Accounts", "{}")
        assert response.status_code == 201
        assert response.headers["Location"].endswith("/MOCK-2")

    def test_queued_responses_in_order(self) -> None:
        http = FakeHttpClient().enqueue("1").enqueue("2")
        assert http.request("GET", "/a").body == "1"
        assert http.request("GET", "/b").body == "2"
        assert http.request("GET", "/c").status_code == 200

    def test_queued_response_carries_request(self) -> None:
        http = FakeHttpClient().enqueue("[]")
        response = http.request("GET", "/Contacts")
        assert response.request_url == "/Contacts"
        assert response.request_method == "GET"

    def test_error_status_raises(self) -> None:
        http = FakeHttpClient().enqueue('{"errorcode":-1,"message":"nope"}', status_code=403)
        with pytest.raises(PipelinerHttpError) as exc_info:
            http.request("GET", "/Accounts")
        assert exc_info.value.status_code == 403

    def test_enqueue_error(self) -> None:
        http = FakeHttpClient().enqueue_error(RequestTimeoutError("slow"))
        with pytest.raises(RequestTimeoutError):
            http.request("GET", "/Accounts")
        assert len(http.requests) == 1

    def test_credentials(self) -> None:
        http = FakeHttpClient()
        http.set_user_credentials("token", "secret")
        assert http.credentials == ("token", "secret")


# ---------------------------------------------------------------------------
# InMemoryRepository
# ---------------------------------------------------------------------------


class TestInMemoryRepository:
    def test_pages_by_offset_and_limit(self) -> None:
        repository = InMemoryRepository(range(10))
        page = repository.get(Criteria.offset(4).limit(3))
        assert list(page) == [4, 5, 6]
        assert (page.start_index, page.end_index, page.total_count) == (4, 6, 10)

    def test_default_limit(self) -> None:
        page = InMemoryRepository(range(30)).get()
        assert len(page) == 25

    def test_no_limit(self) -> None:
        page = InMemoryRepository(range(30)).get(Criteria.limit(Criteria.NO_LIMIT))
        assert len(page) == 30

    def test_last_partial_page(self) -> None:
        page = InMemoryRepository(range(5)).get(Criteria.offset(4).limit(3))
        assert list(page) == [4]
        assert page.end_index == 4

    def test_offset_past_end(self) -> None:
        page = InMemoryRepository(range(5)).get(Criteria.offset(10))
        assert len(page) == 0
        assert page.end_index == -1
        assert page.total_count == 5

    def test_records_fetches(self) -> None:
        repository = InMemoryRepository().seed("A", "B")
        repository.get(Criteria.limit(1))
        repository.get("offset=1&limit=1")
        assert repository.fetch_count == 2
        assert repository.fetched[1] == Criteria.offset(1).limit(1)
