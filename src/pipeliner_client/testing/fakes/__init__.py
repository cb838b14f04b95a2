"""Testing fakes – in-memory doubles for the HTTP port and the fetch collaborator."""
from pipeliner_client.testing.fakes.http import FakeHttpClient, RecordedRequest
from pipeliner_client.testing.fakes.repository import InMemoryRepository

__all__ = ["FakeHttpClient", "InMemoryRepository", "RecordedRequest"]
