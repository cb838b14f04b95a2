"""HTTP adapter – Response and CreatedResponse."""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import httpx

from pipeliner_client.application.pagination import PageRange
from pipeliner_client.kernel.errors import PipelinerHttpError


class Response:
    """A HTTP response as seen by the REST adapters.

    Headers are kept in a case-insensitive :class:`httpx.Headers`.
    """

    def __init__(
        self,
        body: str,
        headers: Mapping[str, str] | httpx.Headers,
        status_code: int,
        request_url: str,
        request_method: str,
    ) -> None:
        self.body = body
        self.headers = httpx.Headers(headers)
        self.status_code = status_code
        self.request_url = request_url
        self.request_method = request_method

    def decode_json(self) -> Any:
        """Decode the body as JSON.

        Raises :class:`PipelinerHttpError` when the body is not valid JSON.
        """
        try:
            return json.loads(self.body)
        except ValueError as exc:
            raise PipelinerHttpError(self, "Error while parsing returned JSON", cause=exc) from exc

    def content_range(self) -> PageRange | None:
        """Return the range announced by the ``Content-Range`` header, if any."""
        header = self.headers.get("Content-Range")
        if header is None:
            return None
        return PageRange.from_content_range(header)

    def __repr__(self) -> str:
        return f"Response({self.request_method} {self.request_url} -> {self.status_code})"


class CreatedResponse(Response):
    """A ``201 Created`` response to a POST creating a new entity."""

    @classmethod
    def from_response(cls, response: Response) -> "CreatedResponse":
        return cls(
            response.body,
            response.headers,
            response.status_code,
            response.request_url,
            response.request_method,
        )

    @property
    def created_id(self) -> str:
        """ID of the new entity: the last path segment of the ``Location`` header."""
        location = self.headers.get("Location", "")
        return location.rstrip().rsplit("/", 1)[-1]


__all__ = ["CreatedResponse", "Response"]
