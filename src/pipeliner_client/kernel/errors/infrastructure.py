"""Infrastructure errors – HTTP transport failures."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pipeliner_client.kernel.errors.base import PipelinerClientError

if TYPE_CHECKING:
    from pipeliner_client.adapters.http.response import Response


class InfrastructureError(PipelinerClientError):
    """Infrastructure / I/O failure that is not a client-side rule violation."""

    default_code = "infrastructure_error"


class PipelinerHttpError(InfrastructureError):
    """A HTTP request failed or its response could not be used.

    The message is enriched with the transport error (if any), the
    ``errorcode``/``message`` pair from a JSON error body (if any) and the
    HTTP status code.
    """

    default_code = "http_error"

    def __init__(
        self,
        response: Response,
        message: str = "",
        http_error: str = "",
        **kwargs: Any,
    ) -> None:
        self.response = response
        self._json_error: Any = None

        if response.body:
            try:
                self._json_error = json.loads(response.body)
            except ValueError:
                self._json_error = None

        parts = [message] if message else []
        if http_error:
            parts.append(f"HTTP error: [{http_error}]")
        if self._json_error:
            parts.append(f"Response error: [{self.error_code}: {self.error_message}]")
        parts.append(f"HTTP code {response.status_code}")
        full = ", ".join(parts)

        super().__init__(full, detail={"url": response.request_url, "method": response.request_method}, **kwargs)

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def error_code(self) -> int:
        """The error code reported by the API, or 0 when unavailable."""
        if isinstance(self._json_error, dict) and "errorcode" in self._json_error:
            return int(self._json_error["errorcode"])
        return 0

    @property
    def error_message(self) -> str:
        """The error message reported by the API, or an empty string."""
        if isinstance(self._json_error, str):
            return self._json_error
        if isinstance(self._json_error, dict) and "message" in self._json_error:
            return str(self._json_error["message"])
        return ""


class RequestTimeoutError(InfrastructureError):
    """A HTTP request exceeded its deadline."""

    default_code = "request_timeout"


__all__ = ["InfrastructureError", "PipelinerHttpError", "RequestTimeoutError"]
