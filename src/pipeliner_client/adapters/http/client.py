"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from pipeliner_client.adapters.http.response import Response
from pipeliner_client.config.defaults import USER_AGENT
from pipeliner_client.kernel.errors import PipelinerHttpError, RequestTimeoutError
from pipeliner_client.observability.logging import get_logger

_log = get_logger(__name__)


class HttpxHttpClient:
    """Thin synchronous httpx wrapper with structured error mapping.

    Any status outside ``200..399`` raises :class:`PipelinerHttpError`
    carrying the response; timeouts raise :class:`RequestTimeoutError`.
    """

    def __init__(self, user_agent: str = USER_AGENT, timeout: float = 30.0, **kwargs: Any) -> None:
        self._client = httpx.Client(timeout=timeout, **kwargs)
        self._client.headers["User-Agent"] = user_agent

    def __enter__(self) -> "HttpxHttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def set_user_credentials(self, username: str, password: str) -> None:
        self._client.auth = httpx.BasicAuth(username, password)

    def set_user_agent(self, user_agent: str) -> None:
        self._client.headers["User-Agent"] = user_agent

    def request(
        self,
        method: str,
        url: str,
        payload: str | None = None,
        content_type: str = "application/json",
    ) -> Response:
        method = method.upper()
        headers = {"Content-Type": content_type} if payload else None
        _log.debug("http_request", method=method, url=url)
        try:
            raw = self._client.request(method, url, content=payload or None, headers=headers)
        except httpx.TimeoutException as exc:
            _log.warning("http_timeout", method=method, url=url)
            raise RequestTimeoutError(f"HTTP request timed out: {method} {url}", cause=exc) from exc
        except httpx.HTTPError as exc:
            _log.warning("http_transport_error", method=method, url=url, error=str(exc))
            raise PipelinerHttpError(Response("", {}, 0, url, method), http_error=str(exc), cause=exc) from exc

        response = Response(raw.text, raw.headers, raw.status_code, url, method)
        if not 200 <= response.status_code <= 399:
            _log.warning("http_error_status", method=method, url=url, status_code=response.status_code)
            raise PipelinerHttpError(response, f"{method} {url} failed")
        _log.debug("http_response", method=method, url=url, status_code=response.status_code)
        return response


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
