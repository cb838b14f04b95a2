"""HTTP adapter – RetryingHttpClient."""
from __future__ import annotations

from typing import Any

import tenacity

from pipeliner_client.adapters.http.client import HttpxHttpClient
from pipeliner_client.adapters.http.response import Response
from pipeliner_client.kernel.errors import PipelinerHttpError, RequestTimeoutError


def is_transient(exc: BaseException) -> bool:
    """Timeouts, connection failures (status 0) and 5xx responses are worth retrying."""
    if isinstance(exc, RequestTimeoutError):
        return True
    if isinstance(exc, PipelinerHttpError):
        return exc.status_code == 0 or exc.status_code >= 500
    return False


class RetryingHttpClient(HttpxHttpClient):
    """HTTP client with automatic retry on transient failures, backed by tenacity."""

    def __init__(
        self,
        *args: Any,
        max_attempts: int = 3,
        base_delay: float = 0.1,
        max_delay: float = 5.0,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._max_attempts = max_attempts
        self._wait = tenacity.wait_exponential(multiplier=base_delay, max=max_delay)

    def request(
        self,
        method: str,
        url: str,
        payload: str | None = None,
        content_type: str = "application/json",
    ) -> Response:
        retrying = tenacity.Retrying(
            stop=tenacity.stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry=tenacity.retry_if_exception(is_transient),
            reraise=True,
        )
        return retrying(super().request, method, url, payload, content_type)


__all__ = ["RetryingHttpClient", "is_transient"]
