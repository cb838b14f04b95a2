"""HTTP port – the transport used by REST adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pipeliner_client.adapters.http.response import Response


class HttpClient(Protocol):
    """Minimal synchronous HTTP transport.

    ``request`` returns the response for any 2xx/3xx status and raises
    :class:`~pipeliner_client.kernel.errors.PipelinerHttpError` otherwise.
    """

    def request(
        self,
        method: str,
        url: str,
        payload: str | None = None,
        content_type: str = "application/json",
    ) -> "Response": ...

    def set_user_credentials(self, username: str, password: str) -> None: ...


__all__ = ["HttpClient"]
