"""PipelinerClientError – root of every error raised by the client."""

from __future__ import annotations

import json
from typing import Any


class PipelinerClientError(Exception):
    """Anything the client raises on purpose derives from this class.

    Catching it separates client failures (bad query input, unusable
    responses, configuration problems) from unrelated programming errors.
    Each subclass sets ``default_code``, a stable slug that log processors
    and callers can match on instead of parsing the message.

    Args:
        message: What went wrong, phrased for the person using the client.
        code: Overrides ``default_code`` for this instance.
        detail: Request or query context, e.g. ``{"url": ..., "method": ...}``.
        cause: Lower-level exception (httpx, json, int parsing) being wrapped;
            it is also chained as ``__cause__``.
    """

    default_code: str = "pipeliner_client_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Return ``code``, ``message`` and ``detail`` (plus ``cause`` when set) for structured logs."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.code}: {self.message}>"


__all__ = ["PipelinerClientError"]
