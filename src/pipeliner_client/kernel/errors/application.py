"""Application-layer errors – misuse of the client API."""

from __future__ import annotations

from typing import Any

from pipeliner_client.kernel.errors.base import PipelinerClientError


class ApplicationError(PipelinerClientError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InvalidOperatorError(ApplicationError):
    """A filter was asked to apply an operator it does not know."""

    default_code = "invalid_operator"

    def __init__(self, operator: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid filter operator: {operator}", **kwargs)
        self.operator = operator


class MethodNotFoundError(ApplicationError):
    """A builder was asked to apply a method outside its fixed set."""

    default_code = "method_not_found"

    def __init__(self, method: str, **kwargs: Any) -> None:
        super().__init__(f"Call to a non-existent method '{method}'", **kwargs)
        self.method = method


class UnsupportedVersionError(ApplicationError):
    """The team pipeline runs an API version this client cannot talk to."""

    default_code = "unsupported_version"

    def __init__(self, version: int, earliest: int, latest: int, **kwargs: Any) -> None:
        super().__init__(
            f"Unsupported team pipeline version: {version} "
            f"(supported versions are {earliest} to {latest})",
            **kwargs,
        )
        self.version = version


__all__ = [
    "ApplicationError",
    "InvalidOperatorError",
    "MethodNotFoundError",
    "UnsupportedVersionError",
]
