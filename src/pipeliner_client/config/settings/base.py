"""Config settings – Settings base class and ClientSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from pipeliner_client.config.defaults import DATE_FORMAT, DEFAULT_LIMIT, REST_PATH, USER_AGENT
from pipeliner_client.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ClientSettings(Settings):
    """Connection settings for one team pipeline.

    Loaded from ``PIPELINER_*`` environment variables by the settings loaders,
    e.g. ``PIPELINER_URL``, ``PIPELINER_PIPELINE_ID``, ``PIPELINER_API_TOKEN``.
    ``default_limit`` is the page size repositories request for queries that
    set no limit of their own.
    """

    _prefix: ClassVar[str] = "PIPELINER"

    url: str
    pipeline_id: str
    api_token: str
    password: str
    date_format: str = DATE_FORMAT
    default_limit: int = DEFAULT_LIMIT
    timeout: float = 30.0
    user_agent: str = USER_AGENT
    max_attempts: int = 1

    def _validate(self) -> None:
        if self.default_limit < 1:
            raise InvalidSettingValueError("default_limit", self.default_limit, "must be >= 1")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be > 0")
        if self.max_attempts < 1:
            raise InvalidSettingValueError("max_attempts", self.max_attempts, "must be >= 1")

    @property
    def base_url(self) -> str:
        """REST root of the team pipeline, without a trailing slash."""
        return self.url.rstrip("/") + REST_PATH + self.pipeline_id

    def __repr__(self) -> str:
        return (
            f"ClientSettings(url={self.url!r}, pipeline_id={self.pipeline_id!r}, "
            f"api_token='[REDACTED]', password='[REDACTED]')"
        )


__all__ = ["ClientSettings", "Settings"]
