"""Config validation – errors raised while building ClientSettings."""
from __future__ import annotations

from pipeliner_client.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """The client could not be configured from the environment or a ``.env`` file."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A connection setting without default (URL, pipeline ID, credentials) is not set.

    ``setting_name`` is the environment variable that was looked up, e.g.
    ``PIPELINER_API_TOKEN``.
    """

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Cannot connect to the team pipeline: environment variable {setting_name} is not set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A ClientSettings field holds a value the client cannot work with.

    Credential values never reach the message; only numeric and format
    settings are validated.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"ClientSettings.{setting_name}={value!r} {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
