"""Config – library-wide default values."""

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
"""``strftime`` pattern the server uses for date/time fields and query values."""

DEFAULT_LIMIT = 25
"""Number of entities the server returns when a query sets no limit."""

USER_AGENT = "Pipeliner_Python_API_Client/1.0"

REST_PATH = "/rest_services/v1/"

__all__ = ["DATE_FORMAT", "DEFAULT_LIMIT", "REST_PATH", "USER_AGENT"]
