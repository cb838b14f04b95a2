"""Observability – structlog configuration and logger helpers."""
from pipeliner_client.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from pipeliner_client.observability.logging.factory import JsonLoggerFactory
from pipeliner_client.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
