"""Kernel model – Entity record and the per-version entity type table."""
from pipeliner_client.kernel.model.entity import Entity, field_name_from_camel_case
from pipeliner_client.kernel.model.version import EARLIEST_VERSION, LATEST_VERSION, get_entity_types

__all__ = [
    "EARLIEST_VERSION",
    "LATEST_VERSION",
    "Entity",
    "field_name_from_camel_case",
    "get_entity_types",
]
