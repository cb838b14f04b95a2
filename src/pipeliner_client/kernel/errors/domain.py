"""Domain errors – collection invariants and invalid query input."""

from __future__ import annotations

from typing import Any

from pipeliner_client.kernel.errors.base import PipelinerClientError


class DomainError(PipelinerClientError):
    """Raised when an invariant of the client model is violated."""

    default_code = "domain_error"


class ImmutabilityError(DomainError):
    """An attempt was made to add, remove or reorder entities of a collection."""

    default_code = "immutable_collection"

    def __init__(self, message: str = "EntityCollection is immutable", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class RangeMismatchError(DomainError):
    """The reported content range does not match the number of loaded entities."""

    default_code = "range_mismatch"

    def __init__(
        self,
        start_index: int,
        end_index: int,
        loaded_count: int,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Content range {start_index}-{end_index} doesn't match "
            f"the number of returned entities ({loaded_count})",
            **kwargs,
        )
        self.start_index = start_index
        self.end_index = end_index
        self.loaded_count = loaded_count


class ValidationError(DomainError):
    """Input data does not meet validation rules."""

    default_code = "validation_error"


class InvalidFilterValueError(ValidationError):
    """A value of an unsupported type was passed to a filter operator."""

    default_code = "invalid_filter_value"

    def __init__(self, operator: str, value: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Filter operator '{operator}' does not accept {type(value).__name__} values",
            **kwargs,
        )
        self.operator = operator
        self.value = value


class InvalidCriteriaError(ValidationError):
    """The criteria source is of a type that cannot be turned into a query."""

    default_code = "invalid_criteria"


class MissingIdError(ValidationError):
    """The entity has no ID, usually because it was never saved."""

    default_code = "missing_id"


__all__ = [
    "DomainError",
    "ImmutabilityError",
    "InvalidCriteriaError",
    "InvalidFilterValueError",
    "MissingIdError",
    "RangeMismatchError",
    "ValidationError",
]
