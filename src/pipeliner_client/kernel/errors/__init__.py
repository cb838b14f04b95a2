"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    PipelinerClientError
    ├── DomainError              (domain.py)
    │   ├── ImmutabilityError
    │   ├── RangeMismatchError
    │   └── ValidationError
    │       ├── InvalidFilterValueError
    │       ├── InvalidCriteriaError
    │       └── MissingIdError
    ├── ApplicationError         (application.py)
    │   ├── InvalidOperatorError
    │   ├── MethodNotFoundError
    │   └── UnsupportedVersionError
    └── InfrastructureError      (infrastructure.py)
        ├── PipelinerHttpError
        └── RequestTimeoutError
"""

from pipeliner_client.kernel.errors.application import (
    ApplicationError,
    InvalidOperatorError,
    MethodNotFoundError,
    UnsupportedVersionError,
)
from pipeliner_client.kernel.errors.base import PipelinerClientError
from pipeliner_client.kernel.errors.domain import (
    DomainError,
    ImmutabilityError,
    InvalidCriteriaError,
    InvalidFilterValueError,
    MissingIdError,
    RangeMismatchError,
    ValidationError,
)
from pipeliner_client.kernel.errors.infrastructure import (
    InfrastructureError,
    PipelinerHttpError,
    RequestTimeoutError,
)

__all__ = [
    "ApplicationError",
    "DomainError",
    "ImmutabilityError",
    "InfrastructureError",
    "InvalidCriteriaError",
    "InvalidFilterValueError",
    "InvalidOperatorError",
    "MethodNotFoundError",
    "MissingIdError",
    "PipelinerClientError",
    "PipelinerHttpError",
    "RangeMismatchError",
    "RequestTimeoutError",
    "UnsupportedVersionError",
    "ValidationError",
]
