"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── InvalidFeatureStateError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (togglekit.config.validation)
    │       └── MarkerConfigurationError
    └── InfrastructureError  (infrastructure.py)
        └── RepositoryError
"""

from togglekit.kernel.errors.application import ApplicationError
from togglekit.kernel.errors.base import BaseError
from togglekit.kernel.errors.domain import (
    DomainError,
    InvalidFeatureStateError,
    ValidationError,
)
from togglekit.kernel.errors.infrastructure import InfrastructureError, RepositoryError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidFeatureStateError",
    "RepositoryError",
    "ValidationError",
]
