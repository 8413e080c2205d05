"""Kernel – framework-agnostic building blocks."""

from togglekit.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InvalidFeatureStateError,
    RepositoryError,
    ValidationError,
)
from togglekit.kernel.types import FeatureIdentifier

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "FeatureIdentifier",
    "InfrastructureError",
    "InvalidFeatureStateError",
    "RepositoryError",
    "ValidationError",
]
