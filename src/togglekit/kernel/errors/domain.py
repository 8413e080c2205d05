"""Domain errors — invalid feature identifiers and feature states."""

from __future__ import annotations

from typing import Any

from togglekit.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidFeatureStateError(ValidationError):
    """A :class:`~togglekit.features.FeatureState` breaks its invariants."""

    default_code = "invalid_feature_state"

    def __init__(self, feature_id: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid state for feature '{feature_id}': {reason}",
            errors=[{"field": "parameters", "reason": reason}],
            **kwargs,
        )
        self.feature_id = feature_id
        self.reason = reason


__all__ = ["DomainError", "InvalidFeatureStateError", "ValidationError"]
