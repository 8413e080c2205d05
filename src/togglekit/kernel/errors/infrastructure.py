"""Infrastructure errors — storage backend failures."""

from __future__ import annotations

from typing import Any

from togglekit.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class RepositoryError(InfrastructureError):
    """A state repository backend failed to read or write.

    Backends raise this (or their own errors); decorators never catch it.
    """

    default_code = "repository_error"

    def __init__(
        self,
        backend: str,
        message: str | None = None,
        *,
        feature_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"State repository '{backend}' failed", **kwargs)
        self.backend = backend
        self.feature_id = feature_id


__all__ = ["InfrastructureError", "RepositoryError"]
