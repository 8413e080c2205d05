"""Application-layer errors — configuration and declaration mistakes."""

from __future__ import annotations

from togglekit.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
