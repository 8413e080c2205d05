"""String-based identifier value objects."""

from __future__ import annotations

import dataclasses

from togglekit.kernel.errors.domain import ValidationError


@dataclasses.dataclass(frozen=True, slots=True, order=True)
class _StrId:
    """Base for string-typed identifiers."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(f"{type(self).__name__} must be a string, got {type(self.value).__name__}")
        if not self.value:
            raise ValidationError(f"{type(self).__name__} must not be empty")

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True, slots=True, order=True)
class FeatureIdentifier(_StrId):
    """Case-sensitive key joining stored state and declared metadata.

    Examples::

        fid = FeatureIdentifier("CHECKOUT_V2")
        fid = FeatureIdentifier.from_str("CHECKOUT_V2")
        str(fid)  # "CHECKOUT_V2"
    """

    @classmethod
    def from_str(cls, value: str) -> "FeatureIdentifier":
        """Construct from an existing string identifier."""
        return cls(value)


__all__ = ["FeatureIdentifier"]
