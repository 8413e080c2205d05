"""Kernel types – identifier value objects."""
from togglekit.kernel.types.ids import FeatureIdentifier

__all__ = ["FeatureIdentifier"]
