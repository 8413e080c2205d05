"""Features – handles, group declarations and persisted state."""
from togglekit.features.feature import (
    Feature,
    FeatureDeclaration,
    FeatureGroup,
    FeatureLike,
    MarkerTable,
    as_identifier,
    declare,
)
from togglekit.features.state import FeatureState

__all__ = [
    "Feature",
    "FeatureDeclaration",
    "FeatureGroup",
    "FeatureLike",
    "FeatureState",
    "MarkerTable",
    "as_identifier",
    "declare",
]
