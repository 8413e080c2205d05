"""Metadata – declarative markers and their resolution."""
from togglekit.metadata.markers import (
    ActivationParameter,
    AttributePair,
    DefaultActivationStrategy,
    EnabledByDefault,
    FeatureAttributeSpec,
    InfoLink,
    Label,
    Owner,
    feature_attribute,
    feature_attribute_spec,
)
from togglekit.metadata.resolver import (
    get_feature_attribute,
    get_feature_attributes,
    get_info_link,
    get_label,
    get_marker,
    get_markers,
    get_owner,
    is_enabled_by_default,
    is_marker_present,
)
from togglekit.metadata.feature_metadata import FeatureMetadata

__all__ = [
    "ActivationParameter",
    "AttributePair",
    "DefaultActivationStrategy",
    "EnabledByDefault",
    "FeatureAttributeSpec",
    "FeatureMetadata",
    "InfoLink",
    "Label",
    "Owner",
    "feature_attribute",
    "feature_attribute_spec",
    "get_feature_attribute",
    "get_feature_attributes",
    "get_info_link",
    "get_label",
    "get_marker",
    "get_markers",
    "get_owner",
    "is_enabled_by_default",
    "is_marker_present",
]
