"""Metadata – FeatureMetadata snapshot built from declared markers."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Mapping

from togglekit.features.feature import FeatureLike, as_identifier
from togglekit.features.state import FeatureState
from togglekit.kernel.types import FeatureIdentifier
from togglekit.metadata.markers import DefaultActivationStrategy
from togglekit.metadata.resolver import (
    get_feature_attributes,
    get_info_link,
    get_label,
    get_marker,
    get_owner,
    is_enabled_by_default,
)


@dataclasses.dataclass(frozen=True)
class FeatureMetadata:
    """Everything the markers of one feature declare, resolved once."""

    feature_id: FeatureIdentifier
    label: str
    owner: str | None = None
    info_link: str | None = None
    enabled_by_default: bool = False
    default_strategy: DefaultActivationStrategy | None = None
    attributes: Mapping[str, str] = dataclasses.field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @classmethod
    def of(cls, feature: FeatureLike) -> "FeatureMetadata":
        return cls(
            feature_id=as_identifier(feature),
            label=get_label(feature),
            owner=get_owner(feature),
            info_link=get_info_link(feature),
            enabled_by_default=is_enabled_by_default(feature),
            default_strategy=get_marker(feature, DefaultActivationStrategy),
            attributes=get_feature_attributes(feature),
        )

    def default_state(self) -> FeatureState:
        """State to assume while nothing has been stored for the feature."""
        if self.default_strategy is None:
            return FeatureState(self.feature_id, self.enabled_by_default)
        return FeatureState(
            self.feature_id,
            self.enabled_by_default,
            strategy_id=self.default_strategy.id,
            parameters=self.default_strategy.parameter_map(),
        )


__all__ = ["FeatureMetadata"]
