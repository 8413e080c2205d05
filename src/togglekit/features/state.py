"""Features – FeatureState value object."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Mapping

from togglekit.features.feature import FeatureLike, as_identifier
from togglekit.kernel.errors import InvalidFeatureStateError
from togglekit.kernel.types import FeatureIdentifier


@dataclasses.dataclass(frozen=True)
class FeatureState:
    """Persisted state of one feature: enabled flag plus optional strategy.

    ``feature_id`` accepts a :class:`~togglekit.features.Feature`, a
    :class:`FeatureIdentifier` or a plain string.  ``parameters`` is copied
    into a read-only mapping that keeps insertion order; it must be empty
    unless ``strategy_id`` is set.  State changes are expressed by deriving a
    new instance (:meth:`enable`, :meth:`with_strategy`, ...), never by
    mutating one.
    """

    feature_id: FeatureIdentifier
    enabled: bool = False
    strategy_id: str | None = None
    parameters: Mapping[str, str] = dataclasses.field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "feature_id", as_identifier(self.feature_id))  # type: ignore[arg-type]
        object.__setattr__(self, "enabled", bool(self.enabled))
        if self.strategy_id == "":
            object.__setattr__(self, "strategy_id", None)
        params = MappingProxyType({str(k): str(v) for k, v in (self.parameters or {}).items()})
        if self.strategy_id is None and params:
            raise InvalidFeatureStateError(
                self.feature_id.value, "parameters require an activation strategy"
            )
        object.__setattr__(self, "parameters", params)

    @classmethod
    def of(cls, feature: FeatureLike, enabled: bool = False) -> "FeatureState":
        """Shorthand for a state without an activation strategy."""
        return cls(as_identifier(feature), enabled)

    def enable(self) -> "FeatureState":
        return dataclasses.replace(self, enabled=True)

    def disable(self) -> "FeatureState":
        return dataclasses.replace(self, enabled=False)

    def with_strategy(
        self, strategy_id: str | None, parameters: Mapping[str, str] | None = None
    ) -> "FeatureState":
        """Return a copy using *strategy_id*, replacing all parameters."""
        return dataclasses.replace(
            self, strategy_id=strategy_id, parameters=dict(parameters or {})
        )

    def with_parameter(self, name: str, value: str) -> "FeatureState":
        """Return a copy with one strategy parameter added or replaced."""
        return dataclasses.replace(self, parameters={**self.parameters, name: value})

    def get_parameter(self, name: str) -> str | None:
        return self.parameters.get(name)

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(self.parameters)


__all__ = ["FeatureState"]
