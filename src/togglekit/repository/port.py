"""Repository – StateRepository port."""
from __future__ import annotations

import abc

from togglekit.features.feature import FeatureLike
from togglekit.features.state import FeatureState


class StateRepository(abc.ABC):
    """Port: persist and read the state of features.

    Concrete backends (database, file, distributed cache) implement both
    methods.  Decorators implement them too, delegating to one inner
    repository, so any number of them can be stacked around a backend.

    ``get_feature_state`` is a pure read; ``None`` means nothing has been
    stored for the feature.  ``set_feature_state`` replaces the whole state
    for ``state.feature_id`` atomically.  Backend failures propagate to the
    caller unchanged.
    """

    @abc.abstractmethod
    def get_feature_state(self, feature: FeatureLike) -> FeatureState | None: ...

    @abc.abstractmethod
    def set_feature_state(self, state: FeatureState) -> None: ...


__all__ = ["StateRepository"]
