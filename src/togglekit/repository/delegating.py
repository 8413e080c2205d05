"""Repository – DelegatingStateRepository base for decorators."""
from __future__ import annotations

from togglekit.features.feature import FeatureLike
from togglekit.features.state import FeatureState
from togglekit.repository.port import StateRepository


class DelegatingStateRepository(StateRepository):
    """Wraps exactly one repository and forwards both operations to it.

    Subclasses override the operation they add behaviour to.
    """

    def __init__(self, delegate: StateRepository) -> None:
        self._delegate = delegate

    @property
    def delegate(self) -> StateRepository:
        return self._delegate

    def unwrap(self) -> StateRepository:
        """Return the innermost, non-delegating repository."""
        repository: StateRepository = self._delegate
        while isinstance(repository, DelegatingStateRepository):
            repository = repository.delegate
        return repository

    def get_feature_state(self, feature: FeatureLike) -> FeatureState | None:
        return self._delegate.get_feature_state(feature)

    def set_feature_state(self, state: FeatureState) -> None:
        self._delegate.set_feature_state(state)


__all__ = ["DelegatingStateRepository"]
