"""Repository – InMemoryStateRepository."""

from __future__ import annotations

import threading
from typing import Iterable

from togglekit.features.feature import FeatureLike, as_identifier
from togglekit.features.state import FeatureState
from togglekit.kernel.types import FeatureIdentifier
from togglekit.repository.port import StateRepository


class InMemoryStateRepository(StateRepository):
    """Thread-safe repository backed by a ``{FeatureIdentifier: FeatureState}`` dict.

    Writes are last-writer-wins.  Unknown features read as ``None``.
    """

    def __init__(self, states: Iterable[FeatureState] | None = None) -> None:
        self._lock = threading.Lock()
        self._states: dict[FeatureIdentifier, FeatureState] = {
            state.feature_id: state for state in states or ()
        }

    def get_feature_state(self, feature: FeatureLike) -> FeatureState | None:
        feature_id = as_identifier(feature)
        with self._lock:
            return self._states.get(feature_id)

    def set_feature_state(self, state: FeatureState) -> None:
        if not isinstance(state, FeatureState):
            raise TypeError(f"expected FeatureState, got {type(state).__name__}")
        with self._lock:
            self._states[state.feature_id] = state

    def feature_ids(self) -> tuple[FeatureIdentifier, ...]:
        """Identifiers with stored state, in first-write order."""
        with self._lock:
            return tuple(self._states)


__all__ = ["InMemoryStateRepository"]
