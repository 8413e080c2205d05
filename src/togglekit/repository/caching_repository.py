"""Repository – CachingStateRepository."""
from __future__ import annotations

import dataclasses
import threading

from togglekit.config.validation import InvalidSettingValueError
from togglekit.features.feature import FeatureLike, as_identifier
from togglekit.features.state import FeatureState
from togglekit.kernel.time import Clock, SystemClock
from togglekit.kernel.types import FeatureIdentifier
from togglekit.repository.delegating import DelegatingStateRepository
from togglekit.repository.port import StateRepository


@dataclasses.dataclass(frozen=True)
class _CacheEntry:
    state: FeatureState | None
    stored_at: float


class CachingStateRepository(DelegatingStateRepository):
    """Decorator caching reads of a slow repository.

    Results are cached per identifier, including ``None`` for unknown
    features.  ``ttl_seconds <= 0`` keeps entries until the next write for
    that feature.  Writes evict the entry before and after delegating, and a
    read that raced with a write does not repopulate the cache.
    """

    def __init__(
        self,
        delegate: StateRepository,
        ttl_seconds: float = 0.0,
        clock: Clock | None = None,
    ) -> None:
        if ttl_seconds < 0:
            raise InvalidSettingValueError("ttl_seconds", ttl_seconds, "must not be negative")
        super().__init__(delegate)
        self._ttl = ttl_seconds
        self._clock: Clock = clock or SystemClock()
        self._lock = threading.Lock()
        self._entries: dict[FeatureIdentifier, _CacheEntry] = {}
        self._generations: dict[FeatureIdentifier, int] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def _expired(self, entry: _CacheEntry) -> bool:
        return self._ttl > 0 and self._clock.monotonic() - entry.stored_at >= self._ttl

    def get_feature_state(self, feature: FeatureLike) -> FeatureState | None:
        feature_id = as_identifier(feature)
        with self._lock:
            entry = self._entries.get(feature_id)
            if entry is not None and not self._expired(entry):
                return entry.state
            generation = self._generations.get(feature_id, 0)

        state = self._delegate.get_feature_state(feature)

        with self._lock:
            if self._generations.get(feature_id, 0) == generation:
                self._entries[feature_id] = _CacheEntry(state, self._clock.monotonic())
        return state

    def set_feature_state(self, state: FeatureState) -> None:
        self._evict(state.feature_id)
        try:
            self._delegate.set_feature_state(state)
        finally:
            self._evict(state.feature_id)

    def _evict(self, feature_id: FeatureIdentifier) -> None:
        with self._lock:
            self._entries.pop(feature_id, None)
            self._generations[feature_id] = self._generations.get(feature_id, 0) + 1

    def clear(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            for feature_id in self._entries:
                self._generations[feature_id] = self._generations.get(feature_id, 0) + 1
            self._entries.clear()


__all__ = ["CachingStateRepository"]
