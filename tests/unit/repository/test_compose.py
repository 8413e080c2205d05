"""Unit tests for composing repository decorators."""

from __future__ import annotations

import functools

from togglekit.features import FeatureState
from togglekit.repository import (
    CachingStateRepository,
    DelegatingStateRepository,
    InMemoryStateRepository,
    LoggingStateRepository,
    StateRepository,
    compose,
)
from togglekit.testing import RecordingLogger, RecordingStateRepository


class TestCompose:
    def test_no_layers_returns_backend(self) -> None:
        backend = InMemoryStateRepository()
        assert compose(backend) is backend

    def test_first_layer_is_innermost(self) -> None:
        log = RecordingLogger()
        backend = InMemoryStateRepository()
        repository = compose(
            backend,
            CachingStateRepository,
            functools.partial(LoggingStateRepository, logger=log),
        )
        assert isinstance(repository, LoggingStateRepository)
        assert isinstance(repository.delegate, CachingStateRepository)
        assert repository.unwrap() is backend

    def test_chain_writes_reach_backend_unchanged(self) -> None:
        log = RecordingLogger()
        backend = RecordingStateRepository()
        repository = compose(
            backend,
            CachingStateRepository,
            functools.partial(LoggingStateRepository, logger=log),
            functools.partial(LoggingStateRepository, template="audit {1}={2}", logger=log),
        )
        state = FeatureState("X", True, "gradual", {"percentage": "5"})  # type: ignore[arg-type]
        repository.set_feature_state(state)
        assert backend.writes == [state]
        assert log.messages() == ["audit X=enabled", 'Setting Feature "X" to "enabled"']
        assert repository.get_feature_state("X") == state

    def test_custom_layer(self) -> None:
        class Counting(DelegatingStateRepository):
            def __init__(self, delegate: StateRepository) -> None:
                super().__init__(delegate)
                self.writes = 0

            def set_feature_state(self, state: FeatureState) -> None:
                self.writes += 1
                super().set_feature_state(state)

        repository = compose(InMemoryStateRepository(), Counting)
        repository.set_feature_state(FeatureState.of("X", True))
        assert isinstance(repository, Counting)
        assert repository.writes == 1
