"""Unit tests for InMemoryStateRepository and the repository contract."""

from __future__ import annotations

import threading

import pytest

from togglekit.features import Feature, FeatureState
from togglekit.kernel.types import FeatureIdentifier
from togglekit.repository import InMemoryStateRepository, StateRepository


class TestContract:
    def test_is_state_repository(self) -> None:
        assert isinstance(InMemoryStateRepository(), StateRepository)

    def test_port_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            StateRepository()  # type: ignore[abstract]


class TestInMemoryStateRepository:
    def test_unknown_feature_reads_none(self) -> None:
        assert InMemoryStateRepository().get_feature_state("X") is None

    def test_round_trip(self) -> None:
        repository = InMemoryStateRepository()
        state = FeatureState("X", True, "gradual", {"percentage": "25"})  # type: ignore[arg-type]
        repository.set_feature_state(state)
        assert repository.get_feature_state("X") == state

    def test_reads_are_idempotent(self) -> None:
        repository = InMemoryStateRepository([FeatureState.of("X", True)])
        assert repository.get_feature_state("X") == repository.get_feature_state("X")

    def test_write_replaces_previous_state(self) -> None:
        repository = InMemoryStateRepository()
        repository.set_feature_state(FeatureState("X", True, "gradual", {"p": "1"}))  # type: ignore[arg-type]
        repository.set_feature_state(FeatureState.of("X", False))
        assert repository.get_feature_state("X") == FeatureState.of("X", False)

    def test_lookup_by_handle_or_identifier(self) -> None:
        repository = InMemoryStateRepository([FeatureState.of("X", True)])
        assert repository.get_feature_state(Feature.named("X")) is not None
        assert repository.get_feature_state(FeatureIdentifier("X")) is not None

    def test_identifiers_are_case_sensitive(self) -> None:
        repository = InMemoryStateRepository([FeatureState.of("X", True)])
        assert repository.get_feature_state("x") is None

    def test_rejects_non_state(self) -> None:
        with pytest.raises(TypeError):
            InMemoryStateRepository().set_feature_state({"feature": "X"})  # type: ignore[arg-type]

    def test_feature_ids(self) -> None:
        repository = InMemoryStateRepository()
        repository.set_feature_state(FeatureState.of("B", True))
        repository.set_feature_state(FeatureState.of("A", True))
        assert repository.feature_ids() == (FeatureIdentifier("B"), FeatureIdentifier("A"))

    def test_concurrent_writes_to_same_feature_leave_one_of_them(self) -> None:
        repository = InMemoryStateRepository()
        states = [
            FeatureState("X", True, "gradual", {"percentage": str(i)})  # type: ignore[arg-type]
            for i in range(20)
        ]
        threads = [
            threading.Thread(target=repository.set_feature_state, args=(s,)) for s in states
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert repository.get_feature_state("X") in states
