"""Unit tests for the shipped testing fakes."""

from __future__ import annotations

import pytest

from togglekit.features import FeatureState
from togglekit.kernel.errors import RepositoryError
from togglekit.kernel.types import FeatureIdentifier
from togglekit.testing import FakeClock, RecordingLogger, RecordingStateRepository


class TestRecordingLogger:
    def test_records_by_level(self) -> None:
        log = RecordingLogger()
        log.info("a")
        log.error("b")
        assert log.records == [("info", "a"), ("error", "b")]
        assert log.messages("error") == ["b"]

    def test_fail_with(self) -> None:
        log = RecordingLogger(fail_with=RuntimeError("down"))
        with pytest.raises(RuntimeError):
            log.info("a")
        assert log.records == []

    def test_reset(self) -> None:
        log = RecordingLogger()
        log.debug("a")
        log.reset()
        assert log.messages() == []


class TestRecordingStateRepository:
    def test_records_reads_and_writes(self) -> None:
        repository = RecordingStateRepository()
        state = FeatureState.of("X", True)
        repository.set_feature_state(state)
        assert repository.get_feature_state("X") == state
        assert repository.writes == [state]
        assert repository.reads == [FeatureIdentifier("X")]

    def test_fail_writes_records_but_does_not_store(self) -> None:
        repository = RecordingStateRepository().fail_writes(RepositoryError("db"))
        with pytest.raises(RepositoryError):
            repository.set_feature_state(FeatureState.of("X", True))
        assert len(repository.writes) == 1
        repository.fail_writes(None)
        assert repository.get_feature_state("X") is None

    def test_reset(self) -> None:
        repository = RecordingStateRepository()
        repository.set_feature_state(FeatureState.of("X", True))
        repository.reset()
        assert repository.writes == []
        assert repository.get_feature_state("X") is None


class TestFakeClock:
    def test_pinned_start(self) -> None:
        clock = FakeClock()
        assert clock.monotonic() == 0.0
        clock.advance(minutes=1)
        assert clock.monotonic() == 60.0
