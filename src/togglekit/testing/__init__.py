"""Testing support – fakes for state repositories, loggers and clocks."""

from togglekit.testing.fakes import (
    FakeClock,
    FrozenClock,
    RecordingLogger,
    RecordingStateRepository,
)

__all__ = [
    "FakeClock",
    "FrozenClock",
    "RecordingLogger",
    "RecordingStateRepository",
]
