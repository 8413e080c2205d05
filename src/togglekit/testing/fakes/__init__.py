"""Testing fakes – in-memory doubles for togglekit ports."""
from togglekit.testing.fakes.clock import FakeClock
from togglekit.testing.fakes.logger import RecordingLogger
from togglekit.testing.fakes.state_repository import RecordingStateRepository
from togglekit.kernel.time import FrozenClock

__all__ = [
    "FakeClock",
    "FrozenClock",
    "RecordingLogger",
    "RecordingStateRepository",
]
