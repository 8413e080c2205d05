"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

import time
from datetime import datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract clock for deterministic cache expiry."""

    def monotonic(self) -> float: ...


class SystemClock:
    """Production clock delegating to ``time.monotonic``."""

    def monotonic(self) -> float:
        return time.monotonic()


class FrozenClock:
    """Test clock pinned to a fixed point in time.

    ``monotonic()`` counts seconds elapsed since the pinned start.
    """

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed
        self._origin = fixed

    def monotonic(self) -> float:
        return (self._fixed - self._origin).total_seconds()

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
