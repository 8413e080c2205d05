"""Observability – Logger protocol."""
from __future__ import annotations

from typing import Any, Protocol


class Logger(Protocol):
    """Minimal logging sink – satisfied by structlog and stdlib loggers."""

    def debug(self, event: str, *args: Any, **kw: Any) -> None: ...
    def info(self, event: str, *args: Any, **kw: Any) -> None: ...
    def warning(self, event: str, *args: Any, **kw: Any) -> None: ...
    def error(self, event: str, *args: Any, **kw: Any) -> None: ...


__all__ = ["Logger"]
