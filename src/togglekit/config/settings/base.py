"""Config settings – Settings base class and FeatureSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from togglekit.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class FeatureSettings(Settings):
    """Settings driving :func:`togglekit.config.builder.build_state_repository`.

    Read from ``TOGGLEKIT_*`` environment variables by
    :class:`~togglekit.config.settings.loaders.EnvSettingsLoader`.

    Attributes
    ----------
    log_state_changes:
        Wrap the backend in a :class:`~togglekit.repository.LoggingStateRepository`.
    log_message_template:
        Custom log template with ``{1}`` (feature id) and ``{2}``
        (``enabled``/``disabled``).  Empty means the default message.
    cache_enabled:
        Wrap the backend in a :class:`~togglekit.repository.CachingStateRepository`.
    cache_ttl_seconds:
        Cache entry lifetime; ``0`` keeps entries until the next write.
    """

    _prefix: ClassVar[str] = "TOGGLEKIT"

    log_state_changes: bool = True
    log_message_template: str = ""
    cache_enabled: bool = False
    cache_ttl_seconds: float = 0.0

    def _validate(self) -> None:
        if self.cache_ttl_seconds < 0:
            raise InvalidSettingValueError(
                "cache_ttl_seconds", self.cache_ttl_seconds, "must not be negative"
            )


__all__ = ["FeatureSettings", "Settings"]
