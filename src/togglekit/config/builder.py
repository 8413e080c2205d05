"""Config – build a decorated state repository from FeatureSettings."""
from __future__ import annotations

import functools

from togglekit.config.settings import FeatureSettings
from togglekit.kernel.time import Clock
from togglekit.observability.logging import Logger
from togglekit.repository import (
    CachingStateRepository,
    LoggingStateRepository,
    RepositoryLayer,
    StateRepository,
    compose,
)


def build_state_repository(
    backend: StateRepository,
    settings: FeatureSettings | None = None,
    *,
    logger: Logger | None = None,
    clock: Clock | None = None,
) -> StateRepository:
    """Wrap *backend* as configured: caching innermost, logging outermost."""
    settings = settings or FeatureSettings()
    layers: list[RepositoryLayer] = []
    if settings.cache_enabled:
        layers.append(
            functools.partial(
                CachingStateRepository, ttl_seconds=settings.cache_ttl_seconds, clock=clock
            )
        )
    if settings.log_state_changes:
        layers.append(
            functools.partial(
                LoggingStateRepository,
                template=settings.log_message_template or None,
                logger=logger,
            )
        )
    return compose(backend, *layers)


__all__ = ["build_state_repository"]
