"""Repository – compose decorators around a backend."""
from __future__ import annotations

from typing import Callable

from togglekit.repository.port import StateRepository

RepositoryLayer = Callable[[StateRepository], StateRepository]


def compose(backend: StateRepository, *layers: RepositoryLayer) -> StateRepository:
    """Wrap *backend* in *layers*, first layer innermost.

    Each layer receives the repository built so far and returns its wrapper::

        repository = compose(
            InMemoryStateRepository(),
            CachingStateRepository,
            functools.partial(LoggingStateRepository, template="Flag {1} is now {2}"),
        )
        # LoggingStateRepository -> CachingStateRepository -> InMemoryStateRepository
    """
    repository = backend
    for layer in layers:
        repository = layer(repository)
    return repository


__all__ = ["RepositoryLayer", "compose"]
