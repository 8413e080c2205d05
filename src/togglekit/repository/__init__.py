"""Repository – state repository port, reference backend and decorators."""
from togglekit.repository.port import StateRepository
from togglekit.repository.delegating import DelegatingStateRepository
from togglekit.repository.in_memory import InMemoryStateRepository
from togglekit.repository.logging_repository import LoggingStateRepository
from togglekit.repository.caching_repository import CachingStateRepository
from togglekit.repository.compose import RepositoryLayer, compose

__all__ = [
    "CachingStateRepository",
    "DelegatingStateRepository",
    "InMemoryStateRepository",
    "LoggingStateRepository",
    "RepositoryLayer",
    "StateRepository",
    "compose",
]
