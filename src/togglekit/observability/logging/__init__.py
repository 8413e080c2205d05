"""Observability – structured logging ports and helpers."""
from togglekit.observability.logging.protocol import Logger
from togglekit.observability.logging.factory import JsonLoggerFactory
from togglekit.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
