"""Adapters - I/O implementations of ports."""

from .json_events import JsonEventRepository, EventDataError
from .memory_events import InMemoryEventRepository

__all__ = [
    "JsonEventRepository",
    "EventDataError",
    "InMemoryEventRepository",
]
