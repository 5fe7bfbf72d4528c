"""Ports - interfaces/protocols for external dependencies."""

from .last_event_repo import LastEventRepository

__all__ = [
    "LastEventRepository",
]
