"""Functional core - pure business logic with no I/O."""

from .events import Event, EventStatus, classify_status, review_end

__all__ = [
    "Event",
    "EventStatus",
    "classify_status",
    "review_end",
]
