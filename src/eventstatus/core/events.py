"""Pure event status logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


class EventStatus(Enum):
    """Lifecycle status of a group's last event."""

    ACTIVE = "active"
    IN_REVIEW = "in review"
    DONE = "done"


@dataclass(frozen=True)
class Event:
    """A time-bounded event with an optional trailing review window."""

    end_date: datetime
    review_duration_in_hours: float | None = None

    @property
    def review_window(self) -> timedelta:
        """Length of the review window (zero when no duration is set)."""
        return timedelta(hours=self.review_duration_in_hours or 0)


def review_end(event: Event) -> datetime:
    """Instant at which the review window closes."""
    return event.end_date + event.review_window


def classify_status(event: Event | None, now: datetime) -> EventStatus:
    """
    Classify an event relative to `now`.

    Pure function - no I/O. Both boundaries are inclusive: an event is
    still ACTIVE at exactly `end_date` and still IN_REVIEW at exactly
    `end_date + review_duration_in_hours`.

    Args:
        event: The group's last event, or None if the group has none
        now: Current instant, comparable with `event.end_date`

    Returns:
        The derived EventStatus
    """
    if event is None:
        return EventStatus.DONE

    if now <= event.end_date:
        return EventStatus.ACTIVE

    try:
        window_end = review_end(event)
    except OverflowError:
        # Window ends past any representable instant
        return EventStatus.IN_REVIEW

    if now <= window_end:
        return EventStatus.IN_REVIEW

    return EventStatus.DONE
