"""In-memory event repository adapter."""

from dataclasses import replace
from zoneinfo import ZoneInfo

from eventstatus.core.events import Event


class InMemoryEventRepository:
    """
    In-memory event storage.

    Implements LastEventRepository protocol. The last event of a group is
    the one with the latest end date. Naive end dates are localized with `tz`.
    """

    def __init__(self, events: dict[str, list[Event]] | None = None, tz: str = "UTC"):
        self.tz = ZoneInfo(tz)
        self._events: dict[str, list[Event]] = {}
        for group_id, group_events in (events or {}).items():
            for event in group_events:
                self.add(group_id, event)

    def _localize(self, event: Event) -> Event:
        if event.end_date.tzinfo is None:
            return replace(event, end_date=event.end_date.replace(tzinfo=self.tz))
        return event

    def add(self, group_id: str, event: Event) -> None:
        """Record an event for a group."""
        self._events.setdefault(group_id, []).append(self._localize(event))

    async def load_last_event(self, group_id: str) -> Event | None:
        """Load the last event for a group. Returns None if the group has none."""
        group_events = self._events.get(group_id)
        if not group_events:
            return None
        return max(group_events, key=lambda e: e.end_date)
