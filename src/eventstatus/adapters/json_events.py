"""JSON file event repository adapter."""

import json
import logging
import math
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from eventstatus.core.events import Event

logger = logging.getLogger(__name__)


class EventDataError(ValueError):
    """Raised when stored event data cannot be parsed."""

    pass


class JsonEventRepository:
    """
    File-based event storage.

    Implements LastEventRepository protocol. Reads a JSON document of the form
    {"groups": {"<group_id>": [{"end_date": "...", "review_duration_in_hours": 1}]}}
    and picks the event with the latest end date. The file is re-read on
    every call.
    """

    def __init__(self, path: Path | str, tz: str = "UTC"):
        self.path = Path(path).expanduser()
        self.tz = ZoneInfo(tz)

    def _read_groups(self) -> dict[str, list]:
        """Read the group mapping from disk. Missing file = no groups."""
        if not self.path.exists():
            logger.debug(f"Events file {self.path} not found")
            return {}
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            raise EventDataError(f"Invalid JSON in {self.path}: {e}") from e
        if not isinstance(data, dict) or not isinstance(data.get("groups", {}), dict):
            raise EventDataError(f"Expected a 'groups' object in {self.path}")
        return data.get("groups", {})

    def _parse_datetime(self, value: str) -> datetime:
        """Parse an ISO-8601 timestamp, localizing naive values."""
        try:
            dt = datetime.fromisoformat(value)
        except (TypeError, ValueError) as e:
            raise EventDataError(f"Invalid end_date {value!r}") from e
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=self.tz)
        return dt

    def _parse_event(self, item: dict) -> Event:
        """Create an Event from a stored record."""
        if not isinstance(item, dict) or "end_date" not in item:
            raise EventDataError(f"Event record missing end_date: {item!r}")

        review = item.get("review_duration_in_hours")
        if review is not None:
            if (
                isinstance(review, bool)
                or not isinstance(review, (int, float))
                or not math.isfinite(review)
            ):
                raise EventDataError(f"Invalid review_duration_in_hours {review!r}")
            if review < 0:
                raise EventDataError(f"Negative review_duration_in_hours {review!r}")

        return Event(
            end_date=self._parse_datetime(item["end_date"]),
            review_duration_in_hours=review,
        )

    def load_all(self, group_id: str) -> list[Event]:
        """Load every stored event for a group."""
        items = self._read_groups().get(group_id) or []
        if not isinstance(items, list):
            raise EventDataError(f"Expected a list of events for group {group_id!r}")
        return [self._parse_event(item) for item in items]

    async def load_last_event(self, group_id: str) -> Event | None:
        """Load the last event for a group. Returns None if the group has none."""
        events = self.load_all(group_id)
        if not events:
            return None
        return max(events, key=lambda e: e.end_date)
