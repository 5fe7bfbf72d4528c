"""Last event repository interface."""

from typing import Protocol

from eventstatus.core.events import Event


class LastEventRepository(Protocol):
    """Interface for loading a group's most recent event from any backend."""

    async def load_last_event(self, group_id: str) -> Event | None:
        """Load the last event for a group. Returns None if the group has none."""
        ...
