"""Use-case layer between the CLI and the functional core.

CheckLastEventStatus loads a group's last event through the repository port,
reads the clock, and hands both to the pure classifier.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from .adapters.json_events import JsonEventRepository
from .config import Config
from .core.events import EventStatus, classify_status
from .ports.last_event_repo import LastEventRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class CheckLastEventStatus:
    """Derive the status of a group's last event."""

    def __init__(self, repository: LastEventRepository, clock: Clock = utc_now):
        self.repository = repository
        self.clock = clock

    async def execute(self, group_id: str) -> EventStatus:
        """
        Classify the last event of `group_id`.

        Makes exactly one repository call. Repository errors propagate
        unchanged. The clock is read after the event is loaded, on every call.
        """
        event = await self.repository.load_last_event(group_id)
        status = classify_status(event, self.clock())
        logger.debug(f"Group {group_id}: last event {event} -> {status.value}")
        return status


def get_repository(config: Config) -> JsonEventRepository:
    """Resolve the events repository from config."""
    return JsonEventRepository(config.events_path, tz=config.timezone)
