"""RecordSource Protocol — structural interface for fetching store records."""

from typing import Protocol

from job_relay.config.domain.store import QueryWindow
from job_relay.records.domain.record import SourceRecord


class RecordSource(Protocol):
    """Returns records in store order; opens and releases its own connection."""

    async def fetch(self, window: QueryWindow) -> list[SourceRecord]: ...
