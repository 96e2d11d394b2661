"""Observer port for the records domain."""

from typing import Protocol


class RecordsObserver(Protocol):
    def records_query_started(self, database: str, collection: str, query: str) -> None: ...

    def records_query_completed(self, database: str, total_records: int) -> None: ...

    def records_query_failed(self, database: str, reason: str) -> None: ...
