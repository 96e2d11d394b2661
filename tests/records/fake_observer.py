"""Fake RecordsObserver for use in tests — records events without mocking."""


class FakeRecordsObserver:
    def __init__(self) -> None:
        self.started: list[dict[str, str]] = []
        self.completed: list[int] = []
        self.failed: list[str] = []

    def records_query_started(self, database: str, collection: str, query: str) -> None:
        self.started.append({"database": database, "collection": collection, "query": query})

    def records_query_completed(self, database: str, total_records: int) -> None:
        self.completed.append(total_records)

    def records_query_failed(self, database: str, reason: str) -> None:
        self.failed.append(reason)
