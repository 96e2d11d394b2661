"""Structlog implementation of the RecordsObserver port."""

import structlog


class StructlogRecordsObserver:
    """Delegates records events to structlog.

    Satisfies the RecordsObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def records_query_started(self, database: str, collection: str, query: str) -> None:
        self._log.info(
            "records.query_started",
            database=database,
            collection=collection,
            query=query,
        )

    def records_query_completed(self, database: str, total_records: int) -> None:
        self._log.info(
            "records.query_completed", database=database, total_records=total_records
        )

    def records_query_failed(self, database: str, reason: str) -> None:
        self._log.error("records.query_failed", database=database, reason=reason)
