"""MongoDB RecordSource — one client per fetch, closed on every exit path."""

import json
from typing import Any

from pydantic import ValidationError
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from job_relay.config.domain.store import QueryWindow, StoreConfig
from job_relay.records.domain.observer import RecordsObserver
from job_relay.records.domain.query import build_query
from job_relay.records.domain.record import SourceRecord
from job_relay.records.infrastructure.errors import RecordSourceError


class MongoRecordSource:
    """Reads records from a MongoDB collection.

    Satisfies the RecordSource protocol structurally.
    """

    def __init__(self, config: StoreConfig, observer: RecordsObserver) -> None:
        self._config = config
        self._observer = observer

    async def fetch(self, window: QueryWindow) -> list[SourceRecord]:
        """Return all records matching the window, in store order.

        Raises:
            RecordSourceError: if the URI is malformed, the query fails, or any
                document is malformed. All malformed documents are collected before raising.
        """
        query = build_query(window)
        self._observer.records_query_started(
            database=self._config.database,
            collection=self._config.collection,
            query=json.dumps(query, default=str),
        )

        client: AsyncMongoClient[dict[str, Any]] | None = None
        try:
            # A malformed URI raises here, before any connection is made.
            client = AsyncMongoClient(self._config.uri)
            collection = client[self._config.database][self._config.collection]
            documents = await collection.find(query).to_list()
        except (PyMongoError, ValueError) as exc:
            reason = str(exc)
            self._observer.records_query_failed(
                database=self._config.database, reason=reason
            )
            raise RecordSourceError(reason=reason) from exc
        finally:
            if client is not None:
                await client.close()

        records, errors = parse_documents(documents)
        if errors:
            reason = "; ".join(errors)
            self._observer.records_query_failed(
                database=self._config.database, reason=reason
            )
            raise RecordSourceError(reason=reason)

        self._observer.records_query_completed(
            database=self._config.database, total_records=len(records)
        )
        return records


def parse_documents(
    documents: list[dict[str, Any]],
) -> tuple[list[SourceRecord], list[str]]:
    """Validate each raw document, collecting errors without aborting early."""
    records: list[SourceRecord] = []
    errors: list[str] = []
    for index, document in enumerate(documents):
        try:
            records.append(SourceRecord.model_validate(document))
        except ValidationError as exc:
            ident = document.get("documentNumber", document.get("_id", index))
            errors.append(f"document {ident}: {exc.error_count()} invalid field(s)")
    return records, errors
