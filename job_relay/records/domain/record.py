"""Store records and the work items sent to the remote endpoint."""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RecordStatus(StrEnum):
    COMPLETE = "COMPLETE"
    VOID = "VOID"


class SourceRecord(BaseModel, frozen=True):
    """One record as read from the document store."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    document_number: str = Field(alias="documentNumber", min_length=1)
    status: RecordStatus
    created_at: datetime = Field(alias="createdAt")


class WorkItem(BaseModel, frozen=True):
    """Payload entry for one record; serialized with the remote API's field names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(serialization_alias="certNumber")
    status: RecordStatus
    timestamp: datetime

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def to_work_item(record: SourceRecord, now: datetime) -> WorkItem:
    """Map a record; COMPLETE keeps its creation time, VOID is stamped ``now``."""
    timestamp = record.created_at if record.status is RecordStatus.COMPLETE else now
    return WorkItem(id=record.document_number, status=record.status, timestamp=timestamp)
