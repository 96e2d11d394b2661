"""AttemptRecord value object — the timed outcome of one remote-call attempt."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class AttemptOutcome(StrEnum):
    SUCCESS = "success"
    FAILURE = "failure"


class AttemptRecord(BaseModel, frozen=True):
    """Immutable record of a single attempt, finalized when the call completes."""

    model_config = ConfigDict(frozen=True)

    attempt_index: int = Field(ge=1)
    started_at: datetime
    outcome: AttemptOutcome
    duration_ms: int = Field(ge=0)
    error: str | None = None
