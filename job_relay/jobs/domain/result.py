"""JobResult value object — the terminal outcome reported to the host."""

from pydantic import BaseModel, ConfigDict, Field


class JobResult(BaseModel, frozen=True):
    model_config = ConfigDict(frozen=True)

    job: str
    run_id: str
    succeeded: bool
    attempts: int = Field(ge=0)
    reason: str | None = None
