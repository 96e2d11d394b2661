"""Telemetry records emitted to a sink, tagged with the run's correlation tag."""

from pydantic import BaseModel, ConfigDict


class TrackedEvent(BaseModel, frozen=True):
    model_config = ConfigDict(frozen=True)

    name: str
    properties: dict[str, str] = {}
    correlation_tag: str


class TrackedRequest(BaseModel, frozen=True):
    """A timed outbound request; ``duration_ms``/``result_code`` are None when unknown."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    duration_ms: int | None
    result_code: int | None
    success: bool
    correlation_tag: str
