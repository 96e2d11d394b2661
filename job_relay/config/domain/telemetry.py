"""Telemetry configuration model."""

from pydantic import BaseModel, Field


class TelemetryConfig(BaseModel, frozen=True):
    """Telemetry is activated only when ``connection_string`` is set."""

    connection_string: str | None = None
    service_name: str = Field(default="job-relay", min_length=1)
