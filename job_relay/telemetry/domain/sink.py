"""TelemetrySink and TelemetrySinkFactory Protocols."""

from typing import Protocol

from job_relay.telemetry.domain.records import TrackedEvent, TrackedRequest


class TelemetrySink(Protocol):
    """Fire-and-forget destination for events and request records."""

    def track_event(self, event: TrackedEvent) -> None: ...

    def track_request(self, request: TrackedRequest) -> None: ...

    def flush(self) -> None: ...

    def shutdown(self) -> None: ...


class TelemetrySinkFactory(Protocol):
    def create(self, connection_string: str, service_name: str) -> TelemetrySink: ...
