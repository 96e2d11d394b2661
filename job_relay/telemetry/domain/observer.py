"""Observer port for the telemetry domain."""

from typing import Protocol


class TelemetryObserver(Protocol):
    def telemetry_activated(self, correlation_tag: str) -> None: ...

    def telemetry_activation_failed(self, reason: str) -> None: ...

    def event_tracked(
        self, name: str, correlation_tag: str, properties: dict[str, str]
    ) -> None: ...

    def request_tracked(
        self,
        name: str,
        url: str,
        correlation_tag: str,
        duration_ms: int | None,
        result_code: int | None,
        success: bool,
    ) -> None: ...

    def emission_failed(self, kind: str, name: str, reason: str) -> None: ...
