"""Structlog implementation of the TelemetryObserver port."""

import structlog


class StructlogTelemetryObserver:
    """Delegates telemetry events to structlog.

    Satisfies the TelemetryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def telemetry_activated(self, correlation_tag: str) -> None:
        self._log.info("telemetry.activated", correlation_tag=correlation_tag)

    def telemetry_activation_failed(self, reason: str) -> None:
        self._log.error("telemetry.activation_failed", reason=reason)

    def event_tracked(
        self, name: str, correlation_tag: str, properties: dict[str, str]
    ) -> None:
        self._log.info(
            "telemetry.event_tracked",
            name=name,
            correlation_tag=correlation_tag,
            properties=properties,
        )

    def request_tracked(
        self,
        name: str,
        url: str,
        correlation_tag: str,
        duration_ms: int | None,
        result_code: int | None,
        success: bool,
    ) -> None:
        self._log.info(
            "telemetry.request_tracked",
            name=name,
            url=url,
            correlation_tag=correlation_tag,
            duration_ms=duration_ms,
            result_code=result_code,
            success=success,
        )

    def emission_failed(self, kind: str, name: str, reason: str) -> None:
        self._log.warning("telemetry.emission_failed", kind=kind, name=name, reason=reason)
