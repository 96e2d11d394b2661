"""TelemetryReporter — per-run telemetry context shared by every call site."""

from collections.abc import Mapping

from job_relay.core.errors import JobRelayError
from job_relay.remote.domain.response import RemoteResponse
from job_relay.remote.domain.timing import Timed
from job_relay.remote.infrastructure.errors import TransientCallError
from job_relay.telemetry.domain.observer import TelemetryObserver
from job_relay.telemetry.domain.records import TrackedEvent, TrackedRequest
from job_relay.telemetry.domain.sink import TelemetrySink, TelemetrySinkFactory

_SUCCESS_STATUS = 200


class TelemetryReporter:
    """Records events and timed requests against a lazily activated sink.

    One instance is created per job run and passed to everything that reports.
    Until ``init`` succeeds every tracking call is a silent no-op. Sink errors
    are reported to the observer and never reach the caller.
    """

    def __init__(
        self,
        sink_factory: TelemetrySinkFactory,
        observer: TelemetryObserver,
        service_name: str = "job-relay",
    ) -> None:
        self._sink_factory = sink_factory
        self._observer = observer
        self._service_name = service_name
        self._sink: TelemetrySink | None = None
        self._correlation_tag: str | None = None

    @property
    def active(self) -> bool:
        return self._sink is not None

    @property
    def correlation_tag(self) -> str | None:
        return self._correlation_tag

    def init(self, connection_string: str, correlation_id: str) -> None:
        """Activate the reporter; repeated calls after activation are ignored."""
        if self._sink is not None:
            return

        try:
            sink = self._sink_factory.create(
                connection_string=connection_string,
                service_name=self._service_name,
            )
        except Exception as exc:  # noqa: BLE001
            self._observer.telemetry_activation_failed(reason=str(exc))
            return

        self._sink = sink
        self._correlation_tag = correlation_id
        self._observer.telemetry_activated(correlation_tag=correlation_id)

    def track_event(self, name: str, properties: Mapping[str, object] | None = None) -> None:
        if self._sink is None or self._correlation_tag is None:
            return

        event = TrackedEvent(
            name=name,
            properties={k: str(v) for k, v in (properties or {}).items()},
            correlation_tag=self._correlation_tag,
        )
        try:
            self._sink.track_event(event)
        except Exception as exc:  # noqa: BLE001
            self._observer.emission_failed(kind="event", name=name, reason=str(exc))
            return

        self._observer.event_tracked(
            name=event.name,
            correlation_tag=event.correlation_tag,
            properties=event.properties,
        )

    def track_request(
        self,
        name: str,
        target: str,
        outcome: Timed[RemoteResponse] | JobRelayError,
    ) -> None:
        """Record one request from either a timed response or the error it raised."""
        if self._sink is None or self._correlation_tag is None:
            return

        duration_ms, result_code = _derive(outcome)
        request = TrackedRequest(
            name=name,
            url=target,
            duration_ms=duration_ms,
            result_code=result_code,
            success=result_code == _SUCCESS_STATUS,
            correlation_tag=self._correlation_tag,
        )
        try:
            self._sink.track_request(request)
        except Exception as exc:  # noqa: BLE001
            self._observer.emission_failed(kind="request", name=name, reason=str(exc))
            return

        self._observer.request_tracked(
            name=request.name,
            url=request.url,
            correlation_tag=request.correlation_tag,
            duration_ms=request.duration_ms,
            result_code=request.result_code,
            success=request.success,
        )

    def close(self) -> None:
        """Flush and release the sink; the reporter becomes inactive."""
        if self._sink is None:
            return

        sink, self._sink = self._sink, None
        try:
            sink.flush()
            sink.shutdown()
        except Exception as exc:  # noqa: BLE001
            self._observer.emission_failed(kind="flush", name="close", reason=str(exc))


def _derive(outcome: Timed[RemoteResponse] | JobRelayError) -> tuple[int | None, int | None]:
    if isinstance(outcome, Timed):
        return outcome.duration_ms, outcome.value.status_code

    duration_ms = outcome.attempt.duration_ms if outcome.attempt else None
    result_code = outcome.status_code if isinstance(outcome, TransientCallError) else None
    return duration_ms, result_code
