"""Tests for the OpenTelemetry sink and the Azure Monitor factory helpers."""

import time
from collections.abc import Sequence

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import SpanKind, StatusCode

from job_relay.telemetry.domain.records import TrackedEvent, TrackedRequest
from job_relay.telemetry.infrastructure.azure_monitor import to_connection_string
from job_relay.telemetry.infrastructure.otel_sink import OpenTelemetrySink, derive_trace_id


def _sink() -> tuple[OpenTelemetrySink, InMemorySpanExporter]:
    exporter = InMemorySpanExporter()
    return OpenTelemetrySink(exporter=exporter, service_name="job-relay-test"), exporter


def _request(success: bool, duration_ms: int | None = 250) -> TrackedRequest:
    return TrackedRequest(
        name="PUT /api/certificates",
        url="http://api.test",
        duration_ms=duration_ms,
        result_code=200 if success else 503,
        success=success,
        correlation_tag="run-1",
    )


class TestDeriveTraceId:
    """Trace ids are a stable function of the correlation tag."""

    def test_same_tag_same_id(self) -> None:
        assert derive_trace_id("run-1") == derive_trace_id("run-1")

    def test_different_tags_differ(self) -> None:
        assert derive_trace_id("run-1") != derive_trace_id("run-2")

    def test_fits_in_128_bits(self) -> None:
        assert 0 < derive_trace_id("run-1") < 2**128


class TestEvents:
    """Events become instant INTERNAL spans."""

    def test_event_span_attributes(self) -> None:
        sink, exporter = _sink()

        sink.track_event(
            TrackedEvent(
                name="reconciliation.records_loaded",
                properties={"count": "3"},
                correlation_tag="run-1",
            )
        )

        sink.flush()
        (span,) = exporter.get_finished_spans()
        assert span.name == "reconciliation.records_loaded"
        assert span.kind is SpanKind.INTERNAL
        assert span.attributes is not None
        assert span.attributes["job_relay.kind"] == "event"
        assert span.attributes["job_relay.correlation_tag"] == "run-1"
        assert span.attributes["job_relay.property.count"] == "3"
        assert span.start_time == span.end_time

    def test_service_name_resource(self) -> None:
        sink, exporter = _sink()

        sink.track_event(TrackedEvent(name="e", correlation_tag="run-1"))

        sink.flush()
        (span,) = exporter.get_finished_spans()
        assert span.resource.attributes["service.name"] == "job-relay-test"


class TestRequests:
    """Requests become SERVER spans spanning the measured duration."""

    def test_successful_request_span(self) -> None:
        sink, exporter = _sink()

        sink.track_request(_request(success=True, duration_ms=250))

        sink.flush()
        (span,) = exporter.get_finished_spans()
        assert span.kind is SpanKind.SERVER
        assert span.status.status_code is StatusCode.OK
        assert span.attributes is not None
        assert span.attributes["url.full"] == "http://api.test"
        assert span.attributes["http.response.status_code"] == 200
        assert span.start_time is not None and span.end_time is not None
        assert span.end_time - span.start_time == 250 * 1_000_000

    def test_failed_request_span(self) -> None:
        sink, exporter = _sink()

        sink.track_request(_request(success=False))

        sink.flush()
        (span,) = exporter.get_finished_spans()
        assert span.status.status_code is StatusCode.ERROR

    def test_unknown_duration_is_instant(self) -> None:
        sink, exporter = _sink()

        sink.track_request(_request(success=False, duration_ms=None))

        sink.flush()
        (span,) = exporter.get_finished_spans()
        assert span.start_time == span.end_time


class TestCorrelation:
    """All spans for one tag share a trace id derived from it."""

    def test_events_and_requests_share_trace(self) -> None:
        sink, exporter = _sink()

        sink.track_event(TrackedEvent(name="landings.started", correlation_tag="run-1"))
        sink.track_request(_request(success=True))
        sink.track_event(TrackedEvent(name="other", correlation_tag="run-2"))

        sink.flush()
        spans = exporter.get_finished_spans()
        assert spans[0].context.trace_id == spans[1].context.trace_id
        assert spans[0].context.trace_id == derive_trace_id("run-1")
        assert spans[2].context.trace_id == derive_trace_id("run-2")

    def test_shutdown_stops_export(self) -> None:
        sink, exporter = _sink()

        sink.flush()
        sink.shutdown()
        sink.track_event(TrackedEvent(name="late", correlation_tag="run-1"))

        assert exporter.get_finished_spans() == ()



class _SlowExporter(SpanExporter):
    """Blocks for ``delay`` seconds on every export, like a stalled ingestion endpoint."""

    def __init__(self, delay: float) -> None:
        self._delay = delay
        self.exported: list[ReadableSpan] = []

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        time.sleep(self._delay)
        self.exported.extend(spans)
        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        pass


class TestBuffering:
    """Tracking queues spans; the exporter runs off the caller's thread."""

    def test_slow_exporter_does_not_block_tracking(self) -> None:
        exporter = _SlowExporter(delay=0.5)
        sink = OpenTelemetrySink(exporter=exporter, service_name="job-relay-test")

        started = time.monotonic()
        sink.track_event(TrackedEvent(name="landings.started", correlation_tag="run-1"))
        sink.track_request(_request(success=True))
        elapsed = time.monotonic() - started

        assert elapsed < 0.25
        sink.flush()
        assert [span.name for span in exporter.exported] == [
            "landings.started",
            "PUT /api/certificates",
        ]
        sink.shutdown()

    def test_spans_wait_for_flush(self) -> None:
        sink, exporter = _sink()

        sink.track_event(TrackedEvent(name="queued", correlation_tag="run-1"))

        assert exporter.get_finished_spans() == ()
        sink.flush()
        assert [span.name for span in exporter.get_finished_spans()] == ["queued"]


class TestToConnectionString:
    """Bare instrumentation keys are promoted to connection strings."""

    def test_bare_key(self) -> None:
        assert (
            to_connection_string("00000000-0000-0000-0000-000000000000")
            == "InstrumentationKey=00000000-0000-0000-0000-000000000000"
        )

    def test_full_connection_string_unchanged(self) -> None:
        value = "InstrumentationKey=abc;IngestionEndpoint=https://example.test/"
        assert to_connection_string(value) == value
