"""OpenTelemetry-backed TelemetrySink.

Events become instant INTERNAL spans and request records become SERVER spans
covering the measured duration. Every span emitted for one correlation tag
shares a trace id derived from that tag, so a run can be followed end to end.
"""

import hashlib
import time

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter
from opentelemetry.trace import SpanKind, Status, StatusCode
from opentelemetry.util.types import AttributeValue

from job_relay.telemetry.domain.records import TrackedEvent, TrackedRequest

_NS_PER_MS = 1_000_000


def derive_trace_id(correlation_tag: str) -> int:
    """Derive a stable 128-bit trace id from a correlation tag."""
    return int.from_bytes(hashlib.sha256(correlation_tag.encode()).digest()[:16], "big")


def _derive_parent_span_id(correlation_tag: str) -> int:
    digest = hashlib.sha256(f"parent:{correlation_tag}".encode()).digest()[:8]
    return int.from_bytes(digest, "big")


class OpenTelemetrySink:
    """Satisfies the TelemetrySink protocol using the OpenTelemetry SDK.

    Owns its TracerProvider so it never touches the global provider. Spans are
    queued by a BatchSpanProcessor and exported on a background thread, so
    tracking never blocks on the exporter; ``flush`` drains the queue.
    """

    def __init__(self, exporter: SpanExporter, service_name: str) -> None:
        self._provider = TracerProvider(
            resource=Resource.create({SERVICE_NAME: service_name})
        )
        self._provider.add_span_processor(BatchSpanProcessor(exporter))
        self._tracer = self._provider.get_tracer("job_relay.telemetry")

    def track_event(self, event: TrackedEvent) -> None:
        attributes: dict[str, AttributeValue] = {
            "job_relay.kind": "event",
            "job_relay.correlation_tag": event.correlation_tag,
        }
        for key, value in event.properties.items():
            attributes[f"job_relay.property.{key}"] = value

        now = time.time_ns()
        span = self._tracer.start_span(
            event.name,
            context=_parent_context(event.correlation_tag),
            kind=SpanKind.INTERNAL,
            attributes=attributes,
            start_time=now,
        )
        span.end(end_time=now)

    def track_request(self, request: TrackedRequest) -> None:
        attributes: dict[str, AttributeValue] = {
            "job_relay.kind": "request",
            "job_relay.correlation_tag": request.correlation_tag,
            "url.full": request.url,
        }
        if request.result_code is not None:
            attributes["http.response.status_code"] = request.result_code

        end = time.time_ns()
        start = end - (request.duration_ms or 0) * _NS_PER_MS
        span = self._tracer.start_span(
            request.name,
            context=_parent_context(request.correlation_tag),
            kind=SpanKind.SERVER,
            attributes=attributes,
            start_time=start,
        )
        span.set_status(Status(StatusCode.OK if request.success else StatusCode.ERROR))
        span.end(end_time=end)

    def flush(self) -> None:
        self._provider.force_flush()

    def shutdown(self) -> None:
        self._provider.shutdown()


def _parent_context(correlation_tag: str) -> Context:
    parent = trace.NonRecordingSpan(
        trace.SpanContext(
            trace_id=derive_trace_id(correlation_tag),
            span_id=_derive_parent_span_id(correlation_tag),
            is_remote=True,
            trace_flags=trace.TraceFlags(trace.TraceFlags.SAMPLED),
        )
    )
    return trace.set_span_in_context(parent)
