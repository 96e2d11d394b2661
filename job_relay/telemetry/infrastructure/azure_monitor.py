"""Azure Monitor / Application Insights sink factory."""

from azure.monitor.opentelemetry.exporter import AzureMonitorTraceExporter

from job_relay.telemetry.infrastructure.otel_sink import OpenTelemetrySink


def to_connection_string(key: str) -> str:
    """Accept either a full connection string or a bare instrumentation key."""
    if "=" in key:
        return key
    return f"InstrumentationKey={key}"


class AzureMonitorSinkFactory:
    """Creates OpenTelemetrySinks that export to Application Insights.

    Satisfies the TelemetrySinkFactory protocol structurally.
    """

    def create(self, connection_string: str, service_name: str) -> OpenTelemetrySink:
        exporter = AzureMonitorTraceExporter(
            connection_string=to_connection_string(connection_string)
        )
        return OpenTelemetrySink(exporter=exporter, service_name=service_name)
