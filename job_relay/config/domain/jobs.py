"""Per-job configuration aggregates, with defaults for every field."""

from pydantic import BaseModel, Field

from job_relay.config.domain.endpoint import EndpointConfig
from job_relay.config.domain.retry import RetryConfig
from job_relay.config.domain.store import QueryWindow, StoreConfig
from job_relay.config.domain.telemetry import TelemetryConfig


class LandingsJobConfig(BaseModel, frozen=True):
    """Triggers the remote landings job with a single POST.

    The default budget is one initial call plus four retries.
    """

    endpoint: EndpointConfig = EndpointConfig(
        url="http://localhost:9000/v1/jobs/landings",
        method="POST",
        timeout_ms=600_000,
    )
    retry: RetryConfig = RetryConfig(
        max_attempts=5,
        base_delay_ms=300_000,
        strategy="stepped_linear",
    )
    telemetry: TelemetryConfig = TelemetryConfig()


class ReconciliationJobConfig(BaseModel, frozen=True):
    """Sends store records to the remote API in fixed-size batches."""

    endpoint: EndpointConfig = EndpointConfig(
        url="http://localhost:9001",
        path="/api/certificates",
        method="PUT",
        api_key="00000000-0000-1000-A000-000000000000",
    )
    retry: RetryConfig = RetryConfig(
        max_attempts=4,
        base_delay_ms=1_000,
        strategy="exponential",
    )
    telemetry: TelemetryConfig = TelemetryConfig()
    store: StoreConfig = StoreConfig()
    query: QueryWindow = QueryWindow()
    batch_size: int = Field(default=1000, ge=1)
