"""TrackedCall — one timed remote attempt whose outcome is always reported."""

from typing import Any

from job_relay.core.errors import JobRelayError
from job_relay.jobs.application.run import JobRun
from job_relay.remote.domain.endpoint import RemoteEndpoint
from job_relay.remote.domain.response import RemoteResponse
from job_relay.remote.domain.timing import CallTimer, Timed
from job_relay.telemetry.application.reporter import TelemetryReporter


class TrackedCall:
    """Sends a payload through CallTimer and tracks the request on both paths.

    The request record is emitted before the outcome is handed back to the
    retry loop, so it always precedes any delay or next attempt.
    """

    def __init__(
        self,
        endpoint: RemoteEndpoint,
        timer: CallTimer,
        reporter: TelemetryReporter,
        run: JobRun,
    ) -> None:
        self._endpoint = endpoint
        self._timer = timer
        self._reporter = reporter
        self._run = run

    async def send(self, payload: Any | None, attempt: int) -> Timed[RemoteResponse]:
        self._run.record_attempt()
        try:
            timed = await self._timer.measure(
                lambda: self._endpoint.send(payload), attempt_index=attempt
            )
        except JobRelayError as exc:
            self._reporter.track_request(
                self._endpoint.request_name, self._endpoint.target, exc
            )
            raise

        self._reporter.track_request(
            self._endpoint.request_name, self._endpoint.target, timed
        )
        return timed
