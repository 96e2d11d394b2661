"""JobRun — the lifecycle shared by every job: start, configure, terminate once."""

import time

from pydantic import BaseModel

from job_relay.config.domain.telemetry import TelemetryConfig
from job_relay.jobs.domain.observer import JobObserver
from job_relay.jobs.domain.result import JobResult
from job_relay.jobs.domain.settings import describe_config
from job_relay.jobs.domain.trigger import TimerInfo
from job_relay.telemetry.application.reporter import TelemetryReporter

CANCELLED = "run cancelled"


class JobRun:
    """Ephemeral state of one triggered run.

    Every step is logged through the observer and mirrored to telemetry. The
    terminal methods may be called once. ``close`` flushes telemetry and must run
    on every exit path, including cancellation.
    """

    def __init__(
        self,
        job: str,
        run_id: str,
        observer: JobObserver,
        reporter: TelemetryReporter,
    ) -> None:
        self.job = job
        self.run_id = run_id
        self.attempts = 0
        self._observer = observer
        self._reporter = reporter
        self._started_at = time.monotonic()
        self._finished = False

    def begin(
        self,
        trigger: TimerInfo,
        config: BaseModel,
        telemetry: TelemetryConfig,
    ) -> None:
        self._observer.job_started(job=self.job, run_id=self.run_id)
        if trigger.past_due:
            self._observer.job_running_late(job=self.job, run_id=self.run_id)

        if telemetry.connection_string:
            self._reporter.init(
                connection_string=telemetry.connection_string,
                correlation_id=self.run_id,
            )
        self._reporter.track_event(f"{self.job}.started")

        self._observer.job_configured(
            job=self.job, run_id=self.run_id, settings=describe_config(config)
        )

    def step(self, name: str, **detail: object) -> None:
        """Log one intermediate step and track it as a telemetry event."""
        as_text = {key: str(value) for key, value in detail.items()}
        self._observer.job_progress(
            job=self.job, run_id=self.run_id, step=name, detail=as_text
        )
        self._reporter.track_event(f"{self.job}.{name}", as_text)

    def record_attempt(self) -> None:
        self.attempts += 1

    def succeed(self) -> JobResult:
        self._finish()
        self._reporter.track_event(f"{self.job}.succeeded")
        self._observer.job_succeeded(
            job=self.job,
            run_id=self.run_id,
            attempts=self.attempts,
            elapsed_seconds=self._elapsed(),
        )
        return JobResult(
            job=self.job, run_id=self.run_id, succeeded=True, attempts=self.attempts
        )

    def fail(self, reason: str) -> JobResult:
        self._finish()
        self._reporter.track_event(f"{self.job}.failed", {"reason": reason})
        self._observer.job_failed(
            job=self.job,
            run_id=self.run_id,
            attempts=self.attempts,
            reason=reason,
            elapsed_seconds=self._elapsed(),
        )
        return JobResult(
            job=self.job,
            run_id=self.run_id,
            succeeded=False,
            attempts=self.attempts,
            reason=reason,
        )

    def close(self) -> None:
        self._reporter.close()

    def _finish(self) -> None:
        if self._finished:
            raise RuntimeError(f"{self.job} run {self.run_id} already finished")
        self._finished = True

    def _elapsed(self) -> float:
        return time.monotonic() - self._started_at
