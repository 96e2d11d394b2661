"""Observer port for the jobs domain — one event per lifecycle step of a run."""

from typing import Protocol


class JobObserver(Protocol):
    """Observer port emitting structured events during a job run.

    Implementations may log to structlog or record for tests.
    """

    def job_started(self, job: str, run_id: str) -> None: ...

    def job_running_late(self, job: str, run_id: str) -> None: ...

    def job_configured(self, job: str, run_id: str, settings: dict[str, str]) -> None: ...

    def job_progress(self, job: str, run_id: str, step: str, detail: dict[str, str]) -> None: ...

    def job_succeeded(
        self, job: str, run_id: str, attempts: int, elapsed_seconds: float
    ) -> None: ...

    def job_failed(
        self,
        job: str,
        run_id: str,
        attempts: int,
        reason: str,
        elapsed_seconds: float,
    ) -> None: ...
