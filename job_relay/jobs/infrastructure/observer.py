"""StructlogJobObserver — production observer that delegates to structlog."""

import structlog


class StructlogJobObserver:
    """Logs job lifecycle events to structlog, one line per step.

    Does NOT inherit from JobObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def job_started(self, job: str, run_id: str) -> None:
        self._log.info(f"{job}.started", run_id=run_id)

    def job_running_late(self, job: str, run_id: str) -> None:
        self._log.warning(f"{job}.running_late", run_id=run_id)

    def job_configured(self, job: str, run_id: str, settings: dict[str, str]) -> None:
        self._log.info(f"{job}.config", run_id=run_id, **settings)

    def job_progress(self, job: str, run_id: str, step: str, detail: dict[str, str]) -> None:
        self._log.info(f"{job}.{step}", run_id=run_id, **detail)

    def job_succeeded(
        self, job: str, run_id: str, attempts: int, elapsed_seconds: float
    ) -> None:
        self._log.info(
            f"{job}.succeeded",
            run_id=run_id,
            attempts=attempts,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def job_failed(
        self,
        job: str,
        run_id: str,
        attempts: int,
        reason: str,
        elapsed_seconds: float,
    ) -> None:
        self._log.error(
            f"{job}.failed",
            run_id=run_id,
            attempts=attempts,
            reason=reason,
            elapsed_seconds=round(elapsed_seconds, 2),
        )
