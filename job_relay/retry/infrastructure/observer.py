"""Structlog implementation of the RetryObserver port."""

import structlog


class StructlogRetryObserver:
    """Delegates retry domain events to structlog.

    Satisfies the RetryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def attempt_started(self, operation: str, attempt: int, max_attempts: int) -> None:
        self._log.info(
            "retry.attempt_started",
            operation=operation,
            attempt=attempt,
            max_attempts=max_attempts,
        )

    def attempt_succeeded(self, operation: str, attempt: int) -> None:
        self._log.info("retry.attempt_succeeded", operation=operation, attempt=attempt)

    def attempt_failed(
        self,
        operation: str,
        attempt: int,
        reason: str,
        duration_ms: int | None,
    ) -> None:
        self._log.error(
            "retry.attempt_failed",
            operation=operation,
            attempt=attempt,
            reason=reason,
            duration_ms=duration_ms,
        )

    def retry_scheduled(self, operation: str, attempt: int, delay_ms: int) -> None:
        self._log.warning(
            "retry.scheduled",
            operation=operation,
            attempt=attempt,
            delay_ms=delay_ms,
        )

    def retries_exhausted(self, operation: str, attempts: int, reason: str) -> None:
        self._log.error(
            "retry.exhausted",
            operation=operation,
            attempts=attempts,
            reason=reason,
        )
