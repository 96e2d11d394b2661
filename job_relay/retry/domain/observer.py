"""Observer port for the retry domain — defines events in domain language."""

from typing import Protocol


class RetryObserver(Protocol):
    """Observer port emitting one event per attempt lifecycle step.

    Implementations may log to structlog or record for tests.
    """

    def attempt_started(
        self, operation: str, attempt: int, max_attempts: int
    ) -> None: ...

    def attempt_succeeded(self, operation: str, attempt: int) -> None: ...

    def attempt_failed(
        self,
        operation: str,
        attempt: int,
        reason: str,
        duration_ms: int | None,
    ) -> None: ...

    def retry_scheduled(self, operation: str, attempt: int, delay_ms: int) -> None: ...

    def retries_exhausted(self, operation: str, attempts: int, reason: str) -> None: ...
