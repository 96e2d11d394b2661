"""RetryExecutor — drives a fallible async operation under a RetryPolicy."""

import asyncio
from collections.abc import Awaitable, Callable

from job_relay.core.errors import JobRelayError
from job_relay.retry.domain.errors import RetryBudgetExhaustedError
from job_relay.retry.domain.observer import RetryObserver
from job_relay.retry.domain.policy import RetryPolicy

type Operation[T] = Callable[[int], Awaitable[T]]


class RetryExecutor:
    """Invokes an operation until it succeeds or the attempt budget is spent.

    Each ``execute`` call is independent: there is no jitter, no circuit
    breaking and no memory of previous sequences. Attempts are strictly
    sequential and the only suspension points are the operation itself and the
    delay between attempts.
    """

    def __init__(self, observer: RetryObserver) -> None:
        self._observer = observer

    async def execute[T](
        self,
        operation: Operation[T],
        policy: RetryPolicy,
        name: str,
    ) -> T:
        """Run ``operation(attempt_index)`` until success and return its value.

        Only errors flagged ``retriable`` are retried; any other JobRelayError
        propagates immediately.

        Raises:
            RetryBudgetExhaustedError: when the final permitted attempt fails.
        """
        max_attempts = policy.attempt_budget

        for attempt in range(1, max_attempts + 1):
            self._observer.attempt_started(
                operation=name, attempt=attempt, max_attempts=max_attempts
            )
            try:
                result = await operation(attempt)
            except JobRelayError as exc:
                self._observer.attempt_failed(
                    operation=name,
                    attempt=attempt,
                    reason=str(exc),
                    duration_ms=exc.attempt.duration_ms if exc.attempt else None,
                )
                if not exc.retriable:
                    raise
                if attempt == max_attempts:
                    self._observer.retries_exhausted(
                        operation=name, attempts=attempt, reason=str(exc)
                    )
                    raise RetryBudgetExhaustedError(
                        operation=name, attempts=attempt, last_error=exc
                    ) from exc

                delay_ms = policy.delay_ms(attempt)
                self._observer.retry_scheduled(
                    operation=name, attempt=attempt, delay_ms=delay_ms
                )
                await asyncio.sleep(delay_ms / 1000)
                continue

            self._observer.attempt_succeeded(operation=name, attempt=attempt)
            return result

        raise AssertionError("unreachable: loop always returns or raises")
