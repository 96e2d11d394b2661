"""BatchRunner — sends batches one at a time, each under its own retry sequence."""

from collections.abc import Awaitable, Callable, Sequence

from job_relay.batching.domain.errors import BatchRunAbortedError
from job_relay.batching.domain.observer import BatchObserver
from job_relay.batching.domain.splitter import Batch
from job_relay.retry.application.executor import RetryExecutor
from job_relay.retry.domain.errors import RetryBudgetExhaustedError
from job_relay.retry.domain.policy import RetryPolicy

type SendBatch[T, R] = Callable[[Batch[T], int], Awaitable[R]]


class BatchRunner:
    """Processes batches strictly in input order, never concurrently.

    The first batch that exhausts its retry budget aborts the run: no later
    batch is attempted and BatchRunAbortedError carries the originating error.
    """

    def __init__(self, executor: RetryExecutor, observer: BatchObserver) -> None:
        self._executor = executor
        self._observer = observer

    async def run[T, R](
        self,
        batches: Sequence[Batch[T]],
        send: SendBatch[T, R],
        policy: RetryPolicy,
    ) -> list[R]:
        """Send every batch and return the per-batch results in order.

        ``send(batch, attempt_index)`` performs one attempt for one batch.

        Raises:
            BatchRunAbortedError: when a batch's retries are exhausted.
        """
        total = len(batches)
        self._observer.batch_run_started(
            total_batches=total, total_items=sum(len(b) for b in batches)
        )

        results: list[R] = []
        for index, batch in enumerate(batches):
            self._observer.batch_started(
                batch_index=index, total_batches=total, size=len(batch)
            )

            async def attempt(attempt_index: int, batch: Batch[T] = batch) -> R:
                return await send(batch, attempt_index)

            try:
                result = await self._executor.execute(
                    attempt, policy=policy, name=f"batch-{index + 1}/{total}"
                )
            except RetryBudgetExhaustedError as exc:
                self._observer.batch_failed(
                    batch_index=index, total_batches=total, reason=str(exc.last_error)
                )
                raise BatchRunAbortedError(
                    batch_index=index, total_batches=total, cause=exc.last_error
                ) from exc

            results.append(result)
            self._observer.batch_completed(batch_index=index, total_batches=total)

        self._observer.batch_run_completed(total_batches=total)
        return results
