"""Structlog implementation of the BatchObserver port."""

import structlog


class StructlogBatchObserver:
    """Delegates batching events to structlog.

    Satisfies the BatchObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def batch_run_started(self, total_batches: int, total_items: int) -> None:
        self._log.info(
            "batch.run_started", total_batches=total_batches, total_items=total_items
        )

    def batch_started(self, batch_index: int, total_batches: int, size: int) -> None:
        self._log.info(
            "batch.started",
            batch_index=batch_index,
            total_batches=total_batches,
            size=size,
        )

    def batch_completed(self, batch_index: int, total_batches: int) -> None:
        self._log.info(
            "batch.completed", batch_index=batch_index, total_batches=total_batches
        )

    def batch_failed(self, batch_index: int, total_batches: int, reason: str) -> None:
        self._log.error(
            "batch.failed",
            batch_index=batch_index,
            total_batches=total_batches,
            reason=reason,
        )

    def batch_run_completed(self, total_batches: int) -> None:
        self._log.info("batch.run_completed", total_batches=total_batches)
