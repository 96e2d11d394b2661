"""Observer port for the batching domain."""

from typing import Protocol


class BatchObserver(Protocol):
    def batch_run_started(self, total_batches: int, total_items: int) -> None: ...

    def batch_started(self, batch_index: int, total_batches: int, size: int) -> None: ...

    def batch_completed(self, batch_index: int, total_batches: int) -> None: ...

    def batch_failed(self, batch_index: int, total_batches: int, reason: str) -> None: ...

    def batch_run_completed(self, total_batches: int) -> None: ...
