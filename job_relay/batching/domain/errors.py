"""Error types raised by the batching domain."""

from job_relay.core.errors import ConfigurationError, JobRelayError


class InvalidBatchSizeError(ConfigurationError):
    """Raised when a batch size below 1 is requested."""

    def __init__(self, batch_size: int) -> None:
        super().__init__(f"Failed to split batches: batch size must be >= 1, got {batch_size}")
        self.batch_size = batch_size


class BatchRunAbortedError(JobRelayError):
    """Raised when a batch exhausted its retries; later batches were not sent."""

    def __init__(self, batch_index: int, total_batches: int, cause: Exception) -> None:
        super().__init__(
            f"Failed to send batch {batch_index + 1} of {total_batches}: {cause}"
        )
        self.batch_index = batch_index
        self.total_batches = total_batches
        self.cause = cause
