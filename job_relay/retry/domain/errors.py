"""Error types raised when a retry sequence ends in failure."""

from job_relay.core.errors import JobRelayError


class RetryBudgetExhaustedError(JobRelayError):
    """Raised after the last permitted attempt failed.

    The final failure is available as ``last_error`` and as ``__cause__``.
    """

    def __init__(self, operation: str, attempts: int, last_error: Exception) -> None:
        super().__init__(
            f"Failed to complete '{operation}' after {attempts} attempt(s):"
            f" {last_error}"
        )
        self.operation = operation
        self.attempts = attempts
        self.last_error = last_error
