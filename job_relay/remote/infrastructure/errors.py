"""Error types raised by remote-call infrastructure."""

from job_relay.core.errors import JobRelayError


class TransientCallError(JobRelayError):
    """Raised when a remote call fails in a way that may succeed on retry.

    ``status_code`` is None when no response was received (network error or
    timeout).
    """

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        super().__init__(f"Failed to call remote endpoint: {reason}", retriable=True)
        self.status_code = status_code
