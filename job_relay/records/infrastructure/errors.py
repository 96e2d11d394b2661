"""Error types raised by records infrastructure."""

from job_relay.core.errors import JobRelayError


class RecordSourceError(JobRelayError):
    """Raised when the store cannot be queried or returns malformed records."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to fetch records: {reason}")
