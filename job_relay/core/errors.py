"""Base exception classes for all job-relay-specific errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from job_relay.retry.domain.attempt import AttemptRecord


class JobRelayError(Exception):
    """Base class for all job-relay errors.

    ``attempt`` is populated by CallTimer when the error escaped a timed call,
    so that telemetry has a duration even on the failure path.
    """

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
        self.attempt: "AttemptRecord | None" = None


class ConfigurationError(JobRelayError):
    """Base class for errors that must abort a run before any remote attempt."""
