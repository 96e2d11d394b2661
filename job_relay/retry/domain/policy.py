"""Delay policies and the RetryPolicy value object.

Both delay variants are pure functions of the 1-based index of the attempt
that just failed, returning the wait in milliseconds before the next attempt.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from job_relay.config.domain.retry import RetryConfig


class SteppedLinearDelay(BaseModel, frozen=True):
    """First retry is immediate; each later retry waits one more ``base_delay_ms``.

    With four retries the waits are 0, base, 2*base, 3*base.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["stepped_linear"] = "stepped_linear"
    base_delay_ms: int = Field(ge=0)

    def __call__(self, attempt_index: int) -> int:
        _check_attempt_index(attempt_index)
        return (attempt_index - 1) * self.base_delay_ms


class ExponentialDelay(BaseModel, frozen=True):
    """Waits ``2**attempt_index * base_delay_ms``; attempt 1 already waits 2*base."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["exponential"] = "exponential"
    base_delay_ms: int = Field(ge=0)

    def __call__(self, attempt_index: int) -> int:
        _check_attempt_index(attempt_index)
        return (2**attempt_index) * self.base_delay_ms


DelayPolicy = Annotated[
    SteppedLinearDelay | ExponentialDelay, Field(discriminator="kind")
]


class RetryPolicy(BaseModel, frozen=True):
    """Attempt budget plus delay function, fixed for the lifetime of one job run.

    A ``max_attempts`` of 0 is tolerated and behaves like 1: the operation is
    always invoked at least once.
    """

    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(ge=0)
    delay: DelayPolicy

    @property
    def attempt_budget(self) -> int:
        return max(self.max_attempts, 1)

    def delay_ms(self, attempt_index: int) -> int:
        return self.delay(attempt_index)


def build_retry_policy(config: RetryConfig) -> RetryPolicy:
    """Construct the RetryPolicy described by a RetryConfig."""
    delay: SteppedLinearDelay | ExponentialDelay
    if config.strategy == "stepped_linear":
        delay = SteppedLinearDelay(base_delay_ms=config.base_delay_ms)
    else:
        delay = ExponentialDelay(base_delay_ms=config.base_delay_ms)
    return RetryPolicy(max_attempts=config.max_attempts, delay=delay)


def _check_attempt_index(attempt_index: int) -> None:
    if attempt_index < 1:
        raise ValueError(f"attempt_index must be >= 1, got {attempt_index}")
