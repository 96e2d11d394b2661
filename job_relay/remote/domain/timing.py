"""CallTimer — stamps and measures a single outbound call on both exit paths."""

import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from job_relay.core.errors import JobRelayError
from job_relay.retry.domain.attempt import AttemptOutcome, AttemptRecord


@dataclass(frozen=True)
class Timed[T]:
    """A successful call result augmented with its AttemptRecord."""

    value: T
    record: AttemptRecord

    @property
    def duration_ms(self) -> int:
        return self.record.duration_ms


class CallTimer:
    """Wraps one async call and records how long it took.

    On success the value is returned inside a ``Timed``; on a JobRelayError the
    finalized AttemptRecord is attached to the error as ``attempt`` before it
    propagates. Anything else (including cancellation) propagates untouched and
    produces no record. The timer owns no timeout.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._clock = clock
        self._now = now

    async def measure[T](
        self, call: Callable[[], Awaitable[T]], attempt_index: int
    ) -> Timed[T]:
        started_at = self._now()
        start = self._clock()
        try:
            value = await call()
        except JobRelayError as exc:
            exc.attempt = AttemptRecord(
                attempt_index=attempt_index,
                started_at=started_at,
                outcome=AttemptOutcome.FAILURE,
                duration_ms=self._elapsed_ms(start),
                error=str(exc),
            )
            raise

        return Timed(
            value=value,
            record=AttemptRecord(
                attempt_index=attempt_index,
                started_at=started_at,
                outcome=AttemptOutcome.SUCCESS,
                duration_ms=self._elapsed_ms(start),
            ),
        )

    def _elapsed_ms(self, start: float) -> int:
        return max(int((self._clock() - start) * 1000), 0)
