"""ReconciliationJob — pushes store records to the remote API in batches."""

import asyncio
import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from job_relay.batching.application.runner import BatchRunner
from job_relay.batching.domain.splitter import Batch, split_batches
from job_relay.config.domain.jobs import ReconciliationJobConfig
from job_relay.core.errors import JobRelayError
from job_relay.jobs.application.run import CANCELLED, JobRun
from job_relay.jobs.application.tracked_call import TrackedCall
from job_relay.jobs.domain.observer import JobObserver
from job_relay.jobs.domain.result import JobResult
from job_relay.jobs.domain.trigger import TimerInfo
from job_relay.records.domain.query import build_query
from job_relay.records.domain.record import WorkItem, to_work_item
from job_relay.records.domain.source import RecordSource
from job_relay.remote.domain.endpoint import RemoteEndpointFactory
from job_relay.remote.domain.response import RemoteResponse
from job_relay.remote.domain.timing import CallTimer, Timed
from job_relay.retry.domain.policy import build_retry_policy
from job_relay.telemetry.application.reporter import TelemetryReporter

JOB_NAME = "reconciliation"


class ReconciliationJob:
    """Fetches records, maps them to work items and sends them batch by batch.

    The first batch to exhaust its retries ends the run as failed; partial
    reconciliation is not attempted. The record source and the HTTP client are
    each opened and released within the run.
    """

    def __init__(
        self,
        config: ReconciliationJobConfig,
        source: RecordSource,
        endpoint_factory: RemoteEndpointFactory,
        batch_runner: BatchRunner,
        reporter: TelemetryReporter,
        observer: JobObserver,
        timer: CallTimer | None = None,
        now: Callable[[], datetime] = lambda: datetime.now(UTC),
        run_id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ) -> None:
        self._config = config
        self._source = source
        self._endpoint_factory = endpoint_factory
        self._batch_runner = batch_runner
        self._reporter = reporter
        self._observer = observer
        self._timer = timer or CallTimer()
        self._now = now
        self._run_id_factory = run_id_factory

    async def run(self, trigger: TimerInfo) -> JobResult:
        run = JobRun(
            job=JOB_NAME,
            run_id=self._run_id_factory(),
            observer=self._observer,
            reporter=self._reporter,
        )

        try:
            run.begin(
                trigger=trigger, config=self._config, telemetry=self._config.telemetry
            )
            batches = await self._prepare(run)
            await self._send(run, batches)
        except JobRelayError as exc:
            return run.fail(reason=str(exc))
        except asyncio.CancelledError:
            run.fail(reason=CANCELLED)
            raise
        else:
            return run.succeed()
        finally:
            run.close()

    async def _prepare(self, run: JobRun) -> list[Batch[WorkItem]]:
        window = self._config.query
        run.step(
            "records_queried",
            database=self._config.store.database,
            query=build_query(window),
        )

        records = await self._source.fetch(window)
        now = self._now()
        items = [to_work_item(record, now) for record in records]
        run.step("records_loaded", count=len(items))

        batches = split_batches(items, self._config.batch_size)
        run.step("batching", batch_size=self._config.batch_size, batches=len(batches))
        return batches

    async def _send(self, run: JobRun, batches: list[Batch[WorkItem]]) -> None:
        policy = build_retry_policy(self._config.retry)
        async with self._endpoint_factory.open(self._config.endpoint) as endpoint:
            call = TrackedCall(
                endpoint=endpoint,
                timer=self._timer,
                reporter=self._reporter,
                run=run,
            )

            async def send_batch(
                batch: Batch[WorkItem], attempt: int
            ) -> Timed[RemoteResponse]:
                payload = [item.to_payload() for item in batch]
                return await call.send(payload, attempt)

            await self._batch_runner.run(batches, send=send_batch, policy=policy)
