"""LandingsJob — asks the remote data reader to start its landings job."""

import asyncio
import uuid
from collections.abc import Callable

from job_relay.config.domain.jobs import LandingsJobConfig
from job_relay.core.errors import JobRelayError
from job_relay.jobs.application.run import CANCELLED, JobRun
from job_relay.jobs.application.tracked_call import TrackedCall
from job_relay.jobs.domain.observer import JobObserver
from job_relay.jobs.domain.result import JobResult
from job_relay.jobs.domain.trigger import TimerInfo
from job_relay.remote.domain.endpoint import RemoteEndpointFactory
from job_relay.remote.domain.timing import CallTimer
from job_relay.retry.application.executor import RetryExecutor
from job_relay.retry.domain.policy import build_retry_policy
from job_relay.telemetry.application.reporter import TelemetryReporter

JOB_NAME = "landings"


class LandingsJob:
    """Sends one bodiless request, retried under a stepped-linear policy by default.

    Retry exhaustion is reported through the returned JobResult rather than
    raised, so the host sees a clean failure signal.
    """

    def __init__(
        self,
        config: LandingsJobConfig,
        endpoint_factory: RemoteEndpointFactory,
        executor: RetryExecutor,
        reporter: TelemetryReporter,
        observer: JobObserver,
        timer: CallTimer | None = None,
        run_id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ) -> None:
        self._config = config
        self._endpoint_factory = endpoint_factory
        self._executor = executor
        self._reporter = reporter
        self._observer = observer
        self._timer = timer or CallTimer()
        self._run_id_factory = run_id_factory

    async def run(self, trigger: TimerInfo) -> JobResult:
        run = JobRun(
            job=JOB_NAME,
            run_id=self._run_id_factory(),
            observer=self._observer,
            reporter=self._reporter,
        )
        policy = build_retry_policy(self._config.retry)

        try:
            run.begin(
                trigger=trigger, config=self._config, telemetry=self._config.telemetry
            )
            async with self._endpoint_factory.open(self._config.endpoint) as endpoint:
                call = TrackedCall(
                    endpoint=endpoint,
                    timer=self._timer,
                    reporter=self._reporter,
                    run=run,
                )
                await self._executor.execute(
                    lambda attempt: call.send(None, attempt),
                    policy=policy,
                    name=endpoint.request_name,
                )
        except JobRelayError as exc:
            return run.fail(reason=str(exc))
        except asyncio.CancelledError:
            run.fail(reason=CANCELLED)
            raise
        else:
            return run.succeed()
        finally:
            run.close()
