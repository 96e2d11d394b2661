"""CLI entrypoint for job-relay — typer app with one command per job."""

import asyncio
import sys
from pathlib import Path

import structlog
import typer

from job_relay.batching.application.runner import BatchRunner
from job_relay.batching.infrastructure.observer import StructlogBatchObserver
from job_relay.config.domain.jobs import LandingsJobConfig, ReconciliationJobConfig
from job_relay.config.infrastructure.observer import StructlogConfigObserver
from job_relay.config.infrastructure.overrides import Overrides, parse_overrides
from job_relay.config.infrastructure.yaml_loader import YamlConfigLoader
from job_relay.core.errors import JobRelayError
from job_relay.jobs.application import landings, reconciliation
from job_relay.jobs.application.landings import LandingsJob
from job_relay.jobs.application.reconciliation import ReconciliationJob
from job_relay.jobs.domain.result import JobResult
from job_relay.jobs.domain.trigger import TimerInfo
from job_relay.jobs.infrastructure.observer import StructlogJobObserver
from job_relay.records.infrastructure.mongo_source import MongoRecordSource
from job_relay.records.infrastructure.observer import StructlogRecordsObserver
from job_relay.remote.infrastructure.httpx_endpoint import HttpxRemoteEndpointFactory
from job_relay.remote.infrastructure.observer import StructlogRemoteObserver
from job_relay.retry.application.executor import RetryExecutor
from job_relay.retry.infrastructure.observer import StructlogRetryObserver
from job_relay.telemetry.application.reporter import TelemetryReporter
from job_relay.telemetry.infrastructure.azure_monitor import AzureMonitorSinkFactory
from job_relay.telemetry.infrastructure.observer import StructlogTelemetryObserver

app = typer.Typer(add_completion=False)

_CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Path to a job config YAML (defaults apply when omitted)"
)
_SET_OPTION = typer.Option(
    [], "--set", "-s", help="Override a config value, e.g. --set retry.max_attempts=3"
)
_PAST_DUE_OPTION = typer.Option(
    False, "--past-due", help="Mark this invocation as running later than scheduled"
)
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def _parse_sets(pairs: list[str]) -> Overrides:
    try:
        return parse_overrides(pairs)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--set") from exc


def _reporter(service_name: str) -> TelemetryReporter:
    return TelemetryReporter(
        sink_factory=AzureMonitorSinkFactory(),
        observer=StructlogTelemetryObserver(),
        service_name=service_name,
    )


def _finish(result: JobResult) -> None:
    if not result.succeeded:
        raise typer.Exit(code=1)


@app.command("landings")
def landings_command(
    config_path: Path | None = _CONFIG_OPTION,
    sets: list[str] = _SET_OPTION,
    past_due: bool = _PAST_DUE_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Trigger the remote landings job, retrying with stepped-linear delays."""
    _configure_structlog(log_format=log_format)
    overrides = _parse_sets(sets)
    try:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
            LandingsJobConfig,
            job=landings.JOB_NAME,
            path=config_path,
            overrides=overrides,
        )
        job = LandingsJob(
            config=config,
            endpoint_factory=HttpxRemoteEndpointFactory(observer=StructlogRemoteObserver()),
            executor=RetryExecutor(observer=StructlogRetryObserver()),
            reporter=_reporter(config.telemetry.service_name),
            observer=StructlogJobObserver(),
        )
        result = asyncio.run(job.run(TimerInfo(past_due=past_due)))
    except KeyboardInterrupt:
        typer.echo("Job interrupted.")
        sys.exit(1)
    except JobRelayError as exc:
        typer.echo(str(exc))
        sys.exit(1)

    _finish(result)


@app.command("reconcile")
def reconcile_command(
    config_path: Path | None = _CONFIG_OPTION,
    sets: list[str] = _SET_OPTION,
    past_due: bool = _PAST_DUE_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Send store records to the remote API in batches, retrying each batch."""
    _configure_structlog(log_format=log_format)
    overrides = _parse_sets(sets)
    try:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
            ReconciliationJobConfig,
            job=reconciliation.JOB_NAME,
            path=config_path,
            overrides=overrides,
        )
        job = ReconciliationJob(
            config=config,
            source=MongoRecordSource(
                config=config.store, observer=StructlogRecordsObserver()
            ),
            endpoint_factory=HttpxRemoteEndpointFactory(observer=StructlogRemoteObserver()),
            batch_runner=BatchRunner(
                executor=RetryExecutor(observer=StructlogRetryObserver()),
                observer=StructlogBatchObserver(),
            ),
            reporter=_reporter(config.telemetry.service_name),
            observer=StructlogJobObserver(),
        )
        result = asyncio.run(job.run(TimerInfo(past_due=past_due)))
    except KeyboardInterrupt:
        typer.echo("Job interrupted.")
        sys.exit(1)
    except JobRelayError as exc:
        typer.echo(str(exc))
        sys.exit(1)

    _finish(result)


if __name__ == "__main__":
    app()
