"""Tests for describe_config."""

from job_relay.config.domain.jobs import LandingsJobConfig, ReconciliationJobConfig
from job_relay.config.domain.telemetry import TelemetryConfig
from job_relay.jobs.domain.settings import describe_config


class TestDescribeConfig:
    """Configs flatten to dotted keys with secrets masked."""

    def test_flattens_nested_fields(self) -> None:
        settings = describe_config(LandingsJobConfig())

        assert settings["endpoint.url"] == "http://localhost:9000/v1/jobs/landings"
        assert settings["retry.max_attempts"] == "5"
        assert settings["retry.strategy"] == "stepped_linear"
        assert settings["endpoint.ca_bundle"] == "None"

    def test_masks_api_key(self) -> None:
        settings = describe_config(ReconciliationJobConfig())

        assert settings["endpoint.api_key"] == "****"
        assert settings["batch_size"] == "1000"
        assert settings["query.start_date"] == "2025-01-09"

    def test_masks_connection_string(self) -> None:
        config = LandingsJobConfig(
            telemetry=TelemetryConfig(connection_string="InstrumentationKey=secret")
        )

        settings = describe_config(config)

        assert settings["telemetry.connection_string"] == "****"
        assert "secret" not in "".join(settings.values())

    def test_unset_secret_is_not_masked(self) -> None:
        settings = describe_config(LandingsJobConfig())

        assert settings["telemetry.connection_string"] == "None"
