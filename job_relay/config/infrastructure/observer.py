"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, job: str, source: str) -> None:
        self._log.info("config.loaded", job=job, source=source)

    def config_overridden(self, job: str, keys: list[str]) -> None:
        self._log.info("config.overridden", job=job, keys=keys)
